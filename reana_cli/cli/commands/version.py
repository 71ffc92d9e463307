"""Version command implementation."""

import typer


def version() -> None:
    """Show version of the REANA client."""
    from reana_cli import __version__

    typer.echo(__version__)
