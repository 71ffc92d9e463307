"""Download command implementation.

Implements `reana-client download`, which fetches workspace files into a
local directory or prints them on stdout.
"""

import io
import os
import zipfile
from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)

STDOUT_PATH = "-"


def display_file_content(content: bytes, zipped: bool) -> None:
    """Write a downloaded file, or every member of a zip archive, to stdout."""
    if not zipped:
        typer.echo(content, nl=False)
        return
    with zipfile.ZipFile(io.BytesIO(content)) as archive:
        for member in archive.infolist():
            typer.echo(archive.read(member), nl=False)


def store_file_content(output_directory: str, name: str, content: bytes) -> str:
    """Write a downloaded file below ``output_directory``, creating parents.

    Returns:
        Path of the written file
    """
    path = os.path.join(output_directory, name)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(content)
    return path


@reana_command()
def download(
    ctx: typer.Context,
    filenames: Optional[list[str]] = typer.Argument(
        None, help="Files or directories to download."
    ),
    output_directory: str = typer.Option(
        "",
        "--output-directory",
        "-o",
        help="Path to the directory where files will be downloaded. "
        "Use '-' to print the content on the standard output.",
    ),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
) -> None:
    """Download workspace files.

    The default behaviour is to download all output files and directories
    specified in the reana.yaml file.

    Examples:
        reana-client download -w myanalysis.42

        reana-client download -w myanalysis.42 results/plot.png -o /tmp

        reana-client download -w myanalysis.42 results/data.csv -o -
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message

    with connect(ctx.obj, access_token) as api:
        if filenames:
            paths = list(filenames)
        else:
            spec = api.get_workflow_specification(workflow).get("specification") or {}
            outputs = spec.get("outputs") or {}
            paths = (outputs.get("files") or []) + (outputs.get("directories") or [])
        logger.debug("Download paths: %s", ", ".join(paths))

        for path in paths:
            downloaded = api.download_file(workflow, path)
            if output_directory == STDOUT_PATH:
                display_file_content(downloaded.content, downloaded.zipped)
                continue
            store_file_content(output_directory, downloaded.name, downloaded.content)
            display_message(
                f"File {downloaded.name} was successfully downloaded.",
                MessageType.SUCCESS,
            )
