"""CLI app entry point.

Provides the root Typer app. Its callback installs the log level and
snapshots the environment into an immutable CLIState stored in the Typer
context; every leaf command reads it from there.

Command modules import their heavy dependencies lazily inside the command
body to keep startup fast.
"""

import typer

from reana_cli.cli.commands.close import close
from reana_cli.cli.commands.delete import delete
from reana_cli.cli.commands.diff import diff
from reana_cli.cli.commands.download import download
from reana_cli.cli.commands.du import du
from reana_cli.cli.commands.info import info
from reana_cli.cli.commands.list_cmd import list_workflows
from reana_cli.cli.commands.logs import logs
from reana_cli.cli.commands.ls import ls
from reana_cli.cli.commands.mv import mv
from reana_cli.cli.commands.open_cmd import open_session
from reana_cli.cli.commands.ping import ping
from reana_cli.cli.commands.prune import prune
from reana_cli.cli.commands.quota_show import quota_show
from reana_cli.cli.commands.restart import restart
from reana_cli.cli.commands.retention_rules import retention_rules_list
from reana_cli.cli.commands.rm import rm
from reana_cli.cli.commands.secrets import secrets_add, secrets_delete, secrets_list
from reana_cli.cli.commands.share import share_add, share_remove, share_status
from reana_cli.cli.commands.start import start
from reana_cli.cli.commands.status import status
from reana_cli.cli.commands.stop import stop
from reana_cli.cli.commands.upload import upload
from reana_cli.cli.commands.version import version
from reana_cli.cli.error_handler import report_error
from reana_cli.cli.state import CLIState
from reana_cli.config.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS

app = typer.Typer(
    name="reana-client",
    help="REANA client for interacting with REANA server.",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["--help"]},
)


@app.callback()
def root(
    ctx: typer.Context,
    loglevel: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--loglevel",
        "-l",
        help=f"Sets log level [{'|'.join(LOG_LEVELS)}]",
    ),
) -> None:
    """REANA client for interacting with REANA server."""
    from reana_cli.config.settings import ConfigStore, get_settings
    from reana_cli.config.validation import validate_choice
    from reana_cli.logging import configure_logging

    try:
        validate_choice(loglevel, LOG_LEVELS, "loglevel")
        configure_logging(loglevel)
        settings = get_settings()
    except Exception as e:
        report_error(e, "")
        raise typer.Exit(1) from None

    ctx.obj = CLIState(
        config=ConfigStore.from_settings(settings, log_level=loglevel),
        check_interval=settings.check_interval,
        verify_tls=not settings.skip_tls_verify,
    )


# Server and account
app.command("ping")(ping)
app.command("info")(info)
app.command("version")(version)
app.command("quota-show")(quota_show)

# Workflow runs
app.command("list")(list_workflows)
app.command("status")(status)
app.command("logs")(logs)
app.command("start")(start)
app.command("restart")(restart)
app.command("stop")(stop)
app.command("delete")(delete)
app.command("diff")(diff)

# Workspace
app.command("ls")(ls)
app.command("upload")(upload)
app.command("download")(download)
app.command("du")(du)
app.command("rm")(rm)
app.command("mv")(mv)
app.command("prune")(prune)
app.command("retention-rules-list")(retention_rules_list)

# Interactive sessions
app.command("open")(open_session)
app.command("close")(close)

# Sharing
app.command("share-add")(share_add)
app.command("share-remove")(share_remove)
app.command("share-status")(share_status)

# Secrets
app.command("secrets-add")(secrets_add)
app.command("secrets-list")(secrets_list)
app.command("secrets-delete")(secrets_delete)


def main() -> None:
    """Console script entry point."""
    from dotenv import load_dotenv

    load_dotenv()
    app()


if __name__ == "__main__":
    main()
