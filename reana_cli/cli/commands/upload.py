"""Upload command implementation.

Implements `reana-client upload`, which sends files and directories to the
workspace of a workflow. Without arguments, the input files and directories
of the workflow's specification are uploaded.
"""

import os
import stat
from typing import Callable, Iterator, Optional, Sequence

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.errors import CommandError
from reana_cli.logging import get_logger

logger = get_logger(__name__)


def validate_inputs(files: Sequence[str], directories: Sequence[str]) -> None:
    """Check that declared input files and directories have the right kind.

    Raises:
        CommandError: If a path is missing, or is a directory listed as a
            file, or a file listed as a directory
    """
    for path in files:
        _stat(path)
        if os.path.isdir(path):
            raise CommandError(f"found directory in `inputs.files`: {path}")
    for path in directories:
        _stat(path)
        if not os.path.isdir(path):
            raise CommandError(f"found file in `inputs.directories`: {path}")


def _stat(path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except FileNotFoundError:
        raise CommandError(f"file '{path}' does not exist") from None


def walk(top: str) -> Iterator[tuple[str, os.stat_result]]:
    """Yield ``top`` and everything below it in lexical order.

    Symbolic links are yielded but never followed.
    """
    info = _stat(top)
    yield top, info
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(top)):
            yield from walk(os.path.join(top, name))


def collect_files(
    paths: Sequence[str], on_skip: Callable[[str], None]
) -> list[str]:
    """Collect the regular files under ``paths``, each one once.

    Args:
        paths: Files and directories to traverse
        on_skip: Called with every path that is neither a regular file nor
            a directory

    Raises:
        CommandError: If a path does not exist
    """
    logger.debug("paths: %s", ", ".join(paths))
    files: list[str] = []
    for top in paths:
        for path, info in walk(top):
            if stat.S_ISDIR(info.st_mode):
                continue
            if not stat.S_ISREG(info.st_mode):
                on_skip(path)
                continue
            if path not in files:
                files.append(path)
    logger.debug("files: %s", ", ".join(files))
    return files


@reana_command()
def upload(
    ctx: typer.Context,
    sources: Optional[list[str]] = typer.Argument(
        None, help="Files and directories to upload."
    ),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
) -> None:
    """Upload files and directories to workspace.

    The default behaviour is to upload all input files and directories
    specified in the reana.yaml file.

    Examples:
        reana-client upload -w myanalysis.42

        reana-client upload -w myanalysis.42 code/mycode.py
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message

    with connect(ctx.obj, access_token) as api:
        if sources:
            paths = list(sources)
        else:
            spec = api.get_workflow_specification(workflow).get("specification") or {}
            inputs = spec.get("inputs") or {}
            files = inputs.get("files") or []
            directories = inputs.get("directories") or []
            validate_inputs(files, directories)
            paths = files + directories

        to_upload = collect_files(
            paths,
            lambda path: display_message(f"Ignoring symlink {path}", MessageType.INFO),
        )
        for path in to_upload:
            try:
                with open(path, "rb") as f:
                    content = f.read()
            except PermissionError:
                raise CommandError(f"file '{path}' is not readable") from None
            api.upload_file(workflow, path, content)
            display_message(
                f"File {path} was successfully uploaded.", MessageType.SUCCESS
            )
