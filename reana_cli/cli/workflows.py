"""Helpers for workflow names, run timings and status messages."""

import re
from datetime import datetime
from typing import Callable, Optional

from reana_cli.errors import ReanaError

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"

_STATUS_VERBS = {
    "finished": "has been",
    "failed": "has",
    "created": "has been",
    "stopped": "has been",
    "queued": "has been",
    "deleted": "has been",
    "running": "is",
    "pending": "is",
}

_CD_PREFIX = 'bash -c "cd '


def get_name_and_run_number(workflow: str) -> tuple[str, str]:
    """Split ``name.run`` on the first dot; the run number may be empty.

    >>> get_name_and_run_number("my_workflow.1.2")
    ('my_workflow', '1.2')
    """
    name, _, run_number = workflow.partition(".")
    return name, run_number


def from_iso(date: str) -> datetime:
    """Parse a server timestamp (second precision, no timezone)."""
    return datetime.strptime(date, ISO_FORMAT)


def get_duration(
    run_started_at: Optional[str],
    run_finished_at: Optional[str],
    now: Callable[[], datetime] = datetime.now,
) -> Optional[int]:
    """Run duration in whole seconds.

    Returns None when the run has not started; a run still in progress is
    measured up to ``now()``.
    """
    if not run_started_at:
        return None
    start = from_iso(run_started_at)
    end = from_iso(run_finished_at) if run_finished_at else now()
    return round((end - start).total_seconds())


def strip_cd_prefix(command: str) -> str:
    """Remove the ``bash -c "cd <dir>; ...`` wrapper added by job runners."""
    if command.startswith(_CD_PREFIX):
        index = command.find(";")
        command = command[index + 2 : -2]
    return command


def get_last_command(
    last_command: Optional[str], step_name: Optional[str] = None
) -> str:
    """Command shown for a run: its last command, else its step name, else "-"."""
    if not last_command:
        if not step_name:
            return "-"
        value = step_name
    else:
        value = strip_cd_prefix(last_command)
    return re.sub(r"\n+", "; ", value)


def status_change_message(workflow: str, status: str) -> str:
    """Sentence announcing a workflow's new status, e.g. "w is running".

    Raises:
        ReanaError: If the status is unknown
    """
    verb = _STATUS_VERBS.get(status)
    if verb is None:
        raise ReanaError(f"unrecognised status {status}")
    return f"{workflow} {verb} {status}"
