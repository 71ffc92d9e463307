"""Polling loop for following a workflow run.

``follow_workflow`` polls the status endpoint until the run leaves the
pending/queued/running states and reports every observed status through a
callback.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from reana_cli.cli.client.api import ReanaAPI
from reana_cli.config.constants import (
    DEFAULT_CHECK_INTERVAL,
    WORKFLOW_FOLLOW_STATUSES,
)
from reana_cli.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PollSettings:
    """Parameters of the follow loop.

    Attributes:
        check_interval: Seconds to wait before each status request
        sleep: Function used to wait, replaceable in tests
    """

    check_interval: float = DEFAULT_CHECK_INTERVAL
    sleep: Callable[[float], None] = time.sleep


def follow_workflow(
    api: ReanaAPI,
    workflow: str,
    current_status: str,
    on_status: Optional[Callable[[str], None]] = None,
    poll: PollSettings = PollSettings(),
) -> str:
    """Poll a workflow's status until it stops progressing.

    Args:
        api: REANA API access
        workflow: Workflow name or UUID
        current_status: Status reported when the run was started
        on_status: Callback invoked with every polled status
        poll: Interval and sleep function of the loop

    Returns:
        The first status outside pending/queued/running (e.g. ``finished``)

    Raises:
        APIError: If a status request fails
        ConnectionError: If the server cannot be reached
    """
    status = current_status
    while status in WORKFLOW_FOLLOW_STATUSES:
        poll.sleep(poll.check_interval)
        status = api.get_workflow_status(workflow).get("status", "")
        logger.debug("Workflow %s status: %s", workflow, status)
        if on_status is not None:
            on_status(status)
    return status
