"""Quota-show command implementation.

Implements `reana-client quota-show`, which prints the usage and limit of
one quota resource of the current user.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option


def _stat(resource: dict[str, Any], report: str) -> dict[str, Any]:
    stat = resource.get(report)
    return stat if isinstance(stat, dict) else {}


def _raw(stat: dict[str, Any]) -> float:
    return float(stat.get("raw") or 0)


def format_quota_usage(
    resource: dict[str, Any], human_readable: bool
) -> tuple[str, str]:
    """Usage line of a resource and the color to print it with.

    Returns:
        Tuple of (message, color); the color is "" when the resource has no
        limit or no health
    """
    from reana_cli.cli.output import RESOURCE_HEALTH_COLORS

    usage = _stat(resource, "usage")
    limit = _stat(resource, "limit")
    health = resource.get("health") or ""

    color = ""
    if _raw(limit) > 0:
        percentage = f"{_raw(usage) / _raw(limit) * 100:.0f}%"
        if human_readable:
            limit_info = f"out of {limit.get('human_readable', '')} used ({percentage})"
        else:
            limit_info = f"out of {_raw(limit):.0f} used ({percentage})"
        if health:
            color = RESOURCE_HEALTH_COLORS.get(health, "")
    else:
        limit_info = "used"

    usage_msg = usage.get("human_readable", "") if human_readable else f"{_raw(usage):.0f}"
    return f"{usage_msg} {limit_info}", color


def format_quota_report(
    resource: dict[str, Any], report: str, human_readable: bool
) -> str:
    """Value of a single report (``limit`` or ``usage``) of a resource."""
    stat = _stat(resource, report)
    if not stat or _raw(stat) <= 0:
        return f"No {report}."
    if human_readable:
        return str(stat.get("human_readable", ""))
    return f"{_raw(stat):.0f}"


@reana_command()
def quota_show(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    report: str = typer.Option(
        "", "--report", help="Specify quota report type. e.g. limit, usage."
    ),
    resource: str = typer.Option(
        "", "--resource", help="Specify quota resource. e.g. disk, memory."
    ),
    show_resources: bool = typer.Option(
        False, "--resources", help="Print available resources."
    ),
    human_readable: bool = typer.Option(
        False, "--human-readable", "-h", help="Show disk size in human readable format."
    ),
) -> None:
    """Show user quota.

    Examples:
        reana-client quota-show --resource disk --report limit

        reana-client quota-show --resource disk --report usage

        reana-client quota-show --resource disk

        reana-client quota-show --resources
    """
    from reana_cli.cli.command_base import connect, is_option_set
    from reana_cli.cli.output import print_colorable
    from reana_cli.config.constants import QUOTA_REPORTS
    from reana_cli.config.validation import validate_at_least_one, validate_choice
    from reana_cli.errors import ValidationError

    provided = [
        name
        for name, param in (("resource", "resource"), ("resources", "show_resources"))
        if is_option_set(ctx, param)
    ]
    try:
        validate_at_least_one(provided, ["resource", "resources"])
    except ValidationError as e:
        raise ValidationError(f"{e}\n{ctx.get_usage()}") from None

    report_given = is_option_set(ctx, "report")
    if report_given:
        validate_choice(report, QUOTA_REPORTS, "report")

    with connect(ctx.obj, access_token) as api:
        quota = api.get_you().get("quota") or {}

    available = list(quota)
    if show_resources:
        print("\n".join(available))
        return

    resource_info = quota.get(resource)
    if not isinstance(resource_info, dict):
        joined = "', '".join(available)
        raise ValidationError(
            f"resource '{resource}' is not valid\n"
            f"Available resources are '{joined}'"
        )

    if not report_given:
        message, color = format_quota_usage(resource_info, human_readable)
        print_colorable(message + "\n", color)
    else:
        print(format_quota_report(resource_info, report, human_readable))
