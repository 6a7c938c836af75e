"""
Formatting utilities for dtrscan output.

Provides the fixed-width per-tag log line and the helpers used to render
its fields.
"""

from datetime import datetime
from typing import Optional

from core.models import ActionKind, RunSummary, TagScanState

LABEL_PENDING = "Scan is pending for"
LABEL_UP_TO_DATE = "Scan is up-to-date for"
LABEL_DRY_RUN = "Will scan if no_dry_run"
LABEL_SENDING = "Sending request to scan"
LABEL_UNKNOWN = "Scan status is unknown for"

NEVER_SCANNED = "never"

ACTION_NAMES = {
    ActionKind.SKIP_PENDING: "pending",
    ActionKind.FORCE_STALE: "stale",
    ActionKind.SKIP_UP_TO_DATE: "up-to-date",
    ActionKind.RESCAN_REQUESTED: "rescan",
    ActionKind.UNKNOWN: "unknown",
}


def format_number(num: int) -> str:
    """
    Format number with thousands separators.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(0)
        '0'
    """
    return f"{num:,}"


def format_flag(value: bool) -> str:
    """Render a boolean the way the registry API spells it ("true"/"false")."""
    return "true" if value else "false"


def format_timestamp(value: Optional[datetime]) -> str:
    """
    Render a scan completion time.

    Examples:
        >>> from datetime import datetime, timezone
        >>> format_timestamp(datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc))
        '2024-03-01 12:30:00 +0000 UTC'
        >>> format_timestamp(None)
        'never'
    """
    if value is None:
        return NEVER_SCANNED
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.tzinfo is not None:
        text += " " + value.strftime("%z %Z")
    return text


def format_tag_line(
    label: str,
    state: TagScanState,
    days_since: Optional[int] = None,
    reason: Optional[str] = None,
) -> str:
    """
    Build the fixed-width log line describing one tag decision.

    Columns are: label, namespace, repository, tag, status code, rescan flag
    and completion time. Scan lines also carry the staleness in days and
    the trigger reason.

    Args:
        label: Leading description (one of the LABEL_* constants)
        state: Tag snapshot being reported
        days_since: Days since last scan, for scan lines
        reason: Trigger reason ("stale" or "rescan"), for scan lines

    Returns:
        Formatted line without trailing whitespace
    """
    line = (
        f"{label:<27} "
        f"{state.namespace:<16} "
        f"{state.repository:<45} "
        f"{state.tag:<45} "
        f"{str(state.last_scan_status):<1} "
        f"{format_flag(state.should_rescan):<5} "
        f"{format_timestamp(state.check_completed_at):<40}"
    )
    if days_since is not None:
        line += f" {days_since} days ago"
        if reason:
            line += f" ({reason})"
    return line.rstrip()


def format_unknown_line(state: TagScanState) -> str:
    """Build the shorter line reported for tags no rule could classify."""
    line = (
        f"{LABEL_UNKNOWN:<27} "
        f"{state.namespace:<16} "
        f"{state.repository:<45} "
        f"{state.tag:<45}"
    )
    return line.rstrip()


def format_action_counts(summary: RunSummary) -> str:
    """
    Summarize how many records ended in each action.

    Examples:
        >>> format_action_counts(RunSummary(actions={ActionKind.FORCE_STALE: 2}))
        'pending 0, stale 2, up-to-date 0, rescan 0, unknown 0'
    """
    return ", ".join(
        f"{ACTION_NAMES[kind]} {summary.count(kind)}" for kind in ActionKind
    )


__all__ = [
    "LABEL_PENDING",
    "LABEL_UP_TO_DATE",
    "LABEL_DRY_RUN",
    "LABEL_SENDING",
    "LABEL_UNKNOWN",
    "format_number",
    "format_flag",
    "format_timestamp",
    "format_tag_line",
    "format_unknown_line",
    "format_action_counts",
]
