"""
Rescan decision rules.

Maps one tag snapshot, the staleness threshold and the current time to
exactly one Action. Rules are evaluated in order and the first match wins:

1. A pending scan is never re-triggered.
2. A scan older than the threshold is always forced, whatever the status
   or rescan flag say.
3. A successful scan not flagged for rescan is up to date.
4. A tag flagged for rescan, or never scanned, is scanned.
5. Anything else is reported as unknown.

The module is pure: no logging, no I/O, no mutation of its inputs.
"""

from datetime import datetime

from core.date_diff import EPOCH_ZERO, days_between
from core.models import Action, DecisionInput, TagScanState


def compute_days_since(state: TagScanState, now: datetime) -> int:
    """
    Days since the tag's last completed scan.

    A tag that was never scanned is measured from the year-1 zero
    timestamp, which yields a count far beyond any valid threshold.
    """
    completed_at = state.check_completed_at
    if completed_at is None:
        completed_at = EPOCH_ZERO
    return days_between(completed_at, now)


def decide(decision_input: DecisionInput) -> Action:
    """
    Decide what to do with one tag-detail record.

    Args:
        decision_input: Tag snapshot, threshold (1..10000) and reference time

    Returns:
        The single matching Action
    """
    state = decision_input.state
    status = state.last_scan_status
    should_rescan = state.should_rescan

    if status.is_pending:
        return Action.skip_pending()

    days_since = compute_days_since(state, decision_input.now)
    if state.vuln_summary.never_scanned or days_since > decision_input.threshold_days:
        return Action.force_stale(days_since)

    if not should_rescan and status.is_ok:
        return Action.skip_up_to_date()

    # The registry reports should_rescan=false for never-scanned tags.
    if should_rescan or (status.is_unknown and not should_rescan):
        return Action.rescan_requested(days_since)

    return Action.unknown()


__all__ = ["compute_days_since", "decide"]
