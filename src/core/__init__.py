"""Core decision logic for registry rescan sweeps."""

from core.models import (
    Action,
    ActionKind,
    DecisionInput,
    Manifest,
    RunSummary,
    ScanStatus,
    ScanStatusKind,
    TagScanState,
    VulnerabilitySummary,
)
from core.date_diff import days_between, get_difference
from core.decision import decide

__all__ = [
    "Action",
    "ActionKind",
    "DecisionInput",
    "Manifest",
    "RunSummary",
    "ScanStatus",
    "ScanStatusKind",
    "TagScanState",
    "VulnerabilitySummary",
    "days_between",
    "get_difference",
    "decide",
]
