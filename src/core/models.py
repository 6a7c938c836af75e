"""
Domain models for registry scan-state evaluation.

This module defines the core data structures used throughout the application.
All models are immutable (frozen dataclasses) to prevent accidental mutation.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from constants import SCAN_STATUS_OK, SCAN_STATUS_PENDING, SCAN_STATUS_UNKNOWN


class ScanStatusKind(str, Enum):
    """Recognized families of registry scan status codes."""

    UNKNOWN = "unknown"
    PENDING = "pending"
    OK = "ok"
    OTHER = "other"


_KNOWN_STATUS_CODES = {
    SCAN_STATUS_UNKNOWN: ScanStatusKind.UNKNOWN,
    SCAN_STATUS_PENDING: ScanStatusKind.PENDING,
    SCAN_STATUS_OK: ScanStatusKind.OK,
}


@dataclass(frozen=True)
class ScanStatus:
    """
    Registry scan status code.

    Codes 0, 5 and 6 have a dedicated kind; every other code (including
    undocumented ones such as 1) is classified as OTHER and keeps its raw
    value for reporting.

    Attributes:
        code: Raw status code as reported by the registry
    """

    code: int = SCAN_STATUS_UNKNOWN

    @classmethod
    def from_code(cls, code: Optional[int]) -> "ScanStatus":
        """Create from a raw registry code, treating a missing code as unknown."""
        if code is None:
            return cls(SCAN_STATUS_UNKNOWN)
        return cls(int(code))

    @property
    def kind(self) -> ScanStatusKind:
        return _KNOWN_STATUS_CODES.get(self.code, ScanStatusKind.OTHER)

    @property
    def is_unknown(self) -> bool:
        return self.kind is ScanStatusKind.UNKNOWN

    @property
    def is_pending(self) -> bool:
        return self.kind is ScanStatusKind.PENDING

    @property
    def is_ok(self) -> bool:
        return self.kind is ScanStatusKind.OK

    def __str__(self) -> str:
        return str(self.code)


@dataclass(frozen=True)
class Manifest:
    """
    Platform of a tag's manifest, needed to address the scan-trigger endpoint.

    Attributes:
        os: Operating system (e.g. "linux")
        architecture: CPU architecture (e.g. "amd64")
    """

    os: str = ""
    architecture: str = ""


@dataclass(frozen=True)
class VulnerabilitySummary:
    """
    Scan state and vulnerability counts reported for a tag.

    Attributes:
        critical: Number of critical vulnerabilities
        major: Number of major vulnerabilities
        minor: Number of minor vulnerabilities
        last_scan_status: Status of the most recent scan
        check_completed_at: When the last scan completed (None if never scanned)
        should_rescan: Whether the registry has flagged the tag for rescan
    """

    critical: int = 0
    major: int = 0
    minor: int = 0
    last_scan_status: ScanStatus = field(default_factory=ScanStatus)
    check_completed_at: Optional[datetime] = None
    should_rescan: bool = False

    @property
    def never_scanned(self) -> bool:
        return self.check_completed_at is None


@dataclass(frozen=True)
class TagScanState:
    """
    Snapshot of a single tag-detail record, as consumed by the decision engine.

    A registry tag name may resolve to several detail records (one per
    platform); each becomes its own TagScanState.

    Attributes:
        namespace: Registry namespace (organization or user)
        repository: Repository name within the namespace
        tag: Tag name
        manifest: Platform of the tagged manifest
        vuln_summary: Scan state and vulnerability counts
    """

    namespace: str
    repository: str
    tag: str
    manifest: Manifest = field(default_factory=Manifest)
    vuln_summary: VulnerabilitySummary = field(default_factory=VulnerabilitySummary)

    @property
    def os(self) -> str:
        return self.manifest.os

    @property
    def architecture(self) -> str:
        return self.manifest.architecture

    @property
    def last_scan_status(self) -> ScanStatus:
        return self.vuln_summary.last_scan_status

    @property
    def should_rescan(self) -> bool:
        return self.vuln_summary.should_rescan

    @property
    def check_completed_at(self) -> Optional[datetime]:
        return self.vuln_summary.check_completed_at

    @property
    def image_ref(self) -> str:
        """Human-readable reference, e.g. "platform/api:1.2"."""
        return f"{self.namespace}/{self.repository}:{self.tag}"

    def __str__(self) -> str:
        if self.os or self.architecture:
            return f"{self.image_ref} ({self.os}/{self.architecture})"
        return self.image_ref


@dataclass(frozen=True)
class DecisionInput:
    """
    Everything the decision engine needs for one evaluation.

    Attributes:
        state: Tag snapshot being evaluated
        threshold_days: Staleness threshold, already clamped by the caller
        now: Reference time for staleness
    """

    state: TagScanState
    threshold_days: int
    now: datetime


class ActionKind(str, Enum):
    """Outcome of evaluating a tag."""

    SKIP_PENDING = "skip_pending"
    FORCE_STALE = "force_stale"
    SKIP_UP_TO_DATE = "skip_up_to_date"
    RESCAN_REQUESTED = "rescan_requested"
    UNKNOWN = "unknown"


_SCAN_REASONS = {
    ActionKind.FORCE_STALE: "stale",
    ActionKind.RESCAN_REQUESTED: "rescan",
}


@dataclass(frozen=True)
class Action:
    """
    Decision for a single tag.

    Attributes:
        kind: Which rule matched
        days_since: Staleness in days (set for scan actions only)
    """

    kind: ActionKind
    days_since: Optional[int] = None

    @classmethod
    def skip_pending(cls) -> "Action":
        return cls(ActionKind.SKIP_PENDING)

    @classmethod
    def force_stale(cls, days_since: int) -> "Action":
        return cls(ActionKind.FORCE_STALE, days_since)

    @classmethod
    def skip_up_to_date(cls) -> "Action":
        return cls(ActionKind.SKIP_UP_TO_DATE)

    @classmethod
    def rescan_requested(cls, days_since: int) -> "Action":
        return cls(ActionKind.RESCAN_REQUESTED, days_since)

    @classmethod
    def unknown(cls) -> "Action":
        return cls(ActionKind.UNKNOWN)

    @property
    def requires_scan(self) -> bool:
        """Whether this action asks for a scan to be triggered."""
        return self.kind in _SCAN_REASONS

    @property
    def reason(self) -> Optional[str]:
        """Short trigger reason for scan actions ("stale" or "rescan")."""
        return _SCAN_REASONS.get(self.kind)


@dataclass(frozen=True)
class RunSummary:
    """
    Counters for a sweep (or part of one).

    Summaries are returned by the traversal and added together by the caller,
    so no counter lives at module level.

    Attributes:
        repositories: Repositories with at least one tag
        tags: Tag-detail records evaluated
        scans_requested: Records whose action required a scan
        scans_triggered: Scan requests sent successfully
        scan_failures: Scan requests that failed
        actions: Number of records per action kind
    """

    repositories: int = 0
    tags: int = 0
    scans_requested: int = 0
    scans_triggered: int = 0
    scan_failures: int = 0
    actions: dict[ActionKind, int] = field(default_factory=dict)

    def __add__(self, other: "RunSummary") -> "RunSummary":
        if not isinstance(other, RunSummary):
            return NotImplemented
        actions = Counter(self.actions)
        actions.update(other.actions)
        return RunSummary(
            repositories=self.repositories + other.repositories,
            tags=self.tags + other.tags,
            scans_requested=self.scans_requested + other.scans_requested,
            scans_triggered=self.scans_triggered + other.scans_triggered,
            scan_failures=self.scan_failures + other.scan_failures,
            actions=dict(actions),
        )

    def count(self, kind: ActionKind) -> int:
        """Number of records that resulted in the given action kind."""
        return self.actions.get(kind, 0)
