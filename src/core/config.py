"""
Configuration dataclass for a registry sweep.

Provides a strongly-typed configuration object for the orchestrator and
registry client, replacing loose argparse namespaces.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from constants import DEFAULT_DTR_URL, DEFAULT_MAX_DAYS


@dataclass
class ScanConfig:
    """Run-scoped settings for a sweep."""

    user_id: str
    token: str = field(repr=False)
    url: str = DEFAULT_DTR_URL
    days: int = DEFAULT_MAX_DAYS
    dry_run: bool = True
    today: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def validate(self) -> None:
        """
        Validate and normalize configuration values.

        The staleness threshold is clamped rather than rejected.

        Raises:
            ValidationException: If credentials or URL are invalid
        """
        from utils.validation import clamp_days, validate_registry_url, validate_required

        self.user_id = validate_required(self.user_id, "user")
        self.token = validate_required(self.token, "token")
        self.url = validate_registry_url(self.url)
        self.days = clamp_days(self.days)


__all__ = ["ScanConfig"]
