"""
Pytest fixtures and configuration for dtrscan tests.

Provides shared fixtures and test utilities across the test suite.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from core.config import ScanConfig
from core.models import (
    Manifest,
    ScanStatus,
    TagScanState,
    VulnerabilitySummary,
)
from integrations.dtr_api import DTRClient


NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_state(
    status=6,
    should_rescan=False,
    completed_at=NOW - timedelta(days=3),
    namespace="platform",
    repository="api",
    tag="1.0",
    os="linux",
    architecture="amd64",
):
    """Build a TagScanState with sensible defaults."""
    return TagScanState(
        namespace=namespace,
        repository=repository,
        tag=tag,
        manifest=Manifest(os=os, architecture=architecture),
        vuln_summary=VulnerabilitySummary(
            critical=1,
            major=2,
            minor=3,
            last_scan_status=ScanStatus(status),
            check_completed_at=completed_at,
            should_rescan=should_rescan,
        ),
    )


@pytest.fixture
def now():
    """Fixed reference time for staleness."""
    return NOW


@pytest.fixture
def up_to_date_state():
    """Tag scanned successfully three days ago."""
    return make_state()


@pytest.fixture
def dry_run_config():
    """Configuration for a dry run with a 30-day threshold."""
    return ScanConfig(
        user_id="scanner",
        token="secret-token",
        url="https://dtr.example.com",
        days=30,
        dry_run=True,
        today=NOW,
    )


@pytest.fixture
def live_config(dry_run_config):
    """Configuration for a live run with a 30-day threshold."""
    return ScanConfig(
        user_id=dry_run_config.user_id,
        token=dry_run_config.token,
        url=dry_run_config.url,
        days=dry_run_config.days,
        dry_run=False,
        today=NOW,
    )


@pytest.fixture
def mock_client():
    """DTR client mock with an empty registry."""
    client = Mock(spec=DTRClient)
    client.list_repositories.return_value = []
    client.list_tags.return_value = []
    client.get_tag_details.return_value = []
    client.trigger_scan.return_value = None
    return client


@pytest.fixture
def namespaces_file(tmp_path):
    """Namespaces file with two namespaces."""
    path = tmp_path / "namespaces.yaml"
    path.write_text("Namespaces:\n  - platform\n  - payments\n")
    return path
