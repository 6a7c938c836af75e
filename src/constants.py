"""
Centralized configuration constants for dtrscan.

This module provides a single source of truth for configuration values
that are used across multiple modules, making them easier to update
and maintain.
"""

# ============================================================================
# Registry Configuration
# ============================================================================

DEFAULT_DTR_URL = "https://dtr.company.com"
"""Default Docker Trusted Registry base URL."""

REPOSITORIES_API_PATH = "api/v0/repositories"
"""Path of the repositories API, relative to the registry URL."""

IMAGESCAN_API_PATH = "api/v0/imagescan/scan"
"""Path of the scan-trigger API, relative to the registry URL."""

PAGE_SIZE = "1000000"
"""Page size for repository listings (the registry returns 10 results when unset)."""

DEFAULT_NAMESPACES_FILE = "namespaces.yaml"
"""Default namespaces file name."""

NAMESPACES_KEY = "Namespaces"
"""Top-level key holding the namespace list in the namespaces file."""

# ============================================================================
# Staleness Threshold
# ============================================================================

DEFAULT_MAX_DAYS = 10000
"""Default and maximum staleness threshold in days."""

MIN_DAYS = 1
"""Minimum staleness threshold in days."""

# ============================================================================
# Scan Status Codes (as reported in vuln_summary.last_scan_status)
# ============================================================================

SCAN_STATUS_UNKNOWN = 0
"""Tag has never been scanned, or its state is unknown."""

SCAN_STATUS_PENDING = 5
"""A scan is already in flight."""

SCAN_STATUS_OK = 6
"""Last scan completed successfully."""

# ============================================================================
# Timeouts (seconds)
# ============================================================================

LISTING_TIMEOUT = 90
"""Timeout for repository and tag listing requests."""

TAG_DETAIL_TIMEOUT = 900
"""Timeout for tag detail requests (the registry is slow to answer these)."""

SCAN_TRIGGER_TIMEOUT = 900
"""Timeout for scan trigger requests."""

# ============================================================================
# Environment
# ============================================================================

ENV_DTR_USER = "DTR_USER"
"""Environment variable consulted when --user is not given."""

ENV_DTR_TOKEN = "DTR_TOKEN"
"""Environment variable consulted when --token is not given."""
