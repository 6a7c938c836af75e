"""
Docker Trusted Registry API client.

Wraps the four REST calls a sweep needs: repository listing, tag listing,
tag detail lookup and scan triggering. All calls authenticate with HTTP
basic auth (user and access token).
"""

import logging
from typing import Any, Optional

import requests
from requests.utils import quote

from constants import (
    IMAGESCAN_API_PATH,
    LISTING_TIMEOUT,
    PAGE_SIZE,
    REPOSITORIES_API_PATH,
    SCAN_TRIGGER_TIMEOUT,
    TAG_DETAIL_TIMEOUT,
)
from core.config import ScanConfig
from core.exceptions import IntegrationException
from core.models import Manifest, ScanStatus, TagScanState, VulnerabilitySummary
from utils.timestamps import parse_timestamp

logger = logging.getLogger(__name__)

SERVICE_NAME = "DTR"


def _join_url(base_url: str, api_path: str, *segments: str) -> str:
    """Join the base URL, an API path and percent-encoded path segments."""
    quoted = [quote(str(segment), safe="") for segment in segments]
    return "/".join([base_url, api_path, *quoted])


class DTRClient:
    """
    Client for the Docker Trusted Registry v0 API.

    Every failure (connection error, timeout, non-2xx status, malformed
    body) is raised as IntegrationException so callers can decide whether
    it is fatal.
    """

    def __init__(self, config: ScanConfig):
        """
        Initialize the client.

        Args:
            config: Sweep configuration holding URL and credentials
        """
        self.base_url = config.url.rstrip("/")
        self.auth = (config.user_id, config.token)
        self.headers = {"Content-Type": "application/json"}

    def _repositories_url(self, *parts: str) -> str:
        return _join_url(self.base_url, REPOSITORIES_API_PATH, *parts)

    def _request(
        self,
        method: str,
        url: str,
        timeout: int,
        params: Optional[dict] = None,
    ) -> requests.Response:
        try:
            response = requests.request(
                method,
                url,
                params=params,
                headers=self.headers,
                auth=self.auth,
                timeout=timeout,
            )
            response.raise_for_status()
        except requests.Timeout:
            raise IntegrationException(SERVICE_NAME, f"Timeout after {timeout}s: {method} {url}")
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise IntegrationException(SERVICE_NAME, f"HTTP {status} from {method} {url}")
        except requests.RequestException as e:
            raise IntegrationException(SERVICE_NAME, f"{method} {url} failed: {e}")
        return response

    def _get_json(self, url: str, timeout: int, params: Optional[dict] = None) -> Any:
        response = self._request("GET", url, timeout, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise IntegrationException(SERVICE_NAME, f"Invalid JSON from {url}: {e}")

    def list_repositories(self, namespace: str) -> list[str]:
        """
        List repository names in a namespace.

        Args:
            namespace: Registry namespace

        Returns:
            Repository names in listing order
        """
        # Without pageSize the registry returns at most 10 repositories
        url = self._repositories_url(namespace) + "/"
        data = self._get_json(url, LISTING_TIMEOUT, params={"pageSize": PAGE_SIZE})

        if not isinstance(data, dict):
            raise IntegrationException(SERVICE_NAME, f"Unexpected repository listing for {namespace}")

        repositories = data.get("repositories") or []
        names = [repo.get("name", "") for repo in repositories if isinstance(repo, dict)]
        logger.debug(f"Namespace {namespace}: {len(names)} repositories")
        return [name for name in names if name]

    def list_tags(self, namespace: str, repository: str) -> list[str]:
        """
        List tag names in a repository.

        Args:
            namespace: Registry namespace
            repository: Repository name

        Returns:
            Tag names in listing order (empty for repositories without tags)
        """
        url = self._repositories_url(namespace, repository, "tags")
        data = self._get_json(url, LISTING_TIMEOUT)

        if data is None:
            return []
        if not isinstance(data, list):
            raise IntegrationException(
                SERVICE_NAME, f"Unexpected tag listing for {namespace}/{repository}"
            )

        names = [tag.get("name", "") for tag in data if isinstance(tag, dict)]
        return [name for name in names if name]

    def get_tag_details(self, namespace: str, repository: str, tag: str) -> list[TagScanState]:
        """
        Fetch the detail records for a tag.

        A tag name may resolve to several records (e.g. one per platform).

        Args:
            namespace: Registry namespace
            repository: Repository name
            tag: Tag name

        Returns:
            One TagScanState per detail record
        """
        url = self._repositories_url(namespace, repository, "tags", tag)
        data = self._get_json(url, TAG_DETAIL_TIMEOUT)

        if data is None:
            return []
        if not isinstance(data, list):
            raise IntegrationException(
                SERVICE_NAME, f"Unexpected tag detail for {namespace}/{repository}:{tag}"
            )

        try:
            return [
                parse_tag_detail(namespace, repository, record, tag)
                for record in data
                if isinstance(record, dict)
            ]
        except (AttributeError, TypeError, ValueError) as e:
            raise IntegrationException(
                SERVICE_NAME, f"Malformed tag detail for {namespace}/{repository}:{tag}: {e}"
            )

    def trigger_scan(self, state: TagScanState) -> None:
        """
        Ask the registry to scan one tag-detail record.

        Args:
            state: Tag to scan; its manifest platform selects the image

        Raises:
            IntegrationException: If the request fails or is rejected
        """
        url = _join_url(
            self.base_url,
            IMAGESCAN_API_PATH,
            state.namespace,
            state.repository,
            state.tag,
            state.os,
            state.architecture,
        )
        self._request("POST", url, SCAN_TRIGGER_TIMEOUT)
        logger.debug(f"Scan requested for {state}")


def _text(value: Any) -> str:
    """JSON string field, with null decoded as an empty string."""
    return "" if value is None else str(value)


def parse_tag_detail(namespace: str, repository: str, record: dict, tag: str = "") -> TagScanState:
    """
    Convert one tag-detail JSON record into a TagScanState.

    JSON nulls decode to empty strings, zero counts and False, so a partial
    record can still be reported and addressed.

    Args:
        namespace: Namespace the record belongs to
        repository: Repository the record belongs to
        record: Decoded JSON object from the tag detail endpoint
        tag: Tag name that was requested, used when the record has no name

    Returns:
        Immutable snapshot of the record
    """
    manifest = record.get("manifest") or {}
    summary = record.get("vuln_summary") or {}

    return TagScanState(
        namespace=namespace,
        repository=repository,
        tag=_text(record.get("name")) or tag,
        manifest=Manifest(
            os=_text(manifest.get("os")),
            architecture=_text(manifest.get("architecture")),
        ),
        vuln_summary=VulnerabilitySummary(
            critical=int(summary.get("critical") or 0),
            major=int(summary.get("major") or 0),
            minor=int(summary.get("minor") or 0),
            last_scan_status=ScanStatus.from_code(summary.get("last_scan_status")),
            check_completed_at=parse_timestamp(summary.get("check_completed_at")),
            should_rescan=bool(summary.get("should_rescan")),
        ),
    )


__all__ = ["DTRClient", "parse_tag_detail"]
