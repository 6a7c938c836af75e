"""
Input validation utilities for dtrscan.

Provides validation functions for registry URLs, credentials, namespace
names and the staleness threshold.
"""

import logging
import re
from typing import Union

from constants import DEFAULT_MAX_DAYS, MIN_DAYS
from core.exceptions import ValidationException

logger = logging.getLogger(__name__)


def clamp_days(value: Union[int, str, None], max_days: int = DEFAULT_MAX_DAYS) -> int:
    """
    Normalize the staleness threshold.

    Values that are not integers, or fall outside 1..max_days, are replaced
    by max_days with a warning. The threshold is never rejected.

    Args:
        value: Raw threshold (int, numeric string, or None)
        max_days: Upper bound and fallback value

    Returns:
        Threshold in the range 1..max_days

    Examples:
        >>> clamp_days(30)
        30
        >>> clamp_days("45")
        45
        >>> clamp_days(0)
        10000
        >>> clamp_days("abc")
        10000
    """
    try:
        days = int(str(value).strip())
    except (TypeError, ValueError):
        logger.warning(
            f"Invalid number of days entered ({value!r}), must be between "
            f"{MIN_DAYS} and {max_days}. Setting days to {max_days}"
        )
        return max_days

    if days < MIN_DAYS or days > max_days:
        logger.warning(
            f"Invalid number of days entered, must be between {MIN_DAYS} and "
            f"{max_days}. Setting days to {max_days}"
        )
        return max_days

    return days


def validate_required(value: str, field_name: str) -> str:
    """
    Validate that a required string setting is present.

    Raises:
        ValidationException: If the value is empty
    """
    if not value or not value.strip():
        raise ValidationException("Value cannot be empty", field_name)
    return value.strip()


def validate_registry_url(url: str) -> str:
    """
    Validate and normalize the registry base URL.

    Args:
        url: Registry URL

    Returns:
        URL without trailing slashes

    Raises:
        ValidationException: If the URL is empty or not http(s)

    Examples:
        >>> validate_registry_url("https://dtr.example.com/")
        'https://dtr.example.com'
    """
    if not url or not url.strip():
        raise ValidationException("Registry URL cannot be empty", "url")

    url = url.strip().rstrip("/")
    if not re.match(r"^https?://[^\s/]+", url):
        raise ValidationException(f"Registry URL must start with http:// or https://: {url}", "url")

    return url


def validate_namespace(namespace: str) -> str:
    """
    Validate a registry namespace name.

    Raises:
        ValidationException: If the namespace is empty or contains path characters
    """
    if not isinstance(namespace, str) or not namespace.strip():
        raise ValidationException("Namespace cannot be empty", "namespace")

    namespace = namespace.strip()
    if any(char in namespace for char in ["/", "\\", "?", "#", " "]):
        raise ValidationException(f"Namespace contains invalid characters: {namespace}", "namespace")

    return namespace


__all__ = [
    "clamp_days",
    "validate_required",
    "validate_registry_url",
    "validate_namespace",
]
