"""
Framed log sections for the dtrscan CLI.

Used for fatal startup errors (e.g. an unreadable namespaces file), the
dry-run notice and the sweep banner.
"""

import logging
from typing import List, Optional


def _log_section(log_fn, title: str, messages: List[str], width: int) -> None:
    log_fn("=" * width)
    log_fn(title)
    for message in messages:
        log_fn(message or "")
    log_fn("=" * width)


def log_error_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log a title and follow-up hints at ERROR, framed by "=" rules.

    Empty strings in messages are kept as blank lines.

    Examples:
        >>> log_error_section(
        ...     "Error getting namespaces.",
        ...     ["Namespaces file not found: namespaces.yaml"]
        ... )
        ============================================================
        Error getting namespaces.
        Namespaces file not found: namespaces.yaml
        ============================================================
    """
    _log_section((logger or logging.getLogger()).error, title, messages, width)


def log_warning_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """Same as log_error_section, at WARNING (used for the dry-run notice)."""
    _log_section((logger or logging.getLogger()).warning, title, messages, width)


def log_info_header(
    message: str,
    logger: Optional[logging.Logger] = None,
    width: int = 60,
    char: str = "="
) -> None:
    """Log the sweep banner between two rules of char."""
    logger = logger or logging.getLogger()
    logger.info(char * width)
    logger.info(message)
    logger.info(char * width)
