"""
Command-line interface for dtrscan - registry vulnerability rescan sweeper.

Walks every tag in the configured Docker Trusted Registry namespaces and
triggers a vulnerability scan where one is due. Runs as a dry run unless
--no-dry-run is given.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from constants import (
    DEFAULT_DTR_URL,
    DEFAULT_MAX_DAYS,
    DEFAULT_NAMESPACES_FILE,
    ENV_DTR_TOKEN,
    ENV_DTR_USER,
)
from core.config import ScanConfig
from core.exceptions import ConfigurationException, ValidationException
from core.orchestrator import ScanOrchestrator
from integrations.dtr_api import DTRClient
from integrations.namespaces import load_namespaces
from utils.formatting import format_action_counts, format_number
from utils.logging_helpers import log_error_section, log_info_header, log_warning_section

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dtrscan",
        description="Trigger vulnerability scans for stale or flagged registry tags.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Without --no-dry-run no scans are started; intended scans are only logged.",
    )

    auth_group = parser.add_argument_group("authentication")
    registry_group = parser.add_argument_group("registry options")

    auth_group.add_argument("--user", default=None, help=f"DTR user id (or ${ENV_DTR_USER}).")
    auth_group.add_argument("--token", default=None, help=f"DTR access token (or ${ENV_DTR_TOKEN}).")

    registry_group.add_argument("--url", default=DEFAULT_DTR_URL, help="DTR URL.")
    registry_group.add_argument(
        "--file", type=Path, default=Path(DEFAULT_NAMESPACES_FILE), help="Namespaces file."
    )
    # Kept as a string so malformed values are clamped instead of rejected
    registry_group.add_argument(
        "--days", default=str(DEFAULT_MAX_DAYS), help="Force scan if the last scan is older than this many days."
    )
    registry_group.add_argument(
        "--no-dry-run", "--no_dry_run", dest="no_dry_run", action="store_true", help="Start scans."
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    return parser


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, filling credentials from the environment."""
    parsed = build_parser().parse_args(args)
    if not parsed.user:
        parsed.user = os.environ.get(ENV_DTR_USER, "")
    if not parsed.token:
        parsed.token = os.environ.get(ENV_DTR_TOKEN, "")
    return parsed


def build_config(args: argparse.Namespace) -> ScanConfig:
    """
    Build and validate the sweep configuration from parsed arguments.

    Raises:
        ValidationException: If credentials or URL are invalid
    """
    config = ScanConfig(
        user_id=args.user,
        token=args.token,
        url=args.url,
        days=args.days,
        dry_run=not args.no_dry_run,
    )
    config.validate()
    return config


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    if not args.user or not args.token:
        build_parser().print_help()
        return 0

    logger.info(f"user {args.user} file {args.file} url {args.url}")

    try:
        config = build_config(args)
    except ValidationException as e:
        logger.error(str(e))
        return 1

    try:
        namespaces = load_namespaces(args.file)
    except ConfigurationException as e:
        log_error_section(
            "Error getting namespaces.",
            [str(e), "Use --file to point at a YAML file with a 'Namespaces' list."],
            logger=logger,
        )
        return 1

    log_info_header(f"Sweeping {len(namespaces)} namespaces, threshold {config.days} days", logger=logger)
    if config.dry_run:
        log_warning_section(
            "Dry run: no scans will be started.",
            ["Tags that would be scanned are logged as 'Will scan if no_dry_run'.",
             "Pass --no-dry-run to start scans."],
            logger=logger,
        )

    orchestrator = ScanOrchestrator(DTRClient(config), config)
    summary = orchestrator.run(namespaces)

    logger.info(
        f"Reviewed {format_number(summary.repositories):<4} repositories and "
        f"{format_number(summary.tags):<4} tags. "
        "If a repository has no tags it will not be shown in the output"
    )
    logger.info(f"Tags by outcome: {format_action_counts(summary)}")
    if config.dry_run:
        logger.info(f"Scans that would be requested: {summary.scans_requested}")
    else:
        logger.info(
            f"Scans requested: {summary.scans_requested}, "
            f"sent: {summary.scans_triggered}, failed: {summary.scan_failures}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
