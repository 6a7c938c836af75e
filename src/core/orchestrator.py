"""
Orchestrates a registry sweep: namespaces, repositories, tags, decisions.
"""
import logging
from collections import Counter
from datetime import datetime
from typing import Iterable, Optional

from core.config import ScanConfig
from core.decision import decide
from core.exceptions import IntegrationException
from core.models import Action, ActionKind, DecisionInput, RunSummary, TagScanState
from integrations.dtr_api import DTRClient
from utils.formatting import (
    LABEL_DRY_RUN,
    LABEL_PENDING,
    LABEL_SENDING,
    LABEL_UP_TO_DATE,
    format_tag_line,
    format_unknown_line,
)

logger = logging.getLogger(__name__)


class ScanOrchestrator:
    """
    Walks namespaces, repositories, tags and tag-detail records in listing
    order, decides each record and applies the decision.

    Scan requests are only sent when the configuration is not a dry run;
    in dry-run mode the intended request is logged instead.
    """

    def __init__(self, client: DTRClient, config: ScanConfig):
        """
        Initialize the orchestrator.

        Args:
            client: Registry client used for listings, tag details and scan triggers
            config: Sweep configuration (threshold, dry-run flag, reference time)
        """
        self.client = client
        self.config = config

    @property
    def now(self) -> datetime:
        return self.config.today

    def run(self, namespaces: Iterable[str]) -> RunSummary:
        """
        Sweep every namespace in order.

        Args:
            namespaces: Namespace names, typically from the namespaces file

        Returns:
            Aggregated counters for the whole sweep
        """
        summary = RunSummary()
        for namespace in namespaces:
            summary += self.scan_namespace(namespace)
        return summary

    def scan_namespace(self, namespace: str) -> RunSummary:
        """Sweep one namespace; listing failures skip the namespace."""
        try:
            repositories = self.client.list_repositories(namespace)
        except IntegrationException as e:
            logger.error(f"Could not list repositories in {namespace}: {e}")
            return RunSummary()

        summary = RunSummary()
        for repository in repositories:
            summary += self.scan_repository(namespace, repository)
        return summary

    def scan_repository(self, namespace: str, repository: str) -> RunSummary:
        """
        Sweep one repository.

        Repositories without tags are skipped silently and not counted.
        """
        try:
            tags = self.client.list_tags(namespace, repository)
        except IntegrationException as e:
            logger.error(f"Could not list tags in {namespace}/{repository}: {e}")
            return RunSummary()

        if not tags:
            return RunSummary()

        summary = RunSummary(repositories=1)
        for tag in tags:
            summary += self.scan_tag(namespace, repository, tag)
        return summary

    def scan_tag(self, namespace: str, repository: str, tag: str) -> RunSummary:
        """Evaluate every detail record of one tag."""
        try:
            records = self.client.get_tag_details(namespace, repository, tag)
        except IntegrationException as e:
            logger.error(f"Could not fetch details for {namespace}/{repository}:{tag}: {e}")
            return RunSummary()

        actions = Counter()
        requested = triggered = failures = 0
        for state in records:
            action, sent = self._process(state)
            actions[action.kind] += 1
            if action.requires_scan:
                requested += 1
            if sent is True:
                triggered += 1
            elif sent is False:
                failures += 1

        return RunSummary(
            tags=len(records),
            scans_requested=requested,
            scans_triggered=triggered,
            scan_failures=failures,
            actions=dict(actions),
        )

    def process_tag(self, state: TagScanState) -> Action:
        """
        Decide and apply the action for a single tag-detail record.

        Args:
            state: Tag snapshot

        Returns:
            The action that was decided
        """
        return self._process(state)[0]

    def _process(self, state: TagScanState) -> tuple[Action, Optional[bool]]:
        """
        Decide one record and apply the result.

        Returns:
            The action, and whether a scan request succeeded (None if none was sent)
        """
        action = decide(DecisionInput(state=state, threshold_days=self.config.days, now=self.now))
        if not action.requires_scan:
            self._report(state, action)
            return action, None
        return action, self._apply_scan(state, action)

    def _report(self, state: TagScanState, action: Action) -> None:
        """Log one line for actions that do not scan."""
        if action.kind is ActionKind.SKIP_PENDING:
            logger.info(format_tag_line(LABEL_PENDING, state))
        elif action.kind is ActionKind.SKIP_UP_TO_DATE:
            logger.info(format_tag_line(LABEL_UP_TO_DATE, state))
        else:
            logger.info(format_unknown_line(state))

    def _apply_scan(self, state: TagScanState, action: Action) -> Optional[bool]:
        """
        Log and, outside dry-run mode, send the scan request.

        Returns:
            None in dry-run mode, otherwise whether the request succeeded
        """
        if self.config.dry_run:
            logger.info(format_tag_line(LABEL_DRY_RUN, state, action.days_since, action.reason))
            return None

        logger.info(format_tag_line(LABEL_SENDING, state, action.days_since, action.reason))
        try:
            self.client.trigger_scan(state)
        except IntegrationException as e:
            logger.error(f"Unable to scan {state}: {e}")
            return False
        return True


__all__ = ["ScanOrchestrator"]
