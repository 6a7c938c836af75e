"""
dtrscan - Registry Vulnerability Rescan Sweeper

Decides, for every tag in a set of Docker Trusted Registry namespaces,
whether a vulnerability scan is due, and requests it.
"""

__version__ = "1.0.0"
__author__ = "Platform Security"

from core.models import (
    Action,
    ActionKind,
    TagScanState,
    RunSummary,
)

__all__ = [
    "Action",
    "ActionKind",
    "TagScanState",
    "RunSummary",
]
