"""Integrations with external services."""

from integrations.dtr_api import DTRClient
from integrations.namespaces import load_namespaces

__all__ = [
    "DTRClient",
    "load_namespaces",
]
