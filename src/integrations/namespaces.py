"""
Namespaces file loader.

Reads the list of registry namespaces to sweep from a YAML file of the form::

    Namespaces:
      - platform
      - payments
"""

import logging
from pathlib import Path

import yaml

from constants import NAMESPACES_KEY
from core.exceptions import ConfigurationException, ValidationException
from utils.validation import validate_namespace

logger = logging.getLogger(__name__)


def load_namespaces(path: Path) -> list[str]:
    """
    Load namespace names from a YAML file.

    Blank and invalid entries are skipped with a warning; duplicates are
    dropped, keeping the first occurrence so file order is preserved.

    Args:
        path: Path to the namespaces file

    Returns:
        Namespace names in file order

    Raises:
        ConfigurationException: If the file cannot be read or has no namespace list
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationException(f"Namespaces file not found: {path}")
    except OSError as e:
        raise ConfigurationException(f"Could not read namespaces file {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationException(f"Failed to parse namespaces file {path}: {e}")

    if not isinstance(data, dict) or NAMESPACES_KEY not in data:
        raise ConfigurationException(
            f"Namespaces file {path} must contain a '{NAMESPACES_KEY}' list"
        )

    entries = data[NAMESPACES_KEY] or []
    if not isinstance(entries, list):
        raise ConfigurationException(
            f"'{NAMESPACES_KEY}' in {path} must be a list, got {type(entries).__name__}"
        )

    namespaces = []
    seen = set()
    for entry in entries:
        try:
            namespace = validate_namespace(entry)
        except ValidationException as e:
            logger.warning(f"Skipping namespace entry {entry!r}: {e}")
            continue
        if namespace in seen:
            logger.debug(f"Skipping duplicate namespace: {namespace}")
            continue
        seen.add(namespace)
        namespaces.append(namespace)

    logger.debug(f"Loaded {len(namespaces)} namespaces from {path}")
    return namespaces


__all__ = ["load_namespaces"]
