"""Resolve CLI target references into candidate definitions.

A target is one of:
- a path to a ``.json`` file (or ``.jsonl`` with one record per line)
- a ``package.module:attribute`` import reference
- an inline JSON document
"""

import importlib
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

IMPORT_REFERENCE_PATTERN = re.compile(r"[A-Za-z_][\w.]*:[A-Za-z_][\w.]*")


class TargetLoadError(ValueError):
    """Target reference could not be resolved."""


def load_target(reference: str) -> tuple[str, Any]:
    """Resolve a reference into a (label, candidate) pair.

    Raises:
        TargetLoadError: If the file, module or JSON cannot be loaded
    """
    path = Path(reference)
    if _is_file(path):
        return str(path), load_json_file(path)

    if IMPORT_REFERENCE_PATTERN.fullmatch(reference):
        return reference, import_reference(reference)

    try:
        return "<inline>", json.loads(reference)
    except json.JSONDecodeError as e:
        raise TargetLoadError(
            f"Target '{reference}' is neither a file, an import reference nor valid JSON: {e}"
        ) from e


def _is_file(path: Path) -> bool:
    # Inline JSON longer than the OS name limit raises instead of returning False
    try:
        return path.is_file()
    except OSError:
        return False


def load_json_file(path: Path) -> Any:
    """Load a JSON document, or a list of records from a JSON Lines file."""
    logger.debug(f"Loading JSON target from {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix == ".jsonl":
                records = []
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):  # Skip comments and empty lines
                        records.append(json.loads(line))
                return records
            return json.load(f)
    except json.JSONDecodeError as e:
        raise TargetLoadError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise TargetLoadError(f"Failed to read {path}: {e}") from e


def import_reference(reference: str) -> Any:
    """Import ``module.path:attribute.path`` and return the attribute."""
    module_path, _, attribute_path = reference.partition(":")
    logger.debug(f"Importing {attribute_path} from {module_path}")

    try:
        obj: Any = importlib.import_module(module_path)
    except ImportError as e:
        raise TargetLoadError(f"Module not found: {module_path}") from e
    except Exception as e:
        raise TargetLoadError(f"Failed to import {module_path}: {type(e).__name__}: {e}") from e

    for attribute in attribute_path.split("."):
        try:
            obj = getattr(obj, attribute)
        except AttributeError as e:
            raise TargetLoadError(
                f"Attribute '{attribute_path}' not found in module {module_path}"
            ) from e

    return obj
