"""Reporting layer for action and reducer definitions.

Wraps the raising validators into rules whose outcome is collected into a
``ValidationResult`` suitable for CLI and CI use.
"""

from typing import Any

from .framework import (
    DefinitionKind,
    ValidationFramework,
    ValidationIssue,
    ValidationResult,
    ValidationRule,
    ValidationStatus,
)
from .rules import ActionShapeRule, ReducerShapeRule


def check_action(candidate: Any, target: str = "action") -> ValidationResult:
    """Validate an action without raising."""
    framework = ValidationFramework()
    framework.create_default_rules(DefinitionKind.ACTION)
    return framework.validate(target, candidate)


def check_reducer(candidate: Any, target: str = "reducer") -> ValidationResult:
    """Validate a reducer definition without raising."""
    framework = ValidationFramework()
    framework.create_default_rules(DefinitionKind.REDUCER)
    return framework.validate(target, candidate)


__all__ = [
    "DefinitionKind",
    "ValidationFramework",
    "ValidationIssue",
    "ValidationResult",
    "ValidationRule",
    "ValidationStatus",
    "ActionShapeRule",
    "ReducerShapeRule",
    "check_action",
    "check_reducer",
]
