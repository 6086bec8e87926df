"""Core reporting framework for definition validation.

Runs the raising validators as pluggable rules and collects their outcome
into a serializable result with a CI exit code.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import CanonicalReducerConfig, create_default_config

logger = logging.getLogger(__name__)


class ValidationStatus(str, Enum):
    """Overall or per-issue validation status."""
    PASS = "pass"
    FAIL = "fail"


class DefinitionKind(str, Enum):
    """Definition shapes a framework can be set up for."""
    ACTION = "action"
    REDUCER = "reducer"


@dataclass
class ValidationIssue:
    """A single violation found during validation."""
    rule: str
    kind: str
    message: str
    target: str | None = None

    def __str__(self) -> str:
        location = f" in {self.target}" if self.target else ""
        return f"[{self.kind}] {self.rule}: {self.message}{location}"


@dataclass
class ValidationResult:
    """Results of a validation run."""
    status: ValidationStatus = ValidationStatus.PASS
    issues: list[ValidationIssue] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.status == ValidationStatus.PASS else 1

    @property
    def passed(self) -> bool:
        return self.status == ValidationStatus.PASS

    def add_issue(self, rule: str, kind: str, message: str, target: str | None = None) -> None:
        """Add a validation issue; any issue fails the result."""
        self.issues.append(ValidationIssue(rule, kind, message, target))
        self.status = ValidationStatus.FAIL

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "issues": [
                {
                    "rule": issue.rule,
                    "kind": issue.kind,
                    "message": issue.message,
                    "target": issue.target
                }
                for issue in self.issues
            ]
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def validate(self, target: str, candidate: Any, config: CanonicalReducerConfig,
                 result: ValidationResult) -> None:
        """Execute validation rule.

        Args:
            target: Label of the validated value (file, reference or index)
            candidate: Value under validation
            config: canonical-reducer configuration
            result: Validation result to update with issues/counters
        """
        pass


class ValidationFramework:
    """Runs the configured rules against candidate definitions."""

    def __init__(self, config: CanonicalReducerConfig | None = None):
        self.config = config or create_default_config()
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def create_default_rules(self, kind: DefinitionKind | str) -> None:
        """Install the shape rule for the given definition kind."""
        from .rules import ActionShapeRule, ReducerShapeRule

        kind = DefinitionKind(kind)
        if kind == DefinitionKind.ACTION:
            self.add_rule(ActionShapeRule())
        else:
            self.add_rule(ReducerShapeRule())

    def validate(self, target: str, candidate: Any,
                 result: ValidationResult | None = None) -> ValidationResult:
        """Run all rules on one candidate.

        Args:
            target: Label used in issues
            candidate: Value under validation
            result: Existing result to accumulate into

        Returns:
            ValidationResult with status, issues, and counters
        """
        if result is None:
            result = ValidationResult()

        logger.debug(f"Running {len(self.rules)} rules on {target}")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            try:
                rule.validate(target, candidate, self.config, result)
            except Exception as e:
                logger.error(f"Rule {rule.name} failed with error: {e}")
                result.add_issue(
                    rule.name,
                    type(e).__name__,
                    f"Rule execution failed: {e}",
                    target
                )

        return result

    def validate_records(self, records: Iterable[tuple[str, Any]]) -> ValidationResult:
        """Run all rules on each (target, candidate) record.

        Stops after the first failing record when ``validation.fail_fast`` is set.
        """
        result = ValidationResult()

        for target, candidate in records:
            issues_before = len(result.issues)
            self.validate(target, candidate, result)
            if self.config.validation.fail_fast and len(result.issues) > issues_before:
                logger.info(f"Stopping after first failing record: {target}")
                break

        logger.info(f"Validation completed with status: {result.status.value}")
        logger.info(f"Found {len(result.issues)} issues")

        return result
