"""Shape rules wrapping the action and reducer validators."""

import logging
from typing import Any

from ..action import validate_action
from ..config import CanonicalReducerConfig
from ..errors import DefinitionError
from ..reducer import is_domain_map, validate_reducer
from .framework import ValidationResult, ValidationRule

logger = logging.getLogger(__name__)


class ActionShapeRule(ValidationRule):
    """Validate that a value is a well-formed action definition."""

    @property
    def name(self) -> str:
        return "action_shape"

    def validate(self, target: str, candidate: Any, config: CanonicalReducerConfig,
                 result: ValidationResult) -> None:
        result.increment_counter("actions_checked")
        try:
            validate_action(candidate)
        except DefinitionError as e:
            logger.debug(f"{target}: {e.kind}")
            result.add_issue(self.name, e.kind, e.message, target)
            return
        result.increment_counter("actions_valid")


class ReducerShapeRule(ValidationRule):
    """Validate that a reducer definition begins with a domain map."""

    @property
    def name(self) -> str:
        return "reducer_shape"

    def validate(self, target: str, candidate: Any, config: CanonicalReducerConfig,
                 result: ValidationResult) -> None:
        result.increment_counter("reducers_checked")
        try:
            validate_reducer(candidate)
        except DefinitionError as e:
            logger.debug(f"{target}: {e.kind}")
            result.add_issue(self.name, e.kind, e.message, target)
            return
        result.increment_counter("reducers_valid")

        # Reported only; non-dict domain values are not a violation
        if not is_domain_map(candidate):
            logger.info(f"{target}: reducer has top-level values that are not plain dicts")
