"""Reducer definition validation."""

from typing import Any

from .errors import WrongShapeError
from .predicates import collection_values, is_function, is_plain_object


def is_domain_map(reducer: Any) -> bool:
    """Every value is a plain dict (vacuously true when empty)."""
    return all(is_plain_object(value) for value in collection_values(reducer))


def is_action_map(reducer: Any) -> bool:
    """Every value is a callable handler (vacuously true when empty)."""
    return all(is_function(value) for value in collection_values(reducer))


def validate_reducer(reducer: Any) -> None:
    """Reject a reducer definition that skips the domain grouping level.

    An empty definition is accepted. Only the flat action map mistake is
    detected; domain map values are not inspected.

    Raises:
        WrongShapeError: every top-level value is callable
    """
    if collection_values(reducer) and is_action_map(reducer):
        raise WrongShapeError("Reducer definition object must begin with a domain map definition.")
