"""Unit tests for reducer definition validation."""

import re

import pytest

from canonical_reducer import WrongShapeError, validate_reducer
from canonical_reducer.reducer import is_action_map, is_domain_map

WRONG_SHAPE = "Reducer definition object must begin with a domain map definition."


def handler(domain, action):
    return domain


class TestValidateReducer:
    """Test validate_reducer."""

    def test_flat_action_map_rejected(self):
        """Test rejection of a handler map without domains."""
        with pytest.raises(WrongShapeError, match=re.escape(WRONG_SHAPE)):
            validate_reducer({"FOO": lambda domain, action: domain})

    def test_flat_action_map_with_several_handlers(self):
        """Test rejection when every handler is callable."""
        with pytest.raises(WrongShapeError):
            validate_reducer({"FOO": handler, "BAR": print, "BAZ": dict})

    def test_empty_definition_accepted(self):
        """Test that an empty definition is accepted."""
        assert validate_reducer({}) is None

    def test_domain_map_accepted(self):
        """Test a reducer grouped by domain."""
        validate_reducer({"FOO": {"BAR": handler}})

    def test_mixed_values_accepted(self):
        """Test that one domain map among handlers is enough."""
        validate_reducer({"FOO": handler, "session": {"LOGIN": handler}})

    def test_domain_values_are_not_inspected(self):
        """Test that domain values are not validated."""
        validate_reducer({"FOO": "not a map", "BAR": 1})
        validate_reducer({"FOO": {"BAR": "not callable"}})

    def test_callable_objects_count_as_handlers(self):
        """Test that objects with __call__ are handlers."""
        class Handler:
            def __call__(self, domain, action):
                return domain

        with pytest.raises(WrongShapeError):
            validate_reducer({"FOO": Handler()})

    def test_non_mapping_without_values_accepted(self):
        """Test inputs without collection values."""
        validate_reducer(None)
        validate_reducer("FOO")
        validate_reducer([])

    def test_list_of_handlers_rejected(self):
        """Test rejection of a list of handlers."""
        with pytest.raises(WrongShapeError):
            validate_reducer([handler])

    def test_repeated_calls_are_idempotent(self):
        """Test that repeated validation gives the same outcome."""
        definition = {"FOO": handler}
        for _ in range(2):
            with pytest.raises(WrongShapeError):
                validate_reducer(definition)


class TestMapPredicates:
    """Test domain/action map helpers."""

    def test_is_domain_map(self):
        """Test domain map detection."""
        assert is_domain_map({"FOO": {}})
        assert is_domain_map({})
        assert not is_domain_map({"FOO": handler})

    def test_is_action_map(self):
        """Test action map detection."""
        assert is_action_map({"FOO": handler})
        assert is_action_map({})
        assert not is_action_map({"FOO": {}})
