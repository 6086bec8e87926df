"""Type predicates for values of unknown shape."""

from collections.abc import Mapping
from typing import Any


def is_plain_object(value: Any) -> bool:
    """Return True for a plain ``dict``.

    Dict subclasses (``OrderedDict``, ``defaultdict``, user classes) are
    rejected the same way as arbitrary class instances.
    """
    return type(value) is dict


def is_function(value: Any) -> bool:
    """Return True when the value can be called as a handler."""
    return callable(value)


def collection_values(value: Any) -> list[Any]:
    """Values of a mapping, items of a list or tuple, otherwise nothing."""
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    return []
