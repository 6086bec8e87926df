"""Action definition validation."""

import re
from typing import Any

from .errors import InvalidFieldError, InvalidShapeError, MissingFieldError, UnknownFieldError
from .predicates import is_plain_object

ACTION_NAME_PATTERN = re.compile(r"[A-Z_]+")
ACTION_FIELDS = frozenset({"name", "data", "metadata"})


def validate_action(action: Any) -> None:
    """Validate an action definition.

    Checks run in a fixed order and the first violation is raised:
    shape, presence of ``name``, ``name`` pattern, ``data``, ``metadata``,
    unknown fields.

    Raises:
        InvalidShapeError: action is not a plain dict
        MissingFieldError: ``name`` is not defined
        InvalidFieldError: ``name``, ``data`` or ``metadata`` has a wrong value
        UnknownFieldError: keys other than name, data and metadata are present
    """
    if not is_plain_object(action):
        raise InvalidShapeError("Action definition must be a plain object.")

    if "name" not in action:
        raise MissingFieldError(
            'Action definition object must define "name" property.',
            field="name",
        )

    name = action["name"]
    if not isinstance(name, str) or not ACTION_NAME_PATTERN.fullmatch(name):
        raise InvalidFieldError(
            'Action definition object "name" property value must consist only of '
            "uppercase alphabetical characters and underscores.",
            field="name",
        )

    for field in ("data", "metadata"):
        if field in action and not is_plain_object(action[field]):
            raise InvalidFieldError(
                f'Action definition object "{field}" property value must be a plain object.',
                field=field,
            )

    unknown = set(action) - ACTION_FIELDS
    if unknown:
        raise UnknownFieldError(
            "Action definition object must not define unknown properties.",
            fields=tuple(sorted(unknown, key=str)),
        )
