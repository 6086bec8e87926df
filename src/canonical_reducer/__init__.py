"""canonical-reducer - structural validation of actions and reducer definitions.

Actions are plain records with an uppercase ``name`` and optional ``data`` and
``metadata`` dicts. Reducer definitions map domain names to action handler
maps.
"""

__version__ = "0.1.0"
__description__ = "Validate canonical reducer composition actions and reducer definitions"

from canonical_reducer.action import validate_action
from canonical_reducer.errors import (
    DefinitionError,
    InvalidFieldError,
    InvalidShapeError,
    MissingFieldError,
    UnknownFieldError,
    WrongShapeError,
)
from canonical_reducer.reducer import validate_reducer

__all__ = [
    "__version__",
    "__description__",
    "validate_action",
    "validate_reducer",
    "DefinitionError",
    "InvalidShapeError",
    "MissingFieldError",
    "InvalidFieldError",
    "UnknownFieldError",
    "WrongShapeError",
]
