"""Exception taxonomy for definition validation failures.

Every failure carries a fixed, human-readable message. The subclasses only
exist for diagnostics; callers are expected to catch ``DefinitionError`` and
reject the input.
"""


class DefinitionError(ValueError):
    """Base class for action and reducer definition violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        """Violation kind used in reports (the class name)."""
        return type(self).__name__


class InvalidShapeError(DefinitionError):
    """Candidate is not a plain key-value structure."""


class MissingFieldError(DefinitionError):
    """A required field is absent."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class InvalidFieldError(DefinitionError):
    """A present field violates its shape or pattern constraint."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class UnknownFieldError(DefinitionError):
    """Candidate defines fields outside the allowed set."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields


class WrongShapeError(DefinitionError):
    """Reducer definition is a flat action map instead of a domain map."""
