"""Error types reported by the validation engine."""

from typing import Any


class StructValidateError(Exception):
    """Base exception for structvalidate errors."""


class UndefinedValidatorError(StructValidateError):
    """A directive names a validator that is not registered."""

    def __init__(self, name: str):
        super().__init__(f'undefined validator: "{name}"')
        self.name = name


class ValidationFailure(StructValidateError):
    """A failure message returned by a validator."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadField(StructValidateError):
    """
    A field path paired with the error reported for it.

    This is the entry type returned by Validator.validate.
    """

    def __init__(self, field: str, err: Exception):
        super().__init__(f"field {field} is invalid: {err}")
        self.field = field
        self.err = err

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadField):
            return NotImplemented
        return (
            self.field == other.field
            and type(self.err) is type(other.err)
            and str(self.err) == str(other.err)
        )

    def __hash__(self) -> int:
        return hash((self.field, type(self.err), str(self.err)))

    def __repr__(self) -> str:
        return f"BadField(field={self.field!r}, err={self.err!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "field": self.field,
            "error": str(self.err),
            "code": type(self.err).__name__,
        }


class InvalidRecordError(StructValidateError):
    """Raised by Validator.ensure_valid when a record has invalid fields."""

    def __init__(self, errors: list[BadField]):
        summary = "; ".join(str(e) for e in errors)
        super().__init__(f"{len(errors)} invalid field(s): {summary}")
        self.errors = errors
