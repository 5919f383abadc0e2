"""Error types raised by the scoring engine."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class InvalidInputError(ValueError):
    """Raised when a call is missing a collection it cannot be computed without.

    Only the shape needed to avoid a division by zero or a null dereference is
    validated, plus entries lacking a required field such as a requirement
    name. Optional fields never raise; they fall back to their defaults.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


def require(value: object, field: str) -> None:
    """Raise InvalidInputError if a required collection is absent."""
    if value is None:
        raise InvalidInputError(f"'{field}' is required", field=field)


def validate_as(model: type[ModelT], value: object, field: str) -> ModelT:
    """Parse `value` into `model`, reporting malformed input as InvalidInputError."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise InvalidInputError(f"'{field}' is malformed: {e}", field=field) from e
