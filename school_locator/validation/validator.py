"""Validation of school creation payloads and listing query parameters.

Coordinates go through two explicit stages: coercion of loosely typed values
(JSON numbers or query-string text) into floats, then a range check. A value
that fails coercion is never range checked. Both stages are declared on the
pydantic models; this module turns their errors into field-level detail.
"""

from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import BaseModel

from school_locator.models.coordinate import MAX_DEGREES, MIN_DEGREES, Coordinate
from school_locator.models.school import SchoolCreate
from school_locator.validation.coercion import NOT_A_NUMBER

OUT_OF_RANGE = f"must be between {MIN_DEGREES:g} and {MAX_DEGREES:g}"
REQUIRED = "field required"
NOT_TEXT = "must be a string"
EMPTY_TEXT = "must not be empty"
NOT_AN_OBJECT = "must be an object"

REASONS = {
    "missing": REQUIRED,
    "string_type": NOT_TEXT,
    "string_too_short": EMPTY_TEXT,
    "not_a_number": NOT_A_NUMBER,
    "greater_than_equal": OUT_OF_RANGE,
    "less_than_equal": OUT_OF_RANGE,
    "finite_number": OUT_OF_RANGE,
    "model_type": NOT_AN_OBJECT,
}


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    reason: str


class ValidationError(Exception):
    """Raised when input fails validation; carries every field violation."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{error.field}: {error.reason}" for error in errors)
        )

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        """Build a ValidationError from a pydantic model validation failure.

        Errors without a location refer to the payload as a whole and are
        reported against the "body" field.
        """
        return cls(
            [
                FieldError(
                    field=".".join(str(part) for part in error["loc"]) or "body",
                    reason=REASONS.get(error["type"], error["msg"]),
                )
                for error in exc.errors()
            ]
        )


def validate_creation(payload: Any) -> SchoolCreate:
    """Validate a school creation payload.

    Args:
        payload: Decoded JSON body with name, address, latitude and longitude.

    Returns:
        A SchoolCreate ready to be stored.

    Raises:
        ValidationError: With every violated field, if any check fails.
    """
    if isinstance(payload, Mapping):
        payload = dict(payload)
    try:
        return SchoolCreate.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def validate_query(params: Mapping) -> Coordinate:
    """Validate listing query parameters into a Coordinate.

    Args:
        params: Query parameters holding latitude and longitude as text.

    Returns:
        The validated query Coordinate.

    Raises:
        ValidationError: With every violated field, if any check fails.
    """
    try:
        return Coordinate.model_validate(dict(params))
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
