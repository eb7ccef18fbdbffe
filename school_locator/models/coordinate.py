"""Coordinate value model and the degrees type shared by school models."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError

from school_locator.validation.coercion import CoercionError, coerce_number

# Longitude shares the latitude bounds on purpose; see DESIGN.md.
MIN_DEGREES = -90.0
MAX_DEGREES = 90.0


def _coerce_degrees(value: Any) -> float:
    try:
        return coerce_number(value)
    except CoercionError as exc:
        raise PydanticCustomError("not_a_number", str(exc)) from exc


# Coercion runs first; NaN and infinity then fail as out of range.
Degrees = Annotated[
    float,
    Field(ge=MIN_DEGREES, le=MAX_DEGREES, allow_inf_nan=False),
    BeforeValidator(_coerce_degrees),
]


class Coordinate(BaseModel):
    """A validated (latitude, longitude) pair in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: Degrees
    longitude: Degrees
