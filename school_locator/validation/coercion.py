"""Coercion of loosely typed coordinate values into floats."""

import math
from typing import Any

NOT_A_NUMBER = "must be a number"


class CoercionError(ValueError):
    """Raised when a value cannot be read as a real number."""


def coerce_number(value: Any) -> float:
    """Coerce a loosely typed scalar into a float.

    Integers too large for a float become signed infinity so that the range
    check rejects them.

    Args:
        value: A JSON number or a string such as a query-string value.

    Returns:
        The value as a float.

    Raises:
        CoercionError: If the value is missing, boolean, blank or not numeric.
    """
    if isinstance(value, bool) or value is None:
        raise CoercionError(NOT_A_NUMBER)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return float(value.strip())
        except ValueError as exc:
            raise CoercionError(NOT_A_NUMBER) from exc
    raise CoercionError(NOT_A_NUMBER)
