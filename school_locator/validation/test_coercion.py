import math

import pytest

from school_locator.validation.coercion import CoercionError, coerce_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3.0), (-12.5, -12.5), ("45", 45.0), (" -0.5 ", -0.5), ("1e1", 10.0)],
)
def test_coerce_number_accepts_numeric_values(value, expected):
    assert coerce_number(value) == expected


@pytest.mark.parametrize("value", [None, True, False, "", "   ", "abc", "12km", [], {}])
def test_coerce_number_rejects_non_numeric_values(value):
    with pytest.raises(CoercionError):
        coerce_number(value)


@pytest.mark.parametrize(("value", "expected"), [(10**400, math.inf), (-(10**400), -math.inf)])
def test_coerce_number_huge_integers_become_infinite(value, expected):
    assert coerce_number(value) == expected
