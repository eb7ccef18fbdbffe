import pydantic
import pytest

from school_locator.models.coordinate import Coordinate
from school_locator.models.school import SchoolCreate
from school_locator.validation.validator import (
    FieldError,
    ValidationError,
    validate_creation,
    validate_query,
)


def school_payload(**overrides):
    payload = {
        "name": "Riverside Primary",
        "address": "22 Mill Road",
        "latitude": 51.5,
        "longitude": -0.12,
    }
    payload.update(overrides)
    return payload


def test_validate_creation_success():
    assert validate_creation(school_payload()) == SchoolCreate(
        name="Riverside Primary", address="22 Mill Road", latitude=51.5, longitude=-0.12
    )


def test_validate_creation_accepts_numeric_strings():
    school = validate_creation(school_payload(latitude="10", longitude="-20.5"))
    assert school.latitude == 10.0
    assert school.longitude == -20.5


@pytest.mark.parametrize("bound", [-90, 90])
def test_validate_creation_accepts_range_bounds(bound):
    school = validate_creation(school_payload(latitude=bound, longitude=bound))
    assert school.latitude == bound
    assert school.longitude == bound


def test_validate_creation_latitude_91():
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(latitude=91))
    assert exc_info.value.errors == [
        FieldError(field="latitude", reason="must be between -90 and 90")
    ]


@pytest.mark.parametrize("latitude", [10**400, -(10**400)])
def test_validate_creation_huge_integer_is_out_of_range(latitude):
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(latitude=latitude))
    assert exc_info.value.errors == [
        FieldError(field="latitude", reason="must be between -90 and 90")
    ]


def test_coordinate_model_enforces_bounds():
    with pytest.raises(pydantic.ValidationError):
        Coordinate(latitude=0, longitude=91)


def test_school_model_enforces_non_empty_name():
    with pytest.raises(pydantic.ValidationError):
        SchoolCreate(name="", address="1 Road", latitude=0, longitude=0)


@pytest.mark.parametrize(
    ("latitude", "longitude", "fields"),
    [
        (-90.0001, 0, ["latitude"]),
        (0, 90.0001, ["longitude"]),
        (0, 120, ["longitude"]),
        (0, -180, ["longitude"]),
        (100, -100, ["latitude", "longitude"]),
        (float("nan"), 0, ["latitude"]),
        (0, float("inf"), ["longitude"]),
    ],
)
def test_validate_creation_rejects_out_of_range(latitude, longitude, fields):
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(latitude=latitude, longitude=longitude))
    assert [error.field for error in exc_info.value.errors] == fields


@pytest.mark.parametrize("field", ["name", "address"])
def test_validate_creation_rejects_empty_text(field):
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(**{field: ""}))
    assert exc_info.value.errors == [FieldError(field=field, reason="must not be empty")]


def test_validate_creation_rejects_empty_text_with_valid_coordinates():
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(name="", address="", latitude=0, longitude=0))
    assert [error.field for error in exc_info.value.errors] == ["name", "address"]


def test_validate_creation_rejects_non_string_name():
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(school_payload(name=42))
    assert exc_info.value.errors == [FieldError(field="name", reason="must be a string")]


def test_validate_creation_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        validate_creation({})
    assert exc_info.value.errors == [
        FieldError(field="name", reason="field required"),
        FieldError(field="address", reason="field required"),
        FieldError(field="latitude", reason="field required"),
        FieldError(field="longitude", reason="field required"),
    ]


@pytest.mark.parametrize("payload", [None, [], "school", 3])
def test_validate_creation_rejects_non_object_payload(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_creation(payload)
    assert exc_info.value.errors == [FieldError(field="body", reason="must be an object")]


def test_validate_query_coerces_strings():
    assert validate_query({"latitude": "12.5", "longitude": "-45"}) == Coordinate(
        latitude=12.5, longitude=-45.0
    )


def test_validate_query_coercion_runs_before_range_check():
    with pytest.raises(ValidationError) as exc_info:
        validate_query({"latitude": "ninety", "longitude": "0"})
    assert exc_info.value.errors == [
        FieldError(field="latitude", reason="must be a number")
    ]


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [("90.5", "0"), ("0", "-91"), ("-1000", "1000")],
)
def test_validate_query_rejects_out_of_range(latitude, longitude):
    with pytest.raises(ValidationError):
        validate_query({"latitude": latitude, "longitude": longitude})


def test_validate_query_is_deterministic():
    params = {"latitude": "33.3", "longitude": "44.4"}
    assert validate_query(params) == validate_query(params)


def test_validation_error_message_lists_fields():
    error = ValidationError(
        [FieldError(field="latitude", reason="must be a number")]
    )
    assert str(error) == "latitude: must be a number"
