import pytest

from tooldispatch.errors import InvalidParamsError
from tooldispatch.validator import RequestValidator

SCHEMA = {
    "type": "object",
    "properties": {
        "query": {"type": "string"},
        "max_results": {"type": "number", "minimum": 1, "maximum": 20},
        "exact": {"type": "boolean"},
        "filters": {"type": "object"},
        "tags": {"type": "array"},
        "page": {"type": "integer"},
    },
    "required": ["query"],
}


@pytest.fixture
def validator():
    return RequestValidator()


def test_valid_arguments_are_returned_as_copy(validator):
    arguments = {"query": "routing", "max_results": 3, "exact": False, "filters": {}, "tags": [], "page": 2}

    validated = validator.validate(SCHEMA, arguments)

    assert validated == arguments
    assert validated is not arguments


def test_unknown_fields_pass_through(validator):
    validated = validator.validate(SCHEMA, {"query": "x", "locale": "fr"})

    assert validated["locale"] == "fr"


def test_missing_required_field(validator):
    with pytest.raises(InvalidParamsError) as exc_info:
        validator.validate(SCHEMA, {"max_results": 3})

    assert exc_info.value.field == "query"
    assert "query" in exc_info.value.message


def test_none_arguments_treated_as_empty(validator):
    assert validator.validate({"type": "object", "properties": {}}, None) == {}
    with pytest.raises(InvalidParamsError):
        validator.validate(SCHEMA, None)


def test_non_mapping_arguments_rejected(validator):
    with pytest.raises(InvalidParamsError):
        validator.validate(SCHEMA, ["query"])


@pytest.mark.parametrize(
    "field, value",
    [
        ("query", 42),
        ("query", None),
        ("max_results", "5"),
        ("max_results", True),
        ("exact", "yes"),
        ("filters", ["a"]),
        ("tags", {"a": 1}),
        ("page", 1.5),
    ],
)
def test_type_mismatch_names_field(validator, field, value):
    arguments = {"query": "x", field: value}

    with pytest.raises(InvalidParamsError) as exc_info:
        validator.validate(SCHEMA, arguments)

    assert exc_info.value.field == field


def test_numeric_bounds_are_inclusive(validator):
    assert validator.validate(SCHEMA, {"query": "x", "max_results": 1})["max_results"] == 1
    assert validator.validate(SCHEMA, {"query": "x", "max_results": 20.0})["max_results"] == 20.0

    for value in (0, 21, 20.5):
        with pytest.raises(InvalidParamsError) as exc_info:
            validator.validate(SCHEMA, {"query": "x", "max_results": value})
        assert exc_info.value.field == "max_results"


def test_first_violation_wins(validator):
    with pytest.raises(InvalidParamsError) as exc_info:
        validator.validate(SCHEMA, {"max_results": "bad"})

    assert exc_info.value.field == "query"
