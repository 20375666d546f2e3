import pytest

from optifier.naming import missing_variant_name, to_pascal_case


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a", "A"),
        ("user_id", "UserId"),
        ("field_i32", "FieldI32"),
        ("field_string", "FieldString"),
    ],
)
def test_to_pascal_case_known_values(name, expected):
    assert to_pascal_case(name) == expected


@pytest.mark.parametrize(
    ("field", "expected"),
    [
        ("a", "AMissing"),
        ("c", "CMissing"),
        ("user_id", "UserIdMissing"),
        ("field_i32", "FieldI32Missing"),
        ("field_string", "FieldStringMissing"),
    ],
)
def test_missing_variant_name(field, expected):
    assert missing_variant_name(field) == expected


@pytest.mark.parametrize("name", ["user_id", "field-name", "some value", "a__b"])
def test_pascal_case_drops_separators(name):
    result = to_pascal_case(name)
    assert not any(sep in result for sep in "_- ")
    assert result[:1].isupper()


def test_camel_and_snake_agree():
    assert to_pascal_case("userId") == to_pascal_case("user_id")
    assert to_pascal_case("fieldI32") == to_pascal_case("field_i32")


def test_variant_name_builds_on_pascal_case():
    for name in ["a", "user_id", "field_option_string"]:
        assert missing_variant_name(name) == to_pascal_case(name) + "Missing"