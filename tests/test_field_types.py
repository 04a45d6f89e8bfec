import pytest

from ctresources.field_types import (
    BooleanType,
    DateTimeType,
    EnumType,
    EnumValue,
    FieldDefinition,
    LocalizedEnumType,
    LocalizedEnumValue,
    MoneyType,
    ReferenceType,
    SetType,
    StringType,
    TextInputHint,
    expand_field_definition,
    expand_field_definitions,
    expand_field_type,
    flatten_enum_values,
    flatten_field_definitions,
    flatten_field_type,
    flatten_localized_enum_values,
    type_draft,
    validate_field_type_name,
)


def test_expand_field_definition_item():
    config = {
        "name": "test",
        "label": {"en": "Test", "nl": "Test"},
        "type": [{"name": "String"}],
        "required": False,
        "input_hint": "SingleLine",
    }
    result = expand_field_definition(config)
    assert result == FieldDefinition(
        type=StringType(),
        name="test",
        label={"en": "Test", "nl": "Test"},
        required=False,
        input_hint=TextInputHint.SINGLE_LINE,
    )


def test_expand_field_definition_missing_type():
    with pytest.raises(ValueError, match="missing type"):
        expand_field_definition({"name": "x", "label": {}, "type": []})


def test_expand_boolean():
    assert expand_field_type({"name": "Boolean"}) == BooleanType()


def test_expand_enum_requires_values():
    with pytest.raises(ValueError, match="no value elements"):
        expand_field_type({"name": "Enum"})


def test_expand_enum():
    result = expand_field_type(
        {
            "name": "Enum",
            "value": [
                {"key": "value1", "label": "Value 1"},
                {"key": "value2", "label": "Value 2"},
            ],
        }
    )
    assert isinstance(result, EnumType)
    assert sorted(result.values, key=lambda v: v.key) == [
        EnumValue("value1", "Value 1"),
        EnumValue("value2", "Value 2"),
    ]


def test_expand_reference_requires_type_id():
    with pytest.raises(ValueError, match="reference_type_id"):
        expand_field_type({"name": "Reference"})


def test_expand_reference():
    result = expand_field_type({"name": "Reference", "reference_type_id": "product"})
    assert result == ReferenceType("product")


def test_expand_set_requires_element_type():
    with pytest.raises(ValueError, match="element_type"):
        expand_field_type({"name": "Set"})


def test_expand_set_of_enum():
    result = expand_field_type(
        {"name": "Set", "element_type": [{"name": "Enum", "value": [{"key": "a", "label": "A"}]}]}
    )
    assert result == SetType(EnumType((EnumValue("a", "A"),)))


def test_expand_localized_enum_requires_values():
    with pytest.raises(ValueError, match="localized_value"):
        expand_field_type({"name": "LocalizedEnum"})


def test_expand_unknown_type():
    with pytest.raises(ValueError, match="unknown FieldType Blob"):
        expand_field_type({"name": "Blob"})


def test_expand_missing_name():
    with pytest.raises(ValueError, match="no 'name'"):
        expand_field_type({})


@pytest.mark.parametrize(
    "config",
    [
        {"name": "Boolean"},
        {"name": "Money"},
        {"name": "DateTime"},
        {"name": "Enum", "value": [{"key": "day", "label": "Daytime"}]},
        {
            "name": "LocalizedEnum",
            "localized_value": [{"key": "night", "label": {"en": "Nighttime", "nl": "Nachttijd"}}],
        },
        {"name": "Reference", "reference_type_id": "store"},
        {"name": "Set", "element_type": [{"name": "String"}]},
    ],
)
def test_field_type_round_trip(config):
    assert flatten_field_type(expand_field_type(config), True) == [config]


def test_flatten_nested_set_drops_element_type():
    assert flatten_field_type(SetType(StringType()), False) == [{"name": "Set"}]


def test_flatten_unknown_type():
    with pytest.raises(ValueError, match="unknown resource Type"):
        flatten_field_type("nonsense", True)


def test_flatten_enum_values():
    assert flatten_enum_values([EnumValue("a", "A")]) == [{"key": "a", "label": "A"}]
    assert flatten_localized_enum_values([LocalizedEnumValue("a", {"en": "A"})]) == [
        {"key": "a", "label": {"en": "A"}}
    ]


def test_field_definitions_round_trip():
    fields = [
        {
            "name": "skype_name",
            "label": {"en": "Skype name"},
            "type": [{"name": "String"}],
            "required": True,
            "input_hint": "MultiLine",
        },
        {
            "name": "money",
            "label": {"en": "money value"},
            "type": [{"name": "Money"}],
            "required": False,
            "input_hint": "SingleLine",
        },
    ]
    definitions = expand_field_definitions(fields)
    assert [d.name for d in definitions] == ["skype_name", "money"]
    assert definitions[1].type == MoneyType()
    assert flatten_field_definitions(definitions) == fields


def test_default_input_hint_and_required():
    result = expand_field_definition({"name": "d", "label": {"en": "D"}, "type": [{"name": "DateTime"}]})
    assert result.type == DateTimeType()
    assert result.required is False
    assert result.input_hint is TextInputHint.SINGLE_LINE


def test_validate_field_type_name_invalid():
    with pytest.raises(ValueError) as info:
        validate_field_type_name("Blob", True)
    assert str(info.value) == (
        "Blob is not a valid type. Valid types are: Boolean, Date, DateTime, Enum, "
        "LocalizedEnum, LocalizedString, Money, Number, Reference, Set, String, Time"
    )


def test_validate_nested_set_rejected():
    with pytest.raises(ValueError, match="sets in another Set are not allowed"):
        validate_field_type_name("Set", False)


def test_validate_set_allowed_at_top():
    validate_field_type_name("Set", True)
    with pytest.raises(ValueError):
        validate_field_type_name("set", True)


def test_type_draft():
    draft = type_draft(
        {
            "key": "acctest-type",
            "name": {"en": "Contact info"},
            "description": {"en": "All things"},
            "resource_type_ids": ["customer"],
            "field": [{"name": "f", "label": {"en": "F"}, "type": [{"name": "LocalizedString"}]}],
        }
    )
    assert draft.key == "acctest-type"
    assert draft.name == {"en": "Contact info"}
    assert draft.description == {"en": "All things"}
    assert draft.resource_type_ids == ["customer"]
    assert [d.name for d in draft.field_definitions] == ["f"]
    assert draft.field_definitions[0].type.name == "LocalizedString"


def test_type_draft_rejects_non_string_resource_ids():
    with pytest.raises(TypeError):
        type_draft({"key": "k", "name": {"en": "n"}, "resource_type_ids": [1]})