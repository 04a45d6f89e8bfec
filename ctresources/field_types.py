"""Field definitions of custom types, and conversion from and to configuration data."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .utils import element_from_slice, expand_string_array

VALID_TYPE_NAMES = (
    "Boolean",
    "Number",
    "String",
    "LocalizedString",
    "Enum",
    "LocalizedEnum",
    "Money",
    "Date",
    "Time",
    "DateTime",
    "Reference",
    "Set",
)


class TextInputHint(str, Enum):
    """Visual representation of string-based fields."""

    SINGLE_LINE = "SingleLine"
    MULTI_LINE = "MultiLine"


@dataclass(frozen=True)
class BooleanType:
    name = "Boolean"


@dataclass(frozen=True)
class StringType:
    name = "String"


@dataclass(frozen=True)
class LocalizedStringType:
    name = "LocalizedString"


@dataclass(frozen=True)
class NumberType:
    name = "Number"


@dataclass(frozen=True)
class MoneyType:
    name = "Money"


@dataclass(frozen=True)
class DateType:
    name = "Date"


@dataclass(frozen=True)
class TimeType:
    name = "Time"


@dataclass(frozen=True)
class DateTimeType:
    name = "DateTime"


@dataclass(frozen=True)
class EnumValue:
    key: str
    label: str


@dataclass(frozen=True)
class EnumType:
    values: tuple[EnumValue, ...] = ()
    name = "Enum"


@dataclass(frozen=True)
class LocalizedEnumValue:
    key: str
    label: dict[str, str]


@dataclass(frozen=True)
class LocalizedEnumType:
    values: tuple[LocalizedEnumValue, ...] = ()
    name = "LocalizedEnum"


@dataclass(frozen=True)
class ReferenceType:
    reference_type_id: str
    name = "Reference"


@dataclass(frozen=True)
class SetType:
    element_type: FieldType
    name = "Set"


FieldType = Union[
    BooleanType,
    StringType,
    LocalizedStringType,
    NumberType,
    MoneyType,
    DateType,
    TimeType,
    DateTimeType,
    EnumType,
    LocalizedEnumType,
    ReferenceType,
    SetType,
]

_SIMPLE_TYPES: dict[str, type] = {
    "Boolean": BooleanType,
    "String": StringType,
    "LocalizedString": LocalizedStringType,
    "Number": NumberType,
    "Money": MoneyType,
    "Date": DateType,
    "Time": TimeType,
    "DateTime": DateTimeType,
}


@dataclass
class FieldDefinition:
    """A single custom field of a type."""

    type: FieldType
    name: str
    label: dict[str, str]
    required: bool = False
    input_hint: TextInputHint | None = TextInputHint.SINGLE_LINE


@dataclass
class TypeDraft:
    """The data needed to create a custom type."""

    key: str
    name: dict[str, str]
    resource_type_ids: list[str]
    description: dict[str, str] | None = None
    field_definitions: list[FieldDefinition] = field(default_factory=list)


def _localized(value: Any) -> dict[str, str]:
    if not value:
        return {}
    return {str(locale): str(text) for locale, text in value.items()}


def validate_field_type_name(value: str, sets_allowed: bool) -> None:
    """Raise ValueError unless ``value`` names a field type allowed here."""
    if value not in VALID_TYPE_NAMES:
        raise ValueError(
            f"{value} is not a valid type. Valid types are: "
            + ", ".join(sorted(VALID_TYPE_NAMES))
        )
    if not sets_allowed and value == "Set":
        raise ValueError("sets in another Set are not allowed")


def expand_field_type(config: Mapping[str, Any]) -> FieldType:
    """Build a field type from its configuration block."""
    type_name = config.get("name")
    if not isinstance(type_name, str):
        raise ValueError("no 'name' for type object given")

    simple = _SIMPLE_TYPES.get(type_name)
    if simple is not None:
        return simple()

    if type_name == "Enum":
        if "value" not in config:
            raise ValueError("no value elements specified for Enum type")
        return EnumType(
            tuple(EnumValue(key=v["key"], label=v["label"]) for v in config["value"] or ())
        )
    if type_name == "LocalizedEnum":
        if "localized_value" not in config:
            raise ValueError("no localized_value elements specified for LocalizedEnum type")
        return LocalizedEnumType(
            tuple(
                LocalizedEnumValue(key=v["key"], label=_localized(v.get("label")))
                for v in config["localized_value"] or ()
            )
        )
    if type_name == "Reference":
        reference = config.get("reference_type_id")
        if not isinstance(reference, str):
            raise ValueError("no reference_type_id specified for Reference type")
        return ReferenceType(reference)
    if type_name == "Set":
        element = element_from_slice(config, "element_type")
        if element is None:
            raise ValueError("no element_type specified for Set type")
        return SetType(expand_field_type(element))

    raise ValueError(f"unknown FieldType {type_name}")


def expand_field_definition(config: Mapping[str, Any]) -> FieldDefinition:
    """Build a field definition from a ``field`` configuration block."""
    type_config = element_from_slice(config, "type")
    if type_config is None:
        raise ValueError("missing type")
    return FieldDefinition(
        type=expand_field_type(type_config),
        name=config["name"],
        label=_localized(config.get("label")),
        required=bool(config.get("required", False)),
        input_hint=TextInputHint(config.get("input_hint", TextInputHint.SINGLE_LINE.value)),
    )


def expand_field_definitions(fields: Iterable[Mapping[str, Any]] | None) -> list[FieldDefinition]:
    """Build the field definitions of all ``field`` blocks, keeping their order."""
    return [expand_field_definition(item) for item in fields or ()]


def flatten_enum_values(values: Iterable[EnumValue]) -> list[dict[str, Any]]:
    """Render enum values as configuration blocks."""
    return [{"key": value.key, "label": value.label} for value in values]


def flatten_localized_enum_values(values: Iterable[LocalizedEnumValue]) -> list[dict[str, Any]]:
    """Render localized enum values as configuration blocks."""
    return [{"key": value.key, "label": dict(value.label)} for value in values]


def flatten_field_type(field_type: FieldType, sets_allowed: bool) -> list[dict[str, Any]]:
    """Render a field type as a one element list holding its configuration block."""
    if isinstance(field_type, EnumType):
        data: dict[str, Any] = {"name": "Enum", "value": flatten_enum_values(field_type.values)}
    elif isinstance(field_type, LocalizedEnumType):
        data = {
            "name": "LocalizedEnum",
            "localized_value": flatten_localized_enum_values(field_type.values),
        }
    elif isinstance(field_type, ReferenceType):
        data = {"name": "Reference", "reference_type_id": field_type.reference_type_id}
    elif isinstance(field_type, SetType):
        data = {"name": "Set"}
        if sets_allowed:
            data["element_type"] = flatten_field_type(field_type.element_type, False)
    elif isinstance(field_type, tuple(_SIMPLE_TYPES.values())):
        data = {"name": field_type.name}
    else:
        raise ValueError(f"unknown resource Type {type(field_type).__name__}: {field_type!r}")
    return [data]


def flatten_field_definitions(definitions: Iterable[FieldDefinition]) -> list[dict[str, Any]]:
    """Render field definitions as ``field`` configuration blocks."""
    return [
        {
            "type": flatten_field_type(definition.type, True),
            "name": definition.name,
            "label": dict(definition.label),
            "required": definition.required,
            "input_hint": definition.input_hint.value if definition.input_hint else None,
        }
        for definition in definitions
    ]


def type_draft(config: Mapping[str, Any]) -> TypeDraft:
    """Build the draft for creating a type from its configuration."""
    return TypeDraft(
        key=config["key"],
        name=_localized(config.get("name")),
        description=_localized(config.get("description")),
        resource_type_ids=expand_string_array(config.get("resource_type_ids") or ()),
        field_definitions=expand_field_definitions(config.get("field")),
    )