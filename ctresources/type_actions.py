"""Update actions that bring a custom type in line with its configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .field_types import (
    EnumType,
    EnumValue,
    FieldDefinition,
    LocalizedEnumType,
    LocalizedEnumValue,
    SetType,
    TextInputHint,
    expand_field_definition,
)
from .utils import create_lookup, element_from_slice, first_element, remove_value


@dataclass(frozen=True)
class ChangeKey:
    key: str


@dataclass(frozen=True)
class ChangeName:
    name: dict[str, str]


@dataclass(frozen=True)
class SetDescription:
    description: dict[str, str]


@dataclass(frozen=True)
class RemoveFieldDefinition:
    field_name: str


@dataclass(frozen=True)
class AddFieldDefinition:
    field_definition: FieldDefinition


@dataclass(frozen=True)
class ChangeLabel:
    field_name: str
    label: dict[str, str]


@dataclass(frozen=True)
class ChangeInputHint:
    field_name: str
    input_hint: TextInputHint | None


@dataclass(frozen=True)
class AddEnumValue:
    field_name: str
    value: EnumValue


@dataclass(frozen=True)
class ChangeEnumValueLabel:
    field_name: str
    value: EnumValue


@dataclass(frozen=True)
class ChangeEnumValueOrder:
    field_name: str
    keys: tuple[str, ...]


@dataclass(frozen=True)
class AddLocalizedEnumValue:
    field_name: str
    value: LocalizedEnumValue


@dataclass(frozen=True)
class ChangeLocalizedEnumValueLabel:
    field_name: str
    value: LocalizedEnumValue


@dataclass(frozen=True)
class ChangeLocalizedEnumValueOrder:
    field_name: str
    keys: tuple[str, ...]


@dataclass(frozen=True)
class ChangeFieldDefinitionOrder:
    field_names: tuple[str, ...]


TypeUpdateAction = Union[
    ChangeKey,
    ChangeName,
    SetDescription,
    RemoveFieldDefinition,
    AddFieldDefinition,
    ChangeLabel,
    ChangeInputHint,
    AddEnumValue,
    ChangeEnumValueLabel,
    ChangeEnumValueOrder,
    AddLocalizedEnumValue,
    ChangeLocalizedEnumValueLabel,
    ChangeLocalizedEnumValueOrder,
    ChangeFieldDefinitionOrder,
]


def _type_name(type_block: Mapping[str, Any] | None) -> str:
    return (type_block or {}).get("name") or ""


def validate_field_change(
    old: Iterable[Mapping[str, Any]], new: Iterable[Mapping[str, Any]]
) -> None:
    """Raise ValueError if a field changes in a way the platform cannot apply."""
    old_lookup = create_lookup(old, "name")
    for new_field in new:
        name = new_field["name"]
        old_field = old_lookup.get(name)
        if not isinstance(old_field, Mapping):
            continue

        old_type = first_element(old_field.get("type")) or {}
        new_type = first_element(new_field.get("type")) or {}
        old_type_name = _type_name(old_type)
        new_type_name = _type_name(new_type)

        if old_type_name != new_type_name:
            if not old_type_name or not new_type_name:
                continue
            raise ValueError(
                f"field '{name}' type changed from {old_type_name} to {new_type_name}."
                " Changing types is not supported;"
                " please remove the field first and re-define it later"
            )

        if new_type_name.lower() == "set":
            old_element = _type_name(element_from_slice(old_type, "element_type"))
            new_element = _type_name(element_from_slice(new_type, "element_type"))
            if old_element != new_element:
                raise ValueError(
                    f"field '{name}' element type changed from {old_element} to {new_element}."
                    " Changing element types is not supported;"
                    " please remove the field first and re-define it later"
                )

        if old_field.get("required") != new_field.get("required"):
            raise ValueError(
                f"error on the '{name}' field: "
                "Updating the 'required' attribute is not supported."
                "Consider removing the field first and then re-adding it"
            )


def _value_actions(field_name, old_values, new_values, add, change_label, change_order):
    old_by_key = {value.key: value for value in old_values}
    new_by_key = {value.key: value for value in new_values}
    order = list(old_by_key)
    actions: list[TypeUpdateAction] = []
    for key, new_value in new_by_key.items():
        old_value = old_by_key.get(key)
        if old_value is None:
            actions.append(add(field_name, new_value))
            order.append(new_value.key)
            continue
        if old_value.label != new_value.label:
            actions.append(change_label(field_name, new_value))
    # New values are appended at the end by the platform, so compare against
    # that order rather than the old one.
    if order != list(new_by_key):
        actions.append(change_order(field_name, tuple(new_by_key)))
    return actions


def enum_value_actions(field_name: str, old: EnumType, new: EnumType) -> list[TypeUpdateAction]:
    """Return the actions that turn the values of ``old`` into those of ``new``."""
    return _value_actions(
        field_name, old.values, new.values, AddEnumValue, ChangeEnumValueLabel, ChangeEnumValueOrder
    )


def localized_enum_value_actions(
    field_name: str, old: LocalizedEnumType, new: LocalizedEnumType
) -> list[TypeUpdateAction]:
    """Return the actions that turn the localized values of ``old`` into those of ``new``."""
    return _value_actions(
        field_name,
        old.values,
        new.values,
        AddLocalizedEnumValue,
        ChangeLocalizedEnumValueLabel,
        ChangeLocalizedEnumValueOrder,
    )


def _by_name(fields: Iterable[Mapping[str, Any]] | None) -> dict[str, FieldDefinition]:
    result: dict[str, FieldDefinition] = {}
    for item in fields or ():
        definition = expand_field_definition(item)
        result[definition.name] = definition
    return result


def _type_specific_actions(
    name: str, old_type: Any, new_type: Any
) -> list[TypeUpdateAction]:
    if isinstance(new_type, LocalizedEnumType):
        return localized_enum_value_actions(name, old_type, new_type)
    if isinstance(new_type, EnumType):
        return enum_value_actions(name, old_type, new_type)
    if isinstance(new_type, SetType):
        old_element, new_element = old_type.element_type, new_type.element_type
        if type(old_element) is not type(new_element):
            raise ValueError("changing field types is not supported in commercetools")
        if isinstance(new_element, EnumType):
            return enum_value_actions(name, old_element, new_element)
        if isinstance(new_element, LocalizedEnumType):
            return localized_enum_value_actions(name, old_element, new_element)
    return []


def field_change_actions(
    old: Iterable[Mapping[str, Any]] | None, new: Iterable[Mapping[str, Any]] | None
) -> list[TypeUpdateAction]:
    """Return the actions that turn the ``old`` field blocks into the ``new`` ones."""
    old_fields = _by_name(old)
    new_fields = _by_name(new)

    # Removing fields already reorders the remaining ones remotely.
    order = list(old_fields)
    actions: list[TypeUpdateAction] = []

    for name in old_fields:
        if name not in new_fields:
            actions.append(RemoveFieldDefinition(name))
            order = remove_value(order, name)

    for name, new_field in new_fields.items():
        old_field = old_fields.get(name)
        if old_field is None:
            actions.append(AddFieldDefinition(new_field))
            order.append(new_field.name)
            continue

        if type(old_field.type) is not type(new_field.type):
            raise ValueError("changing field types is not supported in commercetools")

        if old_field.label != new_field.label:
            actions.append(ChangeLabel(name, new_field.label))

        if old_field.input_hint != new_field.input_hint:
            actions.append(ChangeInputHint(name, new_field.input_hint))

        actions.extend(_type_specific_actions(name, old_field.type, new_field.type))

    if order != list(new_fields):
        actions.append(ChangeFieldDefinitionOrder(tuple(new_fields)))
    return actions


def _localized(value: Any) -> dict[str, str]:
    return {str(locale): str(text) for locale, text in (value or {}).items()}


def type_update_actions(
    old: Mapping[str, Any], new: Mapping[str, Any]
) -> list[TypeUpdateAction]:
    """Return the actions that turn the ``old`` type configuration into ``new``."""
    actions: list[TypeUpdateAction] = []
    if old.get("key") != new.get("key"):
        actions.append(ChangeKey(new.get("key") or ""))
    if old.get("name") != new.get("name"):
        actions.append(ChangeName(_localized(new.get("name"))))
    if old.get("description") != new.get("description"):
        actions.append(SetDescription(_localized(new.get("description"))))
    if old.get("field") != new.get("field"):
        actions.extend(field_change_actions(old.get("field"), new.get("field")))
    return actions