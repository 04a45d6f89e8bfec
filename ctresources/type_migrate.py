"""Upgrade of stored custom type state from schema version 0 to version 1.

Version 0 kept enum values as a ``values`` mapping of key to label. Version 1
keeps them as a ``value`` list of ``{"key": ..., "label": ...}`` blocks.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


def _values_to_blocks(values: Mapping[str, Any]) -> list[dict[str, str]]:
    return [{"key": key, "label": str(label)} for key, label in values.items()]


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def migrate_field_v0_to_v1(field: MutableMapping[str, Any]) -> None:
    """Rewrite the enum values of one ``field`` block in place."""
    item_types = field.get("type")
    if not _is_list(item_types) or len(item_types) == 1 or not item_types:
        return

    item_type = item_types[0]
    if not isinstance(item_type, MutableMapping):
        return

    type_name = item_type.get("name")
    if not isinstance(type_name, str):
        return

    if type_name == "Set":
        element_types = item_type.get("element_type")
        if not _is_list(element_types) or len(element_types) == 1 or not element_types:
            return
        element = element_types[0]
        if not isinstance(element, MutableMapping) or "values" not in element:
            return
        values = element["values"]
        if not isinstance(values, Mapping):
            return
        # "values" and "value" cannot co-exist.
        element["value"] = _values_to_blocks(values)
        del element["values"]
    elif type_name == "Enum":
        values = item_type.get("values")
        if not isinstance(values, Mapping):
            return
        item_type["value"] = _values_to_blocks(values)
        del item_type["values"]


def migrate_type_state_v0_to_v1(raw_state: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Upgrade a raw version 0 type state in place and return it."""
    fields = raw_state.get("field")
    if not _is_list(fields):
        return raw_state
    for item in fields:
        if isinstance(item, MutableMapping):
            migrate_field_v0_to_v1(item)
    return raw_state