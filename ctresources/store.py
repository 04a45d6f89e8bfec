"""Stores: drafts, state conversion and update actions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .utils import expand_string_array


@dataclass(frozen=True)
class ProductSelectionSetting:
    """Availability of a product selection in a store."""

    product_selection_id: str | None
    active: bool = False


@dataclass
class StoreDraft:
    """The data needed to create a store."""

    key: str
    name: dict[str, str] = field(default_factory=dict)
    languages: list[str] = field(default_factory=list)
    countries: list[dict[str, str]] = field(default_factory=list)
    distribution_channels: list[dict[str, str]] = field(default_factory=list)
    supply_channels: list[dict[str, str]] = field(default_factory=list)
    product_selections: list[ProductSelectionSetting] = field(default_factory=list)


@dataclass(frozen=True)
class SetStoreName:
    name: dict[str, str]


@dataclass(frozen=True)
class SetLanguages:
    languages: tuple[str, ...]


@dataclass(frozen=True)
class SetCountries:
    countries: tuple[dict[str, str], ...]


@dataclass(frozen=True)
class SetDistributionChannels:
    distribution_channels: tuple[dict[str, str], ...]


@dataclass(frozen=True)
class SetSupplyChannels:
    supply_channels: tuple[dict[str, str], ...]


@dataclass(frozen=True)
class RemoveProductSelection:
    product_selection_id: str | None


@dataclass(frozen=True)
class AddProductSelection:
    product_selection_id: str | None
    active: bool


StoreUpdateAction = Union[
    SetStoreName,
    SetLanguages,
    SetCountries,
    SetDistributionChannels,
    SetSupplyChannels,
    RemoveProductSelection,
    AddProductSelection,
]


def _localized(value: Any) -> dict[str, str]:
    return {str(locale): str(text) for locale, text in (value or {}).items()}


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def channel_identifiers(keys: Iterable[Any] | None) -> list[dict[str, str]]:
    """Turn channel keys into channel resource identifiers."""
    return [{"key": key} for key in expand_string_array(keys or ())]


def expand_product_selections(
    items: Iterable[Mapping[str, Any]] | None,
) -> list[ProductSelectionSetting]:
    """Build product selection settings from ``product_selection`` blocks."""
    result = []
    for raw in items or ():
        active = raw.get("active")
        if not isinstance(active, bool):
            active = False
        selection_id = raw.get("product_selection_id")
        if not isinstance(selection_id, str) or selection_id == "":
            selection_id = None
        result.append(ProductSelectionSetting(product_selection_id=selection_id, active=active))
    return result


def expand_store_countries(codes: Iterable[Any] | None) -> list[dict[str, str]]:
    """Turn country codes into store countries, dropping duplicates."""
    return [{"code": code} for code in _unique(expand_string_array(codes or ()))]


def flatten_store_channels(channels: Iterable[Mapping[str, Any]]) -> list[str]:
    """Return the keys of expanded channel references."""
    keys = []
    for channel in channels:
        obj = channel.get("obj")
        if obj is None:
            raise ValueError("failed to expand channel objects")
        keys.append(obj["key"])
    return keys


def _selection_fields(selection: Any) -> tuple[Any, Any]:
    if isinstance(selection, ProductSelectionSetting):
        return selection.active, selection.product_selection_id
    reference = selection.get("productSelection") or {}
    return selection.get("active"), reference.get("id")


def flatten_product_selections(selections: Iterable[Any]) -> list[dict[str, Any]]:
    """Render product selection settings as ``product_selection`` blocks."""
    result = []
    for selection in selections:
        active, selection_id = _selection_fields(selection)
        result.append({"active": active, "product_selection_id": selection_id})
    return result


def flatten_countries(countries: Iterable[Mapping[str, Any]]) -> list[str]:
    """Return the codes of store countries."""
    return [country["code"] for country in countries]


def store_draft(config: Mapping[str, Any]) -> StoreDraft:
    """Build the draft for creating a store from its configuration."""
    return StoreDraft(
        key=config["key"],
        name=_localized(config.get("name")),
        languages=expand_string_array(config.get("languages") or ()),
        countries=expand_store_countries(config.get("countries")),
        distribution_channels=channel_identifiers(config.get("distribution_channels")),
        supply_channels=channel_identifiers(config.get("supply_channels")),
        product_selections=expand_product_selections(config.get("product_selection")),
    )


def store_update_actions(
    old: Mapping[str, Any], new: Mapping[str, Any]
) -> list[StoreUpdateAction]:
    """Return the actions that turn the ``old`` store configuration into ``new``."""
    actions: list[StoreUpdateAction] = []

    if _localized(old.get("name")) != _localized(new.get("name")):
        actions.append(SetStoreName(_localized(new.get("name"))))

    if list(old.get("languages") or ()) != list(new.get("languages") or ()):
        actions.append(SetLanguages(tuple(expand_string_array(new.get("languages") or ()))))

    if set(old.get("countries") or ()) != set(new.get("countries") or ()):
        actions.append(SetCountries(tuple(expand_store_countries(new.get("countries")))))

    # The set actions replace the current channels as a whole.
    for attribute, action in (
        ("distribution_channels", SetDistributionChannels),
        ("supply_channels", SetSupplyChannels),
    ):
        if list(old.get(attribute) or ()) != list(new.get(attribute) or ()):
            actions.append(action(tuple(channel_identifiers(new.get(attribute)))))

    old_selections = expand_product_selections(old.get("product_selection"))
    new_selections = expand_product_selections(new.get("product_selection"))
    if set(old_selections) != set(new_selections):
        for selection in old_selections:
            if selection not in new_selections:
                actions.append(RemoveProductSelection(selection.product_selection_id))
        for selection in new_selections:
            if selection not in old_selections:
                actions.append(
                    AddProductSelection(selection.product_selection_id, selection.active)
                )

    return actions