"""Tax categories: drafts and update actions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class TaxCategoryDraft:
    """The data needed to create a tax category."""

    name: str
    description: str | None = None
    key: str | None = None
    rates: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ChangeTaxCategoryName:
    name: str


@dataclass(frozen=True)
class SetTaxCategoryKey:
    key: str


@dataclass(frozen=True)
class SetTaxCategoryDescription:
    description: str


TaxCategoryUpdateAction = Union[
    ChangeTaxCategoryName,
    SetTaxCategoryKey,
    SetTaxCategoryDescription,
]


def tax_category_draft(config: Mapping[str, Any]) -> TaxCategoryDraft:
    """Build the draft for creating a tax category; rates are managed separately."""
    key = config.get("key") or ""
    return TaxCategoryDraft(
        name=config["name"],
        description=config.get("description") or "",
        key=key or None,
        rates=[],
    )


def tax_category_update_actions(
    old: Mapping[str, Any], new: Mapping[str, Any]
) -> list[TaxCategoryUpdateAction]:
    """Return the actions that turn the ``old`` configuration into ``new``."""
    actions: list[TaxCategoryUpdateAction] = []
    if old.get("name") != new.get("name"):
        actions.append(ChangeTaxCategoryName(new.get("name") or ""))
    if old.get("key") != new.get("key"):
        actions.append(SetTaxCategoryKey(new.get("key") or ""))
    if old.get("description") != new.get("description"):
        actions.append(SetTaxCategoryDescription(new.get("description") or ""))
    return actions