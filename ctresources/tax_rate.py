"""Tax rates within tax categories: drafts, state and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SubRate:
    """One component of a combined tax rate."""

    name: str
    amount: float


@dataclass
class TaxRateDraft:
    """The data needed to add or replace a tax rate."""

    name: str
    amount: float
    included_in_price: bool
    country: str
    state: str | None = None
    sub_rates: list[SubRate] = field(default_factory=list)


@dataclass
class TaxRate:
    """A tax rate as stored in a tax category."""

    id: str
    name: str
    amount: float
    included_in_price: bool
    country: str
    state: str | None = None
    sub_rates: list[SubRate] = field(default_factory=list)


@dataclass
class TaxCategory:
    """A tax category with its rates."""

    id: str
    version: int
    name: str = ""
    key: str | None = None
    description: str | None = None
    rates: list[TaxRate] = field(default_factory=list)


def validate_tax_rate_amount(value: Any, key: str) -> None:
    """Raise ValueError unless ``value`` lies in the range [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected {key!r} to be a number")
    amount = float(value)
    if amount < 0 or amount > 1:
        raise ValueError(f'"{key}" must be between 0 and 1 inclusive, got: {amount:f}')


def sub_rates_from_config(items: Iterable[Mapping[str, Any]] | None) -> list[SubRate]:
    """Build sub-rates from ``sub_rate`` blocks."""
    result = []
    for raw in items or ():
        amount = raw["amount"]
        validate_tax_rate_amount(amount, "amount")
        result.append(SubRate(name=raw["name"], amount=float(amount)))
    return result


def tax_rate_draft(config: Mapping[str, Any]) -> TaxRateDraft:
    """Build a tax rate draft from the rate's configuration."""
    amount = config.get("amount", 0.0)
    if amount is None:
        amount = 0.0
    validate_tax_rate_amount(amount, "amount")
    country = config.get("country")
    return TaxRateDraft(
        name=config["name"],
        amount=float(amount),
        included_in_price=bool(config.get("included_in_price", False)),
        country=country if isinstance(country, str) else "",
        state=config.get("state") or "",
        sub_rates=sub_rates_from_config(config.get("sub_rate")),
    )


def tax_rate_state(rate: TaxRate) -> dict[str, Any]:
    """Render a tax rate as resource state."""
    return {
        "name": rate.name,
        "amount": rate.amount,
        "included_in_price": rate.included_in_price,
        "country": rate.country,
        "state": rate.state,
        "sub_rate": [{"name": sub.name, "amount": sub.amount} for sub in rate.sub_rates],
    }


def tax_rate_ids(category: TaxCategory) -> list[str]:
    """Return the ids of all rates of a category, in order."""
    return [rate.id for rate in category.rates]


def find_new_tax_rate(category: TaxCategory, old_ids: Iterable[str]) -> TaxRate | None:
    """Return the first rate whose id is not among ``old_ids``."""
    known = set(old_ids)
    return next((rate for rate in category.rates if rate.id not in known), None)


def get_tax_rate(category: TaxCategory, rate_id: str) -> TaxRate | None:
    """Return the rate of ``category`` with the given id, if any."""
    return next((rate for rate in category.rates if rate.id == rate_id), None)


def find_tax_rate(
    rate_id: str, categories: Iterable[TaxCategory]
) -> tuple[TaxCategory | None, TaxRate | None]:
    """Search all categories for a rate; return it with its category."""
    for category in categories:
        rate = get_tax_rate(category, rate_id)
        if rate is not None:
            return category, rate
    return None, None