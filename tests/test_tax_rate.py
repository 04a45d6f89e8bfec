import pytest

from ctresources.tax_rate import (
    SubRate,
    TaxCategory,
    TaxRate,
    find_new_tax_rate,
    find_tax_rate,
    get_tax_rate,
    sub_rates_from_config,
    tax_rate_draft,
    tax_rate_ids,
    tax_rate_state,
    validate_tax_rate_amount,
)


def _rate(rate_id, name="r", amount=0.2):
    return TaxRate(id=rate_id, name=name, amount=amount, included_in_price=True, country="DE")


@pytest.mark.parametrize("amount", [0, 0.0, 0.2, 1, 1.0])
def test_validate_amount_accepts_range(amount):
    assert validate_tax_rate_amount(amount, "amount") is None


@pytest.mark.parametrize("amount", [-0.1, 1.5])
def test_validate_amount_rejects_out_of_range(amount):
    with pytest.raises(ValueError, match="must be between 0 and 1 inclusive"):
        validate_tax_rate_amount(amount, "amount")


def test_validate_amount_rejects_non_number():
    with pytest.raises(TypeError):
        validate_tax_rate_amount("0.2", "amount")


def test_sub_rates_from_config():
    items = [{"name": "foo", "amount": 0.2}, {"name": "foo2", "amount": 0.1}]
    assert sub_rates_from_config(items) == [SubRate("foo", 0.2), SubRate("foo2", 0.1)]
    assert sub_rates_from_config(None) == []


def test_sub_rate_amount_validated():
    with pytest.raises(ValueError):
        sub_rates_from_config([{"name": "x", "amount": 2}])


def test_tax_rate_draft():
    draft = tax_rate_draft(
        {
            "name": "rate",
            "amount": 0.3,
            "included_in_price": True,
            "country": "DE",
            "sub_rate": [{"name": "foo", "amount": 0.2}],
        }
    )
    assert draft.name == "rate"
    assert draft.amount == 0.3
    assert draft.included_in_price is True
    assert draft.country == "DE"
    assert draft.state == ""
    assert draft.sub_rates == [SubRate("foo", 0.2)]


def test_tax_rate_draft_defaults():
    draft = tax_rate_draft({"name": "rate", "included_in_price": False, "country": "DE"})
    assert draft.amount == 0.0
    assert draft.sub_rates == []


def test_tax_rate_state_round_trip():
    rate = TaxRate(
        id="id-1",
        name="rate",
        amount=0.2,
        included_in_price=False,
        country="DE",
        state="Berlin",
        sub_rates=[SubRate("foo", 0.2)],
    )
    state = tax_rate_state(rate)
    assert state["sub_rate"] == [{"name": "foo", "amount": 0.2}]
    draft = tax_rate_draft(state)
    assert (draft.name, draft.amount, draft.included_in_price, draft.country, draft.state) == (
        rate.name,
        rate.amount,
        rate.included_in_price,
        rate.country,
        rate.state,
    )
    assert draft.sub_rates == rate.sub_rates


def test_tax_rate_ids_and_new_rate():
    category = TaxCategory(id="cat", version=1, rates=[_rate("a"), _rate("b")])
    assert tax_rate_ids(category) == ["a", "b"]
    updated = TaxCategory(id="cat", version=2, rates=[_rate("a"), _rate("b"), _rate("c")])
    assert find_new_tax_rate(updated, tax_rate_ids(category)).id == "c"
    assert find_new_tax_rate(category, tax_rate_ids(category)) is None


def test_get_tax_rate():
    category = TaxCategory(id="cat", version=1, rates=[_rate("a", name="first")])
    assert get_tax_rate(category, "a").name == "first"
    assert get_tax_rate(category, "missing") is None


def test_find_tax_rate_across_categories():
    first = TaxCategory(id="c1", version=1, rates=[_rate("a")])
    second = TaxCategory(id="c2", version=1, rates=[_rate("b")])
    category, rate = find_tax_rate("b", [first, second])
    assert category.id == "c2"
    assert rate.id == "b"
    assert find_tax_rate("z", [first, second]) == (None, None)