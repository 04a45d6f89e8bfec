import pytest

from ctresources import utils


def test_create_lookup():
    data = [
        {"name": "name1", "value": "Value 1"},
        {"name": "name2", "value": "Value 2"},
    ]
    result = utils.create_lookup(data, "name")
    assert result["name1"] is data[0]
    assert result["name2"] is data[1]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("2018-01-02T15:04:05.000Z", "2018-01-02T15:04:05.000Z", True),
        ("2017-03-04T10:01:02.000Z", "2018-01-02T15:04:05.000Z", False),
        ("2018-01-02T15:04:05.000Z", "2018-01-02T15:04:05Z", True),
        ("2018-01-02T15:04:05Z", "2018-01-02T15:04:05Z", True),
        ("2018-01-02T15:04:05Z", "2018-01-02T15:04:05.999Z", True),
        ("2018-01-02T15:04:04Z", "2018-01-02T15:04:05Z", False),
        ("2018-01-02T15:06:04Z", "2018-01-02T15:04:05.999Z", False),
        ("", "2018-01-02T15:04:05.999Z", False),
        ("", "xxx", False),
        ("", "", True),
    ],
)
def test_compare_date_string(a, b, expected):
    assert utils.compare_date_string(a, b) is expected


@pytest.mark.parametrize("value, expected", [(None, None), (0, None), (1, 1)])
def test_int_nil_if_empty(value, expected):
    assert utils.int_nil_if_empty(value) == expected


@pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("x", "x")])
def test_nil_if_empty(value, expected):
    assert utils.nil_if_empty(value) == expected


def test_expand_string_array():
    assert utils.expand_string_array(("a", "b")) == ["a", "b"]
    with pytest.raises(TypeError):
        utils.expand_string_array(["a", 1])


def test_validate_currency_code():
    utils.validate_currency_code("EUR", "currency")
    with pytest.raises(ValueError, match="ISO 4217"):
        utils.validate_currency_code("XXX", "currency")


def test_transform_to_list():
    data = {"a": {"x": 1}}
    utils.transform_to_list(data, "a")
    utils.transform_to_list(data, "b")
    assert data == {"a": [{"x": 1}], "b": [None]}


def test_first_and_element_from_slice():
    assert utils.first_element([]) is None
    assert utils.first_element([{"a": 1}, {"b": 2}]) == {"a": 1}
    assert utils.element_from_slice({"type": [{"name": "Set"}]}, "type") == {"name": "Set"}
    assert utils.element_from_slice({"type": []}, "type") is None
    assert utils.element_from_slice({}, "type") is None


def test_is_not_empty():
    assert utils.is_not_empty({"a": "v"}, "a") == "v"
    assert utils.is_not_empty({"a": ""}, "a") is None
    assert utils.is_not_empty({}, "a") is None


def test_validate_localized_string_key():
    utils.validate_localized_string_key({"en": "x", "nl-NL": "y"})
    with pytest.raises(ValueError, match="Locale keys must match pattern"):
        utils.validate_localized_string_key({"EN": "x"})
    with pytest.raises(ValueError):
        utils.validate_localized_string_key({"en\n": "x"})


def test_parse_time_offsets_agree():
    utc = utils.parse_time("2018-01-02T15:04:05Z")
    shifted = utils.parse_time("2018-01-02T17:04:05+02:00")
    assert utc == shifted
    assert utils.parse_time("2018-01-02T15:04:05.5Z").microsecond == 500000
    with pytest.raises(ValueError):
        utils.parse_time("xxx")


def test_remove_value():
    items = ["a", "b", "a"]
    assert utils.remove_value(items, "a") == ["b", "a"]
    assert utils.remove_value(items, "z") == items
    assert items == ["a", "b", "a"]


def test_diff_maps():
    old = {"same": 1, "changed": 1, "gone": 1}
    new = {"same": 1, "changed": 2, "added": 3}
    assert utils.diff_maps(old, new) == {"changed": 2, "gone": None, "added": 3}
    assert utils.diff_maps(new, new) == {}