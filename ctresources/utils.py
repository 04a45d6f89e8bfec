"""Helpers shared by the resource modules: conversion, lookup and validation."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

CURRENCY_CODES = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND
    BOB BOV BRL BSD BTN BWP BYN BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU
    CRC CUC CUP CVE CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS
    GIP GMD GNF GTQ GYD HKD HNL HRK HTG HUF IDR ILS INR IQD IRR ISK JMD JOD
    JPY KES KGS KHR KMF KPW KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL
    MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MXV MYR MZN NAD NGN NIO NOK NPR
    NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SDG
    SEK SGD SHP SLL SOS SRD SSP STN SVC SYP SZL THB TJS TMT TND TOP TRY TTD
    TWD TZS UAH UGX USD USN UYI UYU UZS VEF VND VUV WST XAF XAG XAU XBA XBB
    XBC XBD XCD XDR XOF XPD XPF XPT XSU XTS XUA YER ZAR ZMW ZWL
    """.split()
)

LOCALE_KEY_PATTERN = "^[a-z]{2}(-[A-Z]{2})?$"
_LOCALE_KEY = re.compile(r"[a-z]{2}(?:-[A-Z]{2})?")

_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def expand_string_array(values: Iterable[Any]) -> list[str]:
    """Return the values as a list of strings, rejecting anything else."""
    result = list(values)
    for item in result:
        if not isinstance(item, str):
            raise TypeError(f"expected a string, got {type(item).__name__}")
    return result


def create_lookup(objects: Iterable[Mapping[str, Any]], key: str) -> dict[str, Any]:
    """Index a sequence of mappings by the string found under ``key``."""
    return {obj[key]: obj for obj in objects}


def validate_currency_code(value: Any, key: str) -> None:
    """Raise ValueError unless ``value`` is a known ISO 4217 currency code."""
    if not isinstance(value, str):
        raise TypeError(f"expected {key!r} to be a string")
    if value not in CURRENCY_CODES:
        raise ValueError(
            f'"{key}" unknown currency code, must be valid ISO 4217 code, got: {value}'
        )


def transform_to_list(data: dict[str, Any], key: str) -> None:
    """Wrap ``data[key]`` in a one element list, in place."""
    data[key] = [data.get(key)]


def first_element(items: Sequence[Any] | None) -> Any:
    """Return the first item, or None for an empty sequence."""
    if items:
        return items[0]
    return None


def element_from_slice(data: Mapping[str, Any], key: str) -> Any:
    """Return the first element of the list stored under ``key``, if any."""
    if key not in data:
        return None
    return first_element(data[key])


def is_not_empty(data: Mapping[str, Any], key: str) -> Any:
    """Return the value under ``key`` unless it is absent or the empty string."""
    value = data.get(key)
    if value == "":
        return None
    return value


def nil_if_empty(value: str | None) -> str | None:
    """Return None for None or the empty string, otherwise the value."""
    return value or None


def int_nil_if_empty(value: int | None) -> int | None:
    """Return None for None or zero, otherwise the value."""
    if value is None or value == 0:
        return None
    return value


def validate_localized_string_key(value: Any) -> None:
    """Raise ValueError if any key of a localized string is not a locale."""
    if not isinstance(value, Mapping):
        raise TypeError("expected a localized string mapping")
    for locale in value:
        if not isinstance(locale, str) or not _LOCALE_KEY.fullmatch(locale):
            raise ValueError(
                f"Locale keys must match pattern {LOCALE_KEY_PATTERN}: {locale!r}"
            )


def parse_time(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime."""
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


def _unix_seconds(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(seconds=1)


def compare_date_string(a: str, b: str) -> bool:
    """Tell whether two timestamps denote the same second."""
    if a == b:
        return True
    try:
        return _unix_seconds(parse_time(a)) == _unix_seconds(parse_time(b))
    except ValueError:
        return False


def remove_value(items: Sequence[str], value: str) -> list[str]:
    """Return a copy of ``items`` without the first occurrence of ``value``."""
    result = list(items)
    if value in result:
        result.remove(value)
    return result


def diff_maps(old: Mapping[str, Any], new: Mapping[str, Any]) -> dict[str, Any]:
    """Return the changed entries; keys that disappeared map to None."""
    result: dict[str, Any] = {}
    for key, value in old.items():
        if key not in new:
            result[key] = None
        elif value != new[key]:
            result[key] = new[key]
    for key, value in new.items():
        if key not in old:
            result[key] = value
    return result