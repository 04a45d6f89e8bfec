"""Cross-attribute validators working on nested configuration data.

A configuration is a tree of dicts and lists. ``None`` is a null value and
``UNKNOWN`` a value not yet known. Paths are tuples of attribute names and
list indices. Expressions are tuples of steps that may also hold ``PARENT``,
``WILDCARD`` and, as first step, ``ROOT``; expressions not starting at
``ROOT`` are relative to the validated attribute.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

Step = Union[str, int]
Path = tuple[Step, ...]

PARENT = ".."
WILDCARD = "*"
ROOT = "$"

INVALID_COMBINATION = "Invalid Attribute Combination"
PATH_NOT_FOUND = "Invalid Path Expression for Schema Data"
_BUG_DETAIL = (
    "This is a bug in the provider, which should be reported in the provider's own issue tracker."
)


class _Unknown:
    _instance: _Unknown | None = None

    def __new__(cls) -> _Unknown:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = _Unknown()


@dataclass(frozen=True)
class Diagnostic:
    """An error found during validation."""

    summary: str
    detail: str
    path: Path | None = None


class _PathNotFound(Exception):
    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.path = path


def format_path(steps: Sequence[Step]) -> str:
    """Render a path or expression as ``a.b[0].c``."""
    text = ""
    for step in steps:
        if isinstance(step, int) or step == WILDCARD:
            text += f"[{step}]"
        else:
            text += ("." if text else "") + str(step)
    return text


def _quote(text: str) -> str:
    return json.dumps(text)


def _resolve(base: Path, expression: Sequence[Step]) -> Path:
    steps = list(expression[1:]) if expression and expression[0] == ROOT else [*base, *expression]
    resolved: list[Step] = []
    for step in steps:
        if step == PARENT:
            if resolved:
                resolved.pop()
        else:
            resolved.append(step)
    return tuple(resolved)


def _merge(base: Path, expressions: Sequence[Sequence[Step]]) -> list[Path]:
    merged = [_resolve(base, expr) for expr in expressions] or [tuple(base)]
    return list(dict.fromkeys(merged))


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _match(config: Any, steps: Path) -> list[tuple[Path, Any]]:
    current: list[tuple[Path, Any]] = [((), config)]
    for step in steps:
        following: list[tuple[Path, Any]] = []
        for prefix, value in current:
            if step == WILDCARD:
                if isinstance(value, Mapping):
                    following.extend((prefix + (k,), v) for k, v in value.items())
                elif _is_list(value):
                    following.extend((prefix + (i,), v) for i, v in enumerate(value))
                continue
            if value is None or value is UNKNOWN:
                following.append((prefix + (step,), value))
            elif isinstance(step, int) and _is_list(value) and 0 <= step < len(value):
                following.append((prefix + (step,), value[step]))
            elif isinstance(step, str) and isinstance(value, Mapping) and step in value:
                following.append((prefix + (step,), value[step]))
            else:
                raise _PathNotFound(prefix + (step,))
        current = following
    return current


def _invalid_combination(path: Path, description: str) -> Diagnostic:
    return Diagnostic(INVALID_COMBINATION, description[:1].upper() + description[1:], path)


class DependencyValidator:
    """Requires the given attributes once a string attribute has ``value``."""

    def __init__(self, value: str, *expressions: Sequence[Step]) -> None:
        self.value = value
        self.expressions = tuple(tuple(expr) for expr in expressions)

    def description(self) -> str:
        return "Validate the existence of specific attributes when the attribute has the given value"

    def markdown_description(self) -> str:
        return self.description()

    def validate(self, path: Path, value: Any, config: Any) -> list[Diagnostic]:
        path = tuple(path)
        source = value if isinstance(value, str) else ""
        if source != self.value:
            return []
        diagnostics: list[Diagnostic] = []
        for expression in _merge(path, self.expressions):
            try:
                matches = _match(config, expression)
            except _PathNotFound:
                diagnostics.append(
                    _invalid_combination(
                        path[:-1],
                        f"Block {_quote(format_path(expression[:-1]))} must be specified "
                        f"when {_quote(format_path(path))} is {_quote(source)}",
                    )
                )
                continue
            for matched, matched_value in matches:
                if matched == path:
                    continue
                if matched_value is UNKNOWN:
                    return diagnostics
                if matched_value is None:
                    diagnostics.append(
                        _invalid_combination(
                            path,
                            f"Attribute {_quote(format_path(matched))} must be specified "
                            f"when {_quote(format_path(path))} is {_quote(source)}",
                        )
                    )
        return diagnostics


class RequireValueValidator:
    """Allows a non-empty list only when the given attributes equal ``value``."""

    def __init__(self, value: str, *expressions: Sequence[Step]) -> None:
        self.value = value
        self.expressions = tuple(tuple(expr) for expr in expressions)

    def description(self) -> str:
        return "Magic"

    def markdown_description(self) -> str:
        return self.description()

    def validate(self, path: Path, value: Any, config: Any) -> list[Diagnostic]:
        path = tuple(path)
        has_elements = _is_list(value) and len(value) > 0
        diagnostics: list[Diagnostic] = []
        for expression in _merge(path, self.expressions):
            try:
                matches = _match(config, expression)
            except _PathNotFound as error:
                diagnostics.append(
                    Diagnostic(
                        PATH_NOT_FOUND,
                        f"path {_quote(format_path(error.path))} does not exist in the configuration",
                    )
                )
                continue
            for matched, matched_value in matches:
                if matched == path:
                    continue
                if matched_value is None or matched_value is UNKNOWN:
                    text = ""
                elif isinstance(matched_value, str):
                    text = matched_value
                else:
                    diagnostics.append(
                        Diagnostic(
                            f"Expression {_quote(format_path(matched))} must resolve to a string",
                            _BUG_DETAIL,
                        )
                    )
                    text = ""
                if not has_elements:
                    continue
                if text != self.value:
                    diagnostics.append(
                        _invalid_combination(
                            path,
                            f"Block {_quote(format_path(path))} can only be specified "
                            f"when {_quote(format_path(matched))} is {_quote(self.value)}",
                        )
                    )
        return diagnostics