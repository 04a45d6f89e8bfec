"""Plan modifiers that fill in values missing from the configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BoolDefault:
    """Plans ``default`` for a boolean attribute that is not configured."""

    default: bool

    def _text(self) -> str:
        return "true" if self.default else "false"

    def description(self) -> str:
        return f"If value is not configured, defaults to {self._text()}"

    def markdown_description(self) -> str:
        return f"If value is not configured, defaults to `{self._text()}`"

    def modify(self, config_value: bool | None, plan_value: Any) -> Any:
        """Return the planned value, using the default when nothing is configured."""
        if config_value is None:
            return self.default
        return plan_value


@dataclass(frozen=True)
class EmptyList:
    """Plans an empty list for a list attribute whose plan is null."""

    def description(self) -> str:
        return "If value is not configured, defaults to empty list"

    def markdown_description(self) -> str:
        return self.description()

    def modify(self, config_value: Any, plan_value: Any) -> Any:
        """Return the planned value, replacing a null plan with an empty list."""
        if plan_value is None:
            return []
        return plan_value