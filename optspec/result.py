"""Parsed option values and the result of parsing a command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable

from .errors import OptionHasNoValueError, OptionNotPresentError
from .values import Value, parse_value


@dataclass(eq=False)
class OptionDetails:
    """A declared option: its names, description and value prototype."""

    short_name: str
    long_name: str
    description: str
    value: Value

    @property
    def key(self) -> Hashable:
        """Identity shared by every alias of this option."""
        return (self.long_name, self.short_name)

    def make_storage(self) -> Value:
        """Return a fresh value with this option's settings."""
        return self.value.clone()


class OptionValue:
    """What was parsed for one option."""

    def __init__(self) -> None:
        self._value: Value | None = None
        self._long_name: str | None = None
        self.count = 0
        self.has_default = False

    def _ensure_value(self, details: OptionDetails) -> Value:
        if self._value is None:
            self._value = details.make_storage()
        return self._value

    def parse(self, details: OptionDetails, text: str) -> None:
        """Parse ``text`` as an occurrence of the option."""
        storage = self._ensure_value(details)
        self.count += 1
        storage.parse(text)
        self._long_name = details.long_name

    def parse_default(self, details: OptionDetails) -> None:
        """Store the option's default value."""
        storage = self._ensure_value(details)
        self.has_default = True
        self._long_name = details.long_name
        storage.parse_default()

    def get(self) -> Any:
        """Return the parsed value, raising if nothing was stored."""
        if self._value is None:
            raise OptionHasNoValueError(self._long_name or "")
        return self._value.get()

    def __repr__(self) -> str:
        return (
            f"OptionValue(count={self.count}, has_default={self.has_default}, "
            f"value={self._value!r})"
        )


@dataclass(frozen=True)
class KeyValue:
    """One option occurrence in command-line order."""

    key: str
    value: str

    def as_type(self, kind: Any) -> Any:
        """Convert the raw argument text according to ``kind``."""
        return parse_value(self.value, kind)


@dataclass
class ParseResult:
    """Everything a parse produced, looked up by option name."""

    keys: dict[str, Hashable] = field(default_factory=dict)
    values: dict[Hashable, OptionValue] = field(default_factory=dict)
    arguments: list[KeyValue] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)

    def _lookup(self, name: str) -> OptionValue | None:
        key = self.keys.get(name)
        if key is None:
            return None
        return self.values.get(key)

    def count(self, name: str) -> int:
        """Return how many times the option was given; 0 if unknown."""
        found = self._lookup(name)
        return 0 if found is None else found.count

    def __getitem__(self, name: str) -> OptionValue:
        found = self._lookup(name)
        if found is None:
            raise OptionNotPresentError(name)
        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._lookup(name) is not None