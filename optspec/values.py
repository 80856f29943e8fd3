"""Typed option values and the text parsers behind them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from .errors import ArgumentIncorrectType

VECTOR_DELIMITER = ","

_INTEGER_PATTERN = re.compile(r"(-)?(0x)?([0-9a-zA-Z]+)|((0x)?0)")
_TRUTHY_PATTERN = re.compile(r"(t|T)(rue)?|1")
_FALSY_PATTERN = re.compile(r"(f|F)(alse)?|0")
_HEX_LETTERS = frozenset("abcdefABCDEF")


@dataclass(frozen=True)
class _IntegerKind:
    bits: int = 64
    signed: bool = True


class _CharKind:
    def __repr__(self) -> str:
        return "CHAR"


CHAR = _CharKind()
"""Kind for options that take exactly one character."""


def integer(bits: int = 64, signed: bool = True) -> _IntegerKind:
    """Return the kind of a fixed-width integer option."""
    if bits <= 0:
        raise ValueError("bits must be positive")
    return _IntegerKind(bits, signed)


def parse_integer(text: str, bits: int = 64, signed: bool = True) -> int:
    """Parse decimal or ``0x`` hex text into an integer of the given width."""
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        raise ArgumentIncorrectType(text)
    if match.group(4):
        return 0

    negative = match.group(1) is not None
    base = 16 if match.group(2) else 10
    unsigned_max = (1 << bits) - 1

    result = 0
    for ch in match.group(3):
        if ch.isdigit():
            digit = int(ch)
        elif base == 16 and ch in _HEX_LETTERS:
            digit = int(ch, 16)
        else:
            raise ArgumentIncorrectType(text)
        result = result * base + digit
        if result > unsigned_max:
            raise ArgumentIncorrectType(text)

    if signed:
        limit = 1 << (bits - 1)
        if negative and result > limit:
            raise ArgumentIncorrectType(text)
        if not negative and result > limit - 1:
            raise ArgumentIncorrectType(text)
    elif negative:
        raise ArgumentIncorrectType(text)

    return -result if negative else result


def parse_bool(text: str) -> bool:
    """Parse ``t``, ``true``, ``1`` and ``f``, ``false``, ``0`` (first letter any case)."""
    if _TRUTHY_PATTERN.fullmatch(text):
        return True
    if _FALSY_PATTERN.fullmatch(text):
        return False
    raise ArgumentIncorrectType(text)


def parse_char(text: str) -> str:
    """Accept text of exactly one character."""
    if len(text) != 1:
        raise ArgumentIncorrectType(text)
    return text


def parse_value(text: str, kind: Any) -> Any:
    """Convert ``text`` according to ``kind``.

    ``kind`` is ``bool``, ``str``, ``int`` (64-bit signed), a kind from
    :func:`integer`, :data:`CHAR`, or any callable taking the text.
    """
    if kind is bool:
        return parse_bool(text)
    if kind is str:
        return text
    if kind is int:
        return parse_integer(text)
    if isinstance(kind, _IntegerKind):
        return parse_integer(text, kind.bits, kind.signed)
    if kind is CHAR:
        return parse_char(text)
    if callable(kind):
        try:
            return kind(text)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ArgumentIncorrectType(text) from exc
    raise TypeError(f"unsupported value kind: {kind!r}")


def _split_list(text: str) -> list[str]:
    tokens = text.split(VECTOR_DELIMITER)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _initial(kind: Any) -> Any:
    if kind is bool:
        return False
    if kind is str:
        return ""
    if kind is int or isinstance(kind, _IntegerKind):
        return 0
    if kind is CHAR:
        return "\0"
    try:
        return kind()
    except Exception:
        return None


class Value:
    """Type, defaults and storage for one option's value."""

    def __init__(self, kind: Any = bool, container: bool = False) -> None:
        self.kind = kind
        self.is_container = container
        self.has_default = False
        self.default = ""
        self.has_implicit = False
        self.implicit = ""
        if self.is_boolean:
            self.has_default = True
            self.default = "false"
            self.has_implicit = True
            self.implicit = "true"
        self._result = self._fresh()

    @property
    def is_boolean(self) -> bool:
        return self.kind is bool and not self.is_container

    def _fresh(self) -> Any:
        return [] if self.is_container else _initial(self.kind)

    def parse(self, text: str) -> None:
        """Parse ``text`` into the stored value; lists are extended."""
        if self.is_container:
            items = [parse_value(token, self.kind) for token in _split_list(text)]
            self._result.extend(items)
        else:
            self._result = parse_value(text, self.kind)

    def parse_default(self) -> None:
        """Parse the default text into the stored value."""
        self.parse(self.default)

    def default_value(self, value: str) -> Value:
        self.has_default = True
        self.default = value
        return self

    def implicit_value(self, value: str) -> Value:
        self.has_implicit = True
        self.implicit = value
        return self

    def no_implicit_value(self) -> Value:
        self.has_implicit = False
        return self

    def clone(self) -> Value:
        """Copy the settings into a new value with fresh storage."""
        other = Value(self.kind, self.is_container)
        other.has_default = self.has_default
        other.default = self.default
        other.has_implicit = self.has_implicit
        other.implicit = self.implicit
        return other

    def get(self) -> Any:
        return self._result

    def __repr__(self) -> str:
        return (
            f"Value(kind={self.kind!r}, container={self.is_container}, "
            f"value={self._result!r})"
        )


def value(kind: Any = bool) -> Value:
    """Return a value holding a single item of ``kind``."""
    return Value(kind)


def list_value(kind: Any = str) -> Value:
    """Return a value collecting comma-separated items of ``kind``."""
    return Value(kind, container=True)


ValueFactory = Callable[[], Value]