"""Walking a command line against a table of declared options."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Hashable

from .errors import (
    MissingArgumentError,
    OptionNotExistsError,
    OptionRequiresArgumentError,
    OptionSyntaxError,
)
from .result import KeyValue, OptionDetails, OptionValue, ParseResult

_OPTION_MATCHER = re.compile(
    r"--([A-Za-z0-9][-_A-Za-z0-9]+)(=(.*))?|-([A-Za-z0-9]+)"
)


class OptionParser:
    """Parses an argument vector into a :class:`ParseResult`.

    ``options`` maps every short and long name to its :class:`OptionDetails`;
    ``positional`` names the options that receive positional arguments.
    """

    def __init__(
        self,
        options: Mapping[str, OptionDetails],
        positional: Sequence[str] = (),
        allow_unrecognised: bool = False,
    ) -> None:
        self._options = options
        self._positional = list(positional)
        self._allow_unrecognised = allow_unrecognised
        self._reset()

    def _reset(self) -> None:
        self._sequential: list[KeyValue] = []
        self._parsed: dict[Hashable, OptionValue] = {}
        self._keys: dict[str, Hashable] = {}
        self._next_positional = 0

    def _store(self, details: OptionDetails) -> OptionValue:
        return self._parsed.setdefault(details.key, OptionValue())

    def _parse_option(self, details: OptionDetails, arg: str) -> None:
        self._store(details).parse(details, arg)
        self._sequential.append(KeyValue(details.long_name, arg))

    def _checked_parse_arg(
        self, argv: Sequence[str], current: int, details: OptionDetails, name: str
    ) -> int:
        """Parse the option's argument; return the index of the last item used."""
        value = details.value
        if value.has_implicit:
            self._parse_option(details, value.implicit)
            return current
        if current + 1 >= len(argv):
            raise MissingArgumentError(name)
        self._parse_option(details, argv[current + 1])
        return current + 1

    def _consume_positional(self, arg: str) -> bool:
        while self._next_positional < len(self._positional):
            name = self._positional[self._next_positional]
            details = self._options.get(name)
            if details is None:
                raise OptionNotExistsError(name)
            if details.value.is_container:
                self._parse_option(details, arg)
                return True
            if self._store(details).count == 0:
                self._parse_option(details, arg)
                self._next_positional += 1
                return True
            self._next_positional += 1
        return False

    def _parse_short_group(
        self, argv: Sequence[str], current: int, letters: str
    ) -> int:
        last = len(letters) - 1
        for i, letter in enumerate(letters):
            details = self._options.get(letter)
            if details is None:
                if self._allow_unrecognised:
                    continue
                raise OptionNotExistsError(letter)
            if i == last:
                current = self._checked_parse_arg(argv, current, details, letter)
            elif details.value.has_implicit:
                self._parse_option(details, details.value.implicit)
            else:
                raise OptionRequiresArgumentError(letter)
        return current

    def _apply_defaults(self) -> None:
        for details in self._options.values():
            store = self._store(details)
            if details.value.has_default and not store.count and not store.has_default:
                store.parse_default(details)

    def _finalise_aliases(self) -> None:
        for details in self._options.values():
            for name in (details.short_name, details.long_name):
                if name:
                    self._keys[name] = details.key
            self._parsed.setdefault(details.key, OptionValue())

    def parse(self, argv: Sequence[str]) -> ParseResult:
        """Parse ``argv``; its first item is the program name and is skipped."""
        self._reset()
        unmatched: list[str] = []
        current = 1
        consume_remaining = False

        while current < len(argv):
            arg = argv[current]
            if arg == "--":
                consume_remaining = True
                current += 1
                break

            match = _OPTION_MATCHER.fullmatch(arg)
            if match is None:
                if arg.startswith("-") and len(arg) > 1 and not self._allow_unrecognised:
                    raise OptionSyntaxError(arg)
                if not self._consume_positional(arg):
                    unmatched.append(arg)
            elif match.group(4):
                current = self._parse_short_group(argv, current, match.group(4))
            else:
                name = match.group(1)
                details = self._options.get(name)
                if details is None:
                    if self._allow_unrecognised:
                        unmatched.append(arg)
                        current += 1
                        continue
                    raise OptionNotExistsError(name)
                if match.group(2) is not None:
                    self._parse_option(details, match.group(3))
                else:
                    current = self._checked_parse_arg(argv, current, details, name)

            current += 1

        self._apply_defaults()

        if consume_remaining:
            while current < len(argv) and self._consume_positional(argv[current]):
                current += 1
            unmatched.extend(argv[current:])

        self._finalise_aliases()

        return ParseResult(
            keys=self._keys,
            values=self._parsed,
            arguments=self._sequential,
            unmatched=unmatched,
        )