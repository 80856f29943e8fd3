"""Declaring options, parsing command lines and producing help text."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .errors import InvalidOptionFormatError, OptionExistsError
from .helpformat import (
    OPTION_DESC_GAP,
    OPTION_LONGEST,
    HelpGroupDetails,
    HelpOptionDetails,
    format_description,
    format_option,
)
from .parser import OptionParser
from .result import OptionDetails, ParseResult
from .values import Value, value as make_value

_OPTION_SPECIFIER = re.compile(
    r"(([A-Za-z0-9]),)?[ ]*([A-Za-z0-9][-_A-Za-z0-9]*)?"
)

_HELP_WIDTH = 76


@dataclass
class Option:
    """A declaration such as ``Option("f,file", "File to read", value(str))``."""

    opts: str
    desc: str
    value: Value = field(default_factory=lambda: make_value(bool))
    arg_help: str = ""


class OptionAdder:
    """Adds options to one group; calls can be chained."""

    def __init__(self, options: Options, group: str = "") -> None:
        self._options = options
        self._group = group

    def __call__(
        self,
        opts: str,
        desc: str,
        value: Value | None = None,
        arg_help: str = "",
    ) -> OptionAdder:
        match = _OPTION_SPECIFIER.fullmatch(opts)
        if match is None:
            raise InvalidOptionFormatError(opts)

        short = match.group(2) or ""
        long = match.group(3) or ""
        if not short and not long:
            raise InvalidOptionFormatError(opts)
        if len(long) == 1 and short:
            raise InvalidOptionFormatError(opts)
        if len(long) == 1:
            short, long = long, short

        self._options._add_option(
            self._group,
            short,
            long,
            desc,
            value if value is not None else make_value(bool),
            arg_help,
        )
        return self


class Options:
    """The set of options a program accepts."""

    def __init__(self, program: str, help_string: str = "") -> None:
        self._program = program
        self._help_string = help_string
        self._custom_help = "[OPTION...]"
        self._positional_help = "positional parameters"
        self._show_positional = False
        self._allow_unrecognised = False
        self._options: dict[str, OptionDetails] = {}
        self._positional: list[str] = []
        self._positional_set: set[str] = set()
        self._help: dict[str, HelpGroupDetails] = {}

    def positional_help(self, text: str) -> Options:
        self._positional_help = text
        return self

    def custom_help(self, text: str) -> Options:
        self._custom_help = text
        return self

    def show_positional_help(self) -> Options:
        self._show_positional = True
        return self

    def allow_unrecognised_options(self) -> Options:
        self._allow_unrecognised = True
        return self

    def parse(self, argv: Sequence[str]) -> ParseResult:
        """Parse ``argv``, whose first item is the program name."""
        parser = OptionParser(self._options, self._positional, self._allow_unrecognised)
        return parser.parse(argv)

    def add_options(
        self, group: str = "", options: Iterable[Option] | None = None
    ) -> OptionAdder:
        """Return an adder for ``group``, first adding any ``options`` given."""
        adder = OptionAdder(self, group)
        for option in options or ():
            adder(option.opts, option.desc, option.value, option.arg_help)
        return adder

    def add_option(self, group: str, option: Option) -> None:
        self.add_options(group, [option])

    def _add_option(
        self,
        group: str,
        short: str,
        long: str,
        desc: str,
        value: Value,
        arg_help: str,
    ) -> None:
        details = OptionDetails(short, long, desc, value)
        for name in (short, long):
            if name:
                self._add_one_option(name, details)

        help_group = self._help.setdefault(group, HelpGroupDetails(name=group))
        help_group.options.append(
            HelpOptionDetails(
                short=short,
                long=long,
                desc=desc,
                has_default=value.has_default,
                default_value=value.default,
                has_implicit=value.has_implicit,
                implicit_value=value.implicit,
                arg_help=arg_help,
                is_container=value.is_container,
                is_boolean=value.is_boolean,
            )
        )

    def _add_one_option(self, name: str, details: OptionDetails) -> None:
        if name in self._options:
            raise OptionExistsError(name)
        self._options[name] = details

    def parse_positional(self, options: str | Iterable[str]) -> None:
        """Route positional arguments to the named options, in order."""
        names = [options] if isinstance(options, str) else list(options)
        self._positional = names
        self._positional_set.update(names)

    def _visible(self, details: HelpOptionDetails) -> bool:
        return self._show_positional or details.long not in self._positional_set

    def _help_one_group(self, name: str) -> str:
        group = self._help.get(name)
        if group is None:
            return ""

        parts = [f" {name} options:\n"] if name else []
        shown = [o for o in group.options if self._visible(o)]
        formatted = [format_option(o) for o in shown]

        longest = min(max((len(s) for s in formatted), default=0), OPTION_LONGEST)
        allowed = _HELP_WIDTH - longest - OPTION_DESC_GAP
        column = longest + OPTION_DESC_GAP

        for details, left in zip(shown, formatted):
            parts.append(left)
            if len(left) > longest:
                parts.append("\n" + " " * column)
            else:
                parts.append(" " * (column - len(left)))
            parts.append(format_description(details, column, allowed))
            parts.append("\n")
        return "".join(parts)

    def _group_help_text(self, names: Sequence[str]) -> str:
        parts = []
        last = len(names) - 1
        for i, name in enumerate(names):
            text = self._help_one_group(name)
            if not text:
                continue
            parts.append(text)
            if i < last:
                parts.append("\n")
        return "".join(parts)

    def help(self, groups: Sequence[str] | None = None) -> str:
        """Return the usage text, for the given groups or all of them."""
        text = (
            f"{self._help_string}\nUsage:\n  {self._program} {self._custom_help}"
        )
        if self._positional and self._positional_help:
            text += f" {self._positional_help}"
        text += "\n\n"
        text += self._group_help_text(list(groups) if groups else self.groups())
        return text

    def groups(self) -> list[str]:
        """Return the group names in sorted order."""
        return sorted(self._help)

    def group_help(self, group: str) -> HelpGroupDetails:
        """Return the help details of ``group``; KeyError if there is none."""
        return self._help[group]