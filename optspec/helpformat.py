"""Formatting of option lines for help output."""

from __future__ import annotations

from dataclasses import dataclass, field

OPTION_LONGEST = 30
OPTION_DESC_GAP = 2


@dataclass
class HelpOptionDetails:
    """What the help text needs to know about one option."""

    short: str
    long: str
    desc: str
    has_default: bool = False
    default_value: str = ""
    has_implicit: bool = False
    implicit_value: str = ""
    arg_help: str = ""
    is_container: bool = False
    is_boolean: bool = False


@dataclass
class HelpGroupDetails:
    """The options declared under one group name."""

    name: str = ""
    description: str = ""
    options: list[HelpOptionDetails] = field(default_factory=list)


def format_option(details: HelpOptionDetails) -> str:
    """Return the left-hand column for an option, e.g. ``-f, --file arg``."""
    parts = ["  "]
    if details.short:
        parts.append(f"-{details.short}")
        if details.long:
            parts.append(",")
    else:
        parts.append("   ")

    if details.long:
        parts.append(f" --{details.long}")

    arg = details.arg_help or "arg"
    if not details.is_boolean:
        if details.has_implicit:
            parts.append(f" [={arg}(={details.implicit_value})]")
        else:
            parts.append(f" {arg}")
    return "".join(parts)


def format_description(details: HelpOptionDetails, start: int, width: int) -> str:
    """Return the description, wrapped at ``width`` and indented by ``start``."""
    desc = details.desc
    if details.has_default and (
        not details.is_boolean or details.default_value != "false"
    ):
        if details.default_value:
            desc += f" (default: {details.default_value})"
        else:
            desc += ' (default: "")'

    pieces: list[str] = []
    indent = "\n" + " " * start
    start_line = 0
    last_space = 0
    size = 0

    for current, ch in enumerate(desc):
        if ch == " ":
            last_space = current

        if ch == "\n":
            start_line = current + 1
            last_space = start_line
        elif size > width:
            if last_space == start_line:
                pieces.append(desc[start_line : current + 1])
                pieces.append(indent)
                start_line = current + 1
            else:
                pieces.append(desc[start_line:last_space])
                pieces.append(indent)
                start_line = last_space + 1
            last_space = start_line
            size = 0
        else:
            size += 1

    pieces.append(desc[start_line:])
    return "".join(pieces)