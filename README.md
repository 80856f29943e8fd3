# optspec

A small library for declaring command-line options and parsing an argument
list against them. It supports short and long options, grouped short flags,
option groups, default and implicit values, positional arguments and
formatted help text. It has no dependencies outside the standard library.

## Installation

```
pip install optspec
```

## Declaring options

```python
from optspec.options import Options
from optspec.values import value, list_value, integer

options = Options("tool", "A short description of the tool")
(
    options.add_options()
    ("d,debug", "Enable debugging")
    ("n,count", "How many times", value(integer(32, True)).default_value("1"))
    ("f,file", "Input files", list_value(str))
    ("o,output", "Output file", value(str), "FILE")
)
options.parse_positional(["file"])
```

`Options.add_options(group)` returns an `OptionAdder`; each call adds one
option and returns the adder, so calls can be chained. An option is specified
as `"s,long"`, `"long"` or a single character. Options can also be declared
with `optspec.options.Option` objects, passed as a list to
`add_options(group, [...])` or one at a time to `add_option(group, option)`.
Declaring the same name twice raises `OptionExistsError`; a malformed
specifier raises `InvalidOptionFormatError`.

Without a value argument an option is a flag: it defaults to `false` and
becomes `true` when given. A `Value` set up with `default_value(...)` is
filled in when the option is absent; one set up with `implicit_value(...)`
takes that text whenever the option is given, without consuming the next
argument (`no_implicit_value()` removes it).

## Value kinds

`value(kind)` holds one item and `list_value(kind)` collects items. `kind`
may be:

- `bool` — accepts `t`, `T`, `true`, `True`, `1` and `f`, `F`, `false`,
  `False`, `0`;
- `str` — the text as given;
- `int` — a 64-bit signed integer;
- `integer(bits, signed)` — an integer of the given width;
- `CHAR` — exactly one character;
- any callable taking the text, such as `float`; a `ValueError`, `TypeError`
  or `ArithmeticError` from it becomes `ArgumentIncorrectType`.

Integers accept decimal and `0x` hexadecimal, optionally with a leading `-`,
and are range-checked for their width. List values split each argument on
commas and collect repeated occurrences. The parsers are also available
directly as `parse_value`, `parse_integer`, `parse_bool` and `parse_char` in
`optspec.values`.

## Parsing

```python
result = options.parse(["tool", "-d", "--count=3", "a.txt", "b.txt"])

result.count("debug")        # 1
result["count"].get()        # 3
result["file"].get()         # ["a.txt", "b.txt"]
"output" in result           # True: every declared name can be looked up
result.arguments             # KeyValue entries in the order options were given
result.unmatched             # arguments nothing consumed
```

As with a process's argument vector, the first element is the program name
and is skipped. Everything after `--` is handed to the positional options;
whatever they cannot take ends up in `unmatched`. Each `KeyValue` in
`arguments` has a `key` (the long name), the raw `value` text, and
`as_type(kind)` to convert it.

Looking up a name that was never declared raises `OptionNotPresentError`;
`count` returns 0 for it instead. Calling `get()` on an option that was
neither given nor has a default raises `OptionHasNoValueError`.

Errors are raised as subclasses of `optspec.errors.OptionException`:
specification problems as `OptionSpecException` and problems with the
argument list as `OptionParseException` (for example `OptionNotExistsError`,
`OptionSyntaxError`, `MissingArgumentError`, `OptionRequiresArgumentError`,
`ArgumentIncorrectType`). Unknown options can be let through with
`options.allow_unrecognised_options()`: unknown long options are then kept in
`unmatched` and unknown short letters are skipped.

## Help

```python
print(options.help())
```

produces the description, a usage line and every group's options, with
descriptions wrapped to fit a 76-column layout and defaults shown in the
description. Pass a list of group names to `help(...)` to limit the output;
`groups()` lists the known groups in sorted order and `group_help(name)`
returns a `HelpGroupDetails` for one group. `custom_help`, `positional_help`
and `show_positional_help` adjust the usage line and whether positional
options appear in the listing. The column formatting is available on its own
as `format_option` and `format_description` in `optspec.helpformat`.

## What it does not do

The package is a library only; it installs no command. It does not check
that options are required: `OptionRequiredError` exists for callers to raise
themselves, but parsing never raises it.