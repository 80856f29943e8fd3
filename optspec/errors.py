"""Exceptions raised while declaring options or parsing command lines."""

LQUOTE = "‘"
RQUOTE = "’"


def _quote(text: str) -> str:
    return f"{LQUOTE}{text}{RQUOTE}"


class OptionException(Exception):
    """Base class of every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OptionSpecException(OptionException):
    """An option was declared incorrectly."""


class OptionParseException(OptionException):
    """A command line could not be parsed."""


class OptionExistsError(OptionSpecException):
    """An option with the same name was already declared."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} already exists")
        self.option = option


class InvalidOptionFormatError(OptionSpecException):
    """An option specifier such as ``"f,file"`` is malformed."""

    def __init__(self, format: str) -> None:
        super().__init__(f"Invalid option format {_quote(format)}")
        self.format = format


class OptionSyntaxError(OptionParseException):
    """An argument starts with ``-`` but is not a valid option."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Argument {_quote(text)} starts with a - but has incorrect syntax"
        )
        self.text = text


class OptionNotExistsError(OptionParseException):
    """An option given on the command line was never declared."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} does not exist")
        self.option = option


class MissingArgumentError(OptionParseException):
    """An option needing an argument was the last thing on the line."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} is missing an argument")
        self.option = option


class OptionRequiresArgumentError(OptionParseException):
    """A short option needing an argument was grouped with others."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} requires an argument")
        self.option = option


class OptionNotHasArgumentError(OptionParseException):
    """An argument was given to an option that takes none."""

    def __init__(self, option: str, arg: str) -> None:
        super().__init__(
            f"Option {_quote(option)} does not take an argument, "
            f"but argument {_quote(arg)} given"
        )
        self.option = option
        self.arg = arg


class OptionNotPresentError(OptionParseException):
    """A parse result was asked for an option it does not know."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} not present")
        self.option = option


class OptionHasNoValueError(OptionException):
    """A value was requested from an option that holds none."""

    def __init__(self, option: str) -> None:
        if not option:
            message = f"Option {_quote(option)} has no value"
        else:
            message = "Option has no value"
        super().__init__(message)
        self.option = option


class ArgumentIncorrectType(OptionParseException):
    """An argument could not be converted to the option's type."""

    def __init__(self, arg: str) -> None:
        super().__init__(f"Argument {_quote(arg)} failed to parse")
        self.arg = arg


class OptionRequiredError(OptionParseException):
    """A required option was not given."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quote(option)} is required but not present")
        self.option = option