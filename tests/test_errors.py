import pytest

from optspec.errors import (
    ArgumentIncorrectType,
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionException,
    OptionExistsError,
    OptionHasNoValueError,
    OptionNotExistsError,
    OptionNotHasArgumentError,
    OptionNotPresentError,
    OptionParseException,
    OptionRequiredError,
    OptionRequiresArgumentError,
    OptionSpecException,
    OptionSyntaxError,
)


def test_option_exists_message():
    err = OptionExistsError("file")
    assert str(err) == "Option ‘file’ already exists"
    assert err.option == "file"


def test_invalid_format_message():
    assert str(InvalidOptionFormatError("a,bc,")) == "Invalid option format ‘a,bc,’"


def test_syntax_message():
    assert (
        str(OptionSyntaxError("-!"))
        == "Argument ‘-!’ starts with a - but has incorrect syntax"
    )


def test_not_exists_message():
    assert str(OptionNotExistsError("x")) == "Option ‘x’ does not exist"


def test_missing_argument_message():
    assert str(MissingArgumentError("n")) == "Option ‘n’ is missing an argument"


def test_requires_argument_message():
    assert str(OptionRequiresArgumentError("n")) == "Option ‘n’ requires an argument"


def test_not_has_argument_message():
    err = OptionNotHasArgumentError("v", "3")
    assert str(err) == (
        "Option ‘v’ does not take an argument, but argument ‘3’ given"
    )
    assert (err.option, err.arg) == ("v", "3")


def test_not_present_message():
    assert str(OptionNotPresentError("q")) == "Option ‘q’ not present"


def test_has_no_value_messages():
    assert str(OptionHasNoValueError("")) == "Option ‘’ has no value"
    assert str(OptionHasNoValueError("name")) == "Option has no value"


def test_incorrect_type_message():
    assert str(ArgumentIncorrectType("abc")) == "Argument ‘abc’ failed to parse"


def test_required_message():
    assert (
        str(OptionRequiredError("out")) == "Option ‘out’ is required but not present"
    )


@pytest.mark.parametrize(
    "err, base",
    [
        (OptionExistsError("a"), OptionSpecException),
        (InvalidOptionFormatError("a"), OptionSpecException),
        (OptionSyntaxError("a"), OptionParseException),
        (OptionNotExistsError("a"), OptionParseException),
        (MissingArgumentError("a"), OptionParseException),
        (OptionRequiresArgumentError("a"), OptionParseException),
        (OptionNotHasArgumentError("a", "b"), OptionParseException),
        (OptionNotPresentError("a"), OptionParseException),
        (ArgumentIncorrectType("a"), OptionParseException),
        (OptionRequiredError("a"), OptionParseException),
    ],
)
def test_hierarchy(err, base):
    assert isinstance(err, base)
    assert isinstance(err, OptionException)
    assert "‘a’" in str(err)


def test_has_no_value_is_not_parse_error():
    err = OptionHasNoValueError("x")
    assert isinstance(err, OptionException)
    assert not isinstance(err, OptionParseException)
    assert err.message == str(err)