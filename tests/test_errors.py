"""Tests for the CompileError hierarchy."""

import unittest

from wxjsx import (
    CompileError,
    EndOfInput,
    ExpectedToken,
    MalformedInput,
    MismatchedTag,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from wxjsx.tokens import Loc


class TestHierarchy(unittest.TestCase):
    def test_structural_errors_are_malformed_input(self):
        """Every structural failure is a MalformedInput."""
        for error_class in (UnexpectedEndOfInput, ExpectedToken, UnexpectedToken, MismatchedTag):
            assert issubclass(error_class, MalformedInput)
            assert issubclass(error_class, CompileError)

    def test_end_of_input_is_separate(self):
        """A clean end of input is not a structural failure."""
        assert issubclass(EndOfInput, CompileError)
        assert not issubclass(EndOfInput, MalformedInput)
        assert not issubclass(UnexpectedEndOfInput, EndOfInput)


class TestFormatting(unittest.TestCase):
    def test_str_with_location(self):
        """Errors with a location format as (line,column): code - message."""
        error = ExpectedToken(Loc(2, 5, 12), "'>' in tag <view>")
        assert str(error) == "(2,5): expected-token - expected '>' in tag <view>"

    def test_str_without_location(self):
        """Errors without a location drop the position prefix."""
        error = UnexpectedEndOfInput(None, "document")
        assert str(error) == "unexpected-end-of-input - unexpected end of input while parsing document"

    def test_code_only(self):
        """The message defaults to the code and is then not repeated."""
        assert str(EndOfInput(Loc(1, 0, 0))) == "(1,0): end-of-input"
        assert str(CompileError()) == "compile-error"

    def test_repr(self):
        """repr shows the class, code and position."""
        error = UnexpectedToken(Loc(3, 1, 20), "character '!' in text")
        assert repr(error) == "UnexpectedToken('unexpected-token', line=3, column=1)"

    def test_line_and_column(self):
        """line and column come from the location."""
        error = MismatchedTag(Loc(4, 2, 30), "view", "text")
        assert error.line == 4
        assert error.column == 2
        assert error.message == "unexpected closing tag </text> for <view>"

    def test_line_without_location(self):
        """line and column are None when there is no location."""
        error = MalformedInput(message="broken")
        assert error.line is None
        assert error.column is None
        assert str(error) == "malformed-input - broken"
