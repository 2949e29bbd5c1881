"""Error types raised by the wxjsx pipeline."""


class CompileError(Exception):
    """Base class for every failure raised while compiling a document.

    Carries a short machine-readable ``code``, the source location (``loc``,
    may be None) and a human readable ``message``.
    """

    code = "compile-error"

    def __init__(self, loc=None, message=None, code=None):
        if code is not None:
            self.code = code
        self.loc = loc
        self.message = message or self.code
        super().__init__(str(self))

    @property
    def line(self):
        return self.loc.line if self.loc is not None else None

    @property
    def column(self):
        return self.loc.column if self.loc is not None else None

    def __str__(self):
        if self.loc is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __repr__(self):
        if self.loc is not None:
            return f"{self.__class__.__name__}({self.code!r}, line={self.line}, column={self.column})"
        return f"{self.__class__.__name__}({self.code!r})"


class EndOfInput(CompileError):
    """Clean end of the source; the tokenizer uses it to stop scanning."""

    code = "end-of-input"


class MalformedInput(CompileError):
    code = "malformed-input"


class UnexpectedEndOfInput(MalformedInput):
    """The source ended in the middle of a construct."""

    code = "unexpected-end-of-input"

    def __init__(self, loc, context):
        self.context = context
        super().__init__(loc, f"unexpected end of input while parsing {context}")


class ExpectedToken(MalformedInput):
    code = "expected-token"

    def __init__(self, loc, description):
        self.description = description
        super().__init__(loc, f"expected {description}")


class UnexpectedToken(MalformedInput):
    code = "unexpected-token"

    def __init__(self, loc, description):
        self.description = description
        super().__init__(loc, f"unexpected {description}")


class MismatchedTag(UnexpectedToken):
    code = "mismatched-tag"

    def __init__(self, loc, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(loc, f"closing tag </{found}> for <{expected}>")
