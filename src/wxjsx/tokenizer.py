import re

from .errors import EndOfInput, ExpectedToken, UnexpectedEndOfInput, UnexpectedToken
from .tokens import Attribute, CloseTag, Loc, OpenTag, SelfCloseTag, Text

_ATTR_NAME_TERMINATORS = "\t\n\f\r =/<>\"'"
_QUOTES = ('"', "'")

# Letters, digits, "-" and "_"; dashed names feed the component casing rule.
_TAG_NAME_PATTERN = re.compile(r"[\w-]+")
# Letters and digits only; any other character ends a text run.
_TEXT_PATTERN = re.compile(r"[^\W_]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")
# CRLF counts once; a lone CR is a line break of its own.
_LINE_BREAK_PATTERN = re.compile(r"\r\n?|\n")
_ATTR_NAME_TERMINATOR_PATTERN = re.compile(f"[{re.escape(_ATTR_NAME_TERMINATORS)}]")


class TokenizerOpts:
    __slots__ = ("discard_bom", "loose_text")

    def __init__(self, loose_text=False, discard_bom=True):
        self.loose_text = bool(loose_text)
        self.discard_bom = bool(discard_bom)


class Tokenizer:
    """Pull scanner turning markup source into a flat list of tokens.

    ``run`` scans a whole document. ``reset`` + ``next_token`` expose the
    pull interface; ``next_token`` raises ``EndOfInput`` once the source is
    exhausted.
    """

    __slots__ = ("buffer", "column", "debug", "length", "line", "opts", "pos")

    def __init__(self, opts=None, debug=False):
        self.opts = opts or TokenizerOpts()
        self.debug = bool(debug)
        self.buffer = ""
        self.length = 0
        self.pos = 0
        self.line = 1
        self.column = 0

    def reset(self, source):
        if source and source[0] == "\ufeff" and self.opts.discard_bom:
            source = source[1:]
        self.buffer = source or ""
        self.length = len(self.buffer)
        self.pos = 0
        self.line = 1
        self.column = 0

    def run(self, source):
        self.reset(source)
        tokens = []
        while True:
            try:
                tokens.append(self.next_token())
            except EndOfInput:
                break
        return tokens

    def next_token(self):
        while True:
            c = self._peek()
            if c is None:
                raise EndOfInput(self._loc())
            if c.isspace():
                self._skip_whitespace()
                continue
            if c == "<":
                token = self._read_tag()
            else:
                token = self._read_text()
            if self.debug:
                self._debug(f"{token!r} at {token.loc!r}")
            return token

    def _debug(self, message):
        print(f"    Tokenizer: {message}")

    # Cursor helpers --------------------------------------------------------

    def _loc(self):
        return Loc(self.line, self.column, self.pos)

    def _peek(self):
        if self.pos >= self.length:
            return None
        return self.buffer[self.pos]

    def _consume(self, end):
        """Advance the cursor to ``end`` and return the consumed text."""
        chunk = self.buffer[self.pos : end]
        last_break = None
        for last_break in _LINE_BREAK_PATTERN.finditer(chunk):
            self.line += 1
        if last_break is not None:
            self.column = len(chunk) - last_break.end()
        else:
            self.column += end - self.pos
        self.pos = end
        return chunk

    def _skip_whitespace(self):
        match = _WHITESPACE_PATTERN.match(self.buffer, self.pos)
        if match:
            self._consume(match.end())

    def _expect(self, char, context):
        c = self._peek()
        if c is None:
            raise UnexpectedEndOfInput(self._loc(), context)
        if c != char:
            raise ExpectedToken(self._loc(), f"{char!r} in {context}")
        self._consume(self.pos + 1)

    # Scanners --------------------------------------------------------------

    def _read_tag(self):
        start = self._loc()
        self._consume(self.pos + 1)

        if self._peek() == "/":
            self._consume(self.pos + 1)
            name = self._read_tag_name("closing tag name")
            self._expect(">", f"closing tag </{name}>")
            return CloseTag(name, start)

        name = self._read_tag_name("tag name")
        attrs = self._read_attributes(name)
        if self._peek() == "/":
            self._consume(self.pos + 1)
            self._expect(">", f"self-closing tag <{name}/>")
            return SelfCloseTag(name, attrs, start)
        self._expect(">", f"tag <{name}>")
        return OpenTag(name, attrs, start)

    def _read_tag_name(self, context):
        match = _TAG_NAME_PATTERN.match(self.buffer, self.pos)
        if match is None:
            if self._peek() is None:
                raise UnexpectedEndOfInput(self._loc(), context)
            raise ExpectedToken(self._loc(), context)
        return self._consume(match.end())

    def _read_attributes(self, tag_name):
        attrs = []
        while True:
            self._skip_whitespace()
            c = self._peek()
            if c is None:
                raise UnexpectedEndOfInput(self._loc(), f"attributes of <{tag_name}>")
            if c == ">" or self.buffer.startswith("/>", self.pos):
                return attrs
            attrs.append(self._read_attribute(tag_name))

    def _read_attribute(self, tag_name):
        start = self._loc()
        match = _ATTR_NAME_TERMINATOR_PATTERN.search(self.buffer, self.pos)
        end = match.start() if match else self.length
        if end == self.pos:
            raise ExpectedToken(start, f"attribute name in <{tag_name}>")
        name = self._consume(end)

        self._expect("=", f"attribute {name}")
        quote = self._peek()
        if quote is None:
            raise UnexpectedEndOfInput(self._loc(), f"attribute {name}")
        if quote not in _QUOTES:
            raise ExpectedToken(self._loc(), f"quoted value for attribute {name}")
        self._consume(self.pos + 1)

        end = self.buffer.find(quote, self.pos)
        if end == -1:
            raise UnexpectedEndOfInput(self._loc(), f"value of attribute {name}")
        value = self._consume(end)
        self._consume(end + 1)
        return Attribute(name, value, start, quote)

    def _read_text(self):
        start = self._loc()
        if self.opts.loose_text:
            end = self.buffer.find("<", self.pos)
            if end == -1:
                end = self.length
            return Text(self._consume(end).rstrip(), start)

        match = _TEXT_PATTERN.match(self.buffer, self.pos)
        if match is None:
            raise UnexpectedToken(start, f"character {self._peek()!r} in text")
        return Text(self._consume(match.end()), start)
