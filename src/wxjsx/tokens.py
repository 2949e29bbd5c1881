class Loc:
    __slots__ = ("column", "line", "pos")

    def __init__(self, line=1, column=0, pos=0):
        self.line = line
        self.column = column
        self.pos = pos

    def __repr__(self):
        return f"Loc(line:{self.line},column:{self.column},pos:{self.pos})"

    def __eq__(self, other):
        if not isinstance(other, Loc):
            return NotImplemented
        return self.line == other.line and self.column == other.column and self.pos == other.pos

    __hash__ = None


def _format_attrs(attrs):
    if not attrs:
        return ""
    return " " + " ".join(f"{attr.name}={attr.value!r}" for attr in attrs)


class Attribute:
    __slots__ = ("loc", "name", "quote", "value")

    def __init__(self, name, value, loc=None, quote='"'):
        self.name = name
        self.value = value
        self.loc = loc
        self.quote = quote

    def __repr__(self):
        return f"<attr:{self.name}={self.value!r}>"


class OpenTag:
    __slots__ = ("attrs", "loc", "name")

    def __init__(self, name, attrs=None, loc=None):
        self.name = name
        self.attrs = attrs if attrs is not None else []
        self.loc = loc

    def __repr__(self):
        return f"<start:{self.name}{_format_attrs(self.attrs)}>"


class SelfCloseTag:
    __slots__ = ("attrs", "loc", "name")

    def __init__(self, name, attrs=None, loc=None):
        self.name = name
        self.attrs = attrs if attrs is not None else []
        self.loc = loc

    def __repr__(self):
        return f"<start:{self.name} /{_format_attrs(self.attrs)}>"


class CloseTag:
    __slots__ = ("loc", "name")

    def __init__(self, name, loc=None):
        self.name = name
        self.loc = loc

    def __repr__(self):
        return f"<end:{self.name}>"


class Text:
    __slots__ = ("data", "loc")

    def __init__(self, data, loc=None):
        self.data = data
        self.loc = loc

    def __repr__(self):
        return f"<text:{self.data!r}>"


class EndToken:
    __slots__ = ("loc",)

    def __init__(self, loc=None):
        self.loc = loc

    def __repr__(self):
        return "<end-of-stream>"


END = EndToken()
