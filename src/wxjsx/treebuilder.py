from .errors import MismatchedTag, UnexpectedEndOfInput, UnexpectedToken
from .tokens import END, CloseTag, EndToken, OpenTag, SelfCloseTag, Text


class TreeBuilderOpts:
    __slots__ = ("check_close_tags",)

    def __init__(self, check_close_tags=True):
        # False accepts any closing tag as the terminator of the open element
        # and ignores tokens after the root.
        self.check_close_tags = bool(check_close_tags)


class Node:
    """One token of the document tree.

    - token: the OpenTag / SelfCloseTag / Text (or stray CloseTag) it wraps
    - children: list of child Nodes for OpenTag, None for every other token
    """

    __slots__ = ("children", "token")

    def __init__(self, token, children=None):
        self.token = token
        if isinstance(token, OpenTag):
            self.children = children if children is not None else []
        else:
            self.children = None

    @property
    def name(self):
        if isinstance(self.token, Text):
            return "#text"
        return self.token.name

    def append_child(self, node):
        self.children.append(node)

    def to_test_format(self, indent=0):
        token = self.token
        if isinstance(token, Text):
            return f'| {" " * indent}"{token.data}"'
        if isinstance(token, CloseTag):
            return f"| {' ' * indent}</{token.name}>"

        closing = "/" if isinstance(token, SelfCloseTag) else ""
        sections = [f"| {' ' * indent}<{token.name}{closing}>"]
        padding = " " * (indent + 2)
        for attr in token.attrs:
            sections.append(f'| {padding}{attr.name}="{attr.value}"')
        for child in self.children or []:
            sections.append(child.to_test_format(indent + 2))
        return "\n".join(sections)

    def __repr__(self):
        if self.children is None:
            return f"Node({self.token!r})"
        return f"Node({self.token!r}, children={len(self.children)})"


class TokenStream:
    """Forward-only cursor over a token list with one token of lookahead."""

    __slots__ = ("pos", "tokens")

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return END

    def read(self):
        token = self.peek()
        if token is not END:
            self.pos += 1
        return token

    def last_loc(self):
        if self.pos:
            return self.tokens[self.pos - 1].loc
        return None


class TreeBuilder:
    __slots__ = ("debug", "opts", "stream")

    def __init__(self, opts=None, debug=False):
        self.opts = opts or TreeBuilderOpts()
        self.debug = bool(debug)
        self.stream = None

    def build(self, tokens):
        self.stream = TokenStream(tokens)
        root = self._read_node(0)
        if self.opts.check_close_tags:
            trailing = self.stream.peek()
            if trailing is not END:
                raise UnexpectedToken(trailing.loc, f"{trailing!r} after end of document")
        return root

    def _debug(self, message, depth):
        print(f"    TreeBuilder: {'  ' * depth}{message}")

    def _read_node(self, depth):
        token = self.stream.read()

        if isinstance(token, OpenTag):
            if self.debug:
                self._debug(f"open <{token.name}>", depth)
            node = Node(token)
            while True:
                following = self.stream.peek()
                if isinstance(following, EndToken):
                    raise UnexpectedEndOfInput(self.stream.last_loc(), f"children of <{token.name}>")
                if isinstance(following, CloseTag):
                    self.stream.read()
                    if self.opts.check_close_tags and following.name != token.name:
                        raise MismatchedTag(following.loc, token.name, following.name)
                    if self.debug:
                        self._debug(f"close <{token.name}> with {len(node.children)} children", depth)
                    return node
                node.append_child(self._read_node(depth + 1))

        if isinstance(token, (CloseTag, SelfCloseTag, Text)):
            if self.debug:
                self._debug(f"leaf {token!r}", depth)
            return Node(token)

        if isinstance(token, EndToken):
            raise UnexpectedEndOfInput(self.stream.last_loc(), "document")
        raise UnexpectedToken(getattr(token, "loc", None), f"{token!r} in token stream")
