"""Component markup generation from a document tree."""

import re

from .tokens import OpenTag, SelfCloseTag, Text

# Event suffixes renamed after the "bind" prefix is dropped.
EVENT_RENAMES = {
    "tap": "click",
    "click": "keydown",
}

KEY_ATTRIBUTE = "wx:key"
DIRECTIVE_ATTRIBUTES = {
    "wx:if": "if",
    "wx:for": "for",
}
LOOP_ITEM = "item"

# Plain references (list, item.children, $data) need no grouping parentheses.
_REFERENCE_PATTERN = re.compile(r"[\w$.]+")


def first_upper(name):
    return name[:1].upper() + name[1:]


def component_name(name):
    """Convert a dashed tag name into a component name: list-items -> ListItems."""
    return "".join(first_upper(segment) for segment in name.split("-"))


def event_name(name):
    """Map ``bind*`` attributes onto ``on*`` handler names.

    Every ``bind`` occurrence is removed, the rest goes through
    ``EVENT_RENAMES`` and gets an ``on`` prefix: bindtap -> onclick,
    bindclick -> onkeydown, bindinput -> oninput. Other names are returned
    unchanged.
    """
    if not name.startswith("bind"):
        return name
    event = name.replace("bind", "")
    return "on" + EVENT_RENAMES.get(event, event)


def unwrap_expression(value):
    """Strip every ``{{`` and ``}}`` delimiter, leaving the bare expression text."""
    return value.replace("{{", "").replace("}}", "")


def group_expression(expression):
    """Parenthesize ``expression`` unless it is a plain reference.

    Keeps operators inside a directive expression from binding to the
    surrounding ``&&`` or ``.map``: a || b -> (a || b), item.list -> item.list.
    """
    if _REFERENCE_PATTERN.fullmatch(expression.strip()):
        return expression
    return f"({expression})"


class GeneratorOpts:
    __slots__ = ("legacy_directives", "uniform_tag_case")

    def __init__(self, legacy_directives=False, uniform_tag_case=False):
        # legacy_directives: the first directive on a node decides, wx:if is
        # dropped and loops are emitted unbalanced, "{list.map((item)=><X/>}",
        # as the dialect's reference output does (without its trailing ";").
        self.legacy_directives = bool(legacy_directives)
        # uniform_tag_case: self-closing tags get the dashed-name conversion too.
        self.uniform_tag_case = bool(uniform_tag_case)


class Generator:
    __slots__ = ("debug", "opts")

    def __init__(self, opts=None, debug=False):
        self.opts = opts or GeneratorOpts()
        self.debug = bool(debug)

    def generate(self, root):
        return self._generate_node(root, 0)

    def _debug(self, message, depth):
        print(f"    Generator: {'  ' * depth}{message}")

    def _generate_node(self, node, depth):
        token = node.token

        if isinstance(token, OpenTag):
            tag = component_name(token.name)
            attrs, directives = self._generate_attrs(token.attrs)
            children = "".join(self._generate_node(child, depth + 1) for child in node.children)
            code = f"<{tag}{attrs}>{children}</{tag}>"
        elif isinstance(token, SelfCloseTag):
            tag = component_name(token.name) if self.opts.uniform_tag_case else first_upper(token.name)
            attrs, directives = self._generate_attrs(token.attrs)
            code = f"<{tag}{attrs}/>"
        elif isinstance(token, Text):
            return token.data
        else:
            return ""

        if directives:
            code = self._wrap_directives(directives, code)
        if self.debug:
            self._debug(code, depth)
        return code

    def _generate_attrs(self, attrs):
        parts = []
        directives = []
        for attr in attrs:
            name = event_name(attr.name)
            expression = unwrap_expression(attr.value)
            if name == KEY_ATTRIBUTE:
                parts.append(f' key="{expression}"')
            elif name in DIRECTIVE_ATTRIBUTES:
                directives.append((DIRECTIVE_ATTRIBUTES[name], expression))
            else:
                parts.append(f' {name}="{expression}"')
        return "".join(parts), directives

    def _wrap_directives(self, directives, code):
        if self.opts.legacy_directives:
            kind, expression = directives[0]
            if kind == "for":
                return f"{{{expression}.map(({LOOP_ITEM})=>{code}}}"
            return code

        condition = None
        collection = None
        for kind, expression in directives:
            if kind == "if" and condition is None:
                condition = expression
            elif kind == "for" and collection is None:
                collection = expression

        # The condition sits inside the loop so it is evaluated per item.
        if condition is not None:
            code = f"{group_expression(condition)} && {code}"
        if collection is not None:
            code = f"{group_expression(collection)}.map(({LOOP_ITEM})=>{code})"
        return f"{{{code}}}"
