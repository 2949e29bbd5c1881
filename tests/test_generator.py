"""Tests for component markup generation."""

import unittest

from wxjsx import Generator, GeneratorOpts, Tokenizer, TreeBuilder
from wxjsx.generator import component_name, event_name, first_upper, group_expression, unwrap_expression
from wxjsx.tokens import Attribute, CloseTag, OpenTag, SelfCloseTag, Text
from wxjsx.treebuilder import Node


def generate(source, **opts):
    root = TreeBuilder().build(Tokenizer().run(source))
    return Generator(GeneratorOpts(**opts)).generate(root)


class TestNames(unittest.TestCase):
    def test_component_name(self):
        """Dashed names become one capitalized component name."""
        assert component_name("list-items") == "ListItems"
        assert component_name("text") == "Text"
        assert component_name("scroll-view-item") == "ScrollViewItem"

    def test_first_upper(self):
        """first_upper capitalizes only the first character."""
        assert first_upper("text") == "Text"
        assert first_upper("list-item") == "List-item"
        assert first_upper("") == ""

    def test_event_name(self):
        """bind attributes become on handlers through the rename table."""
        assert event_name("bindtap") == "onclick"
        assert event_name("bindclick") == "onkeydown"
        assert event_name("bindinput") == "oninput"
        assert event_name("class") == "class"
        assert event_name("wx:key") == "wx:key"

    def test_unwrap_expression(self):
        """Every {{ and }} delimiter is removed."""
        assert unwrap_expression("{{aaa}}") == "aaa"
        assert unwrap_expression("a{{b}}c{{d}}") == "abcd"
        assert unwrap_expression("plain") == "plain"


class TestElements(unittest.TestCase):
    def test_self_closing(self):
        """Self-closing tags stay self-closing."""
        assert generate("<text/>") == "<Text/>"

    def test_nested(self):
        """Children are emitted inside the parent in order."""
        assert generate("<view><text/>123</view>") == "<View><Text/>123</View>"

    def test_attributes(self):
        """Plain attributes pass through unchanged."""
        assert generate('<view class="abc"><text/></view>') == '<View class="abc"><Text/></View>'

    def test_dashed_open_tag(self):
        """Dashed open tags get the component name."""
        assert generate("<list-items>a</list-items>") == "<ListItems>a</ListItems>"

    def test_dashed_self_closing_keeps_dashes(self):
        """Self-closing tags only get their first letter capitalized."""
        assert generate("<list-item/>") == "<List-item/>"

    def test_dashed_self_closing_uniform_case(self):
        """uniform_tag_case converts self-closing names like open tags."""
        assert generate("<list-item/>", uniform_tag_case=True) == "<ListItem/>"

    def test_event_and_key_attributes(self):
        """bind, wx:key and expression attributes are rewritten in order."""
        source = '<view bindtap="{{onTap}}" wx:key="id" data-x="{{x}}"/>'
        assert generate(source) == '<View onclick="onTap" key="id" data-x="x"/>'

    def test_text_is_verbatim(self):
        """Text runs are concatenated verbatim."""
        assert generate("<view>a b</view>") == "<View>ab</View>"

    def test_stray_close_tag_generates_nothing(self):
        """A leaf closing tag produces no output."""
        assert Generator().generate(Node(CloseTag("view"))) == ""

    def test_hand_built_tree(self):
        """Trees built without the tokenizer generate the same way."""
        root = Node(OpenTag("view", [Attribute("id", "{{x}}")]))
        root.append_child(Node(SelfCloseTag("icon")))
        root.append_child(Node(Text("hi")))
        assert Generator().generate(root) == '<View id="x"><Icon/>hi</View>'

    def test_generation_is_repeatable(self):
        """Generating the same tree twice gives the same text."""
        root = TreeBuilder().build(Tokenizer().run('<view class="a"><text/></view>'))
        generator = Generator()
        assert generator.generate(root) == generator.generate(root)


class TestDirectives(unittest.TestCase):
    def test_for(self):
        """wx:for wraps the element in a balanced map call."""
        source = '<block wx:for="{{list}}" wx:key="id"><text/></block>'
        assert generate(source) == '{list.map((item)=><Block key="id"><Text/></Block>)}'

    def test_if(self):
        """wx:if guards the element with a logical and."""
        assert generate('<text wx:if="{{aaa}}"/>') == "{aaa && <Text/>}"

    def test_if_inside_for(self):
        """A condition on a looped element is checked per item."""
        source = '<text wx:if="{{aaa}}" wx:for="{{bbb}}"></text>'
        assert generate(source) == "{bbb.map((item)=>aaa && <Text></Text>)}"

    def test_directive_order_does_not_matter(self):
        """wx:if and wx:for give the same output in either order."""
        first = generate('<text wx:for="{{bbb}}" wx:if="{{aaa}}"></text>')
        second = generate('<text wx:if="{{aaa}}" wx:for="{{bbb}}"></text>')
        assert first == second

    def test_nested_directive(self):
        """Directives on a child wrap only that child."""
        source = '<view><text wx:for="{{list}}">abc</text></view>'
        assert generate(source) == "<View>{list.map((item)=><Text>abc</Text>)}</View>"

    def test_other_wx_attributes_pass_through(self):
        """Unknown wx: attributes are emitted as plain attributes."""
        assert generate('<text wx:else="{{aaa}}"/>') == '<Text wx:else="aaa"/>'

    def test_legacy_for(self):
        """Legacy mode keeps the unbalanced loop wrapper."""
        source = '<block wx:for="{{list}}" wx:key="id"><text/></block>'
        assert generate(source, legacy_directives=True) == '{list.map((item)=><Block key="id"><Text/></Block>}'

    def test_legacy_if_is_dropped(self):
        """Legacy mode discards wx:if."""
        assert generate('<text wx:if="{{aaa}}"/>', legacy_directives=True) == "<Text/>"

    def test_legacy_first_directive_decides(self):
        """Legacy mode only looks at the first directive."""
        source = '<text wx:if="{{aaa}}" wx:for="{{bbb}}"></text>'
        assert generate(source, legacy_directives=True) == "<Text></Text>"

    def test_compound_condition_is_grouped(self):
        """Operators in a wx:if expression stay inside the condition."""
        assert generate('<text wx:if="{{a || b}}"/>') == "{(a || b) && <Text/>}"

    def test_ternary_collection_is_grouped(self):
        """A conditional wx:for expression is mapped as a whole."""
        source = '<text wx:for="{{flag ? xs : ys}}"/>'
        assert generate(source) == "{(flag ? xs : ys).map((item)=><Text/>)}"

    def test_grouped_condition_inside_loop(self):
        """Grouping applies to both directives on one element."""
        source = '<text wx:for="{{a.concat(b)}}" wx:if="{{!item.hidden}}"/>'
        assert generate(source) == "{(a.concat(b)).map((item)=>(!item.hidden) && <Text/>)}"

    def test_legacy_expressions_are_not_grouped(self):
        """Legacy mode emits the loop expression verbatim."""
        source = '<text wx:for="{{flag ? xs : ys}}"/>'
        assert generate(source, legacy_directives=True) == "{flag ? xs : ys.map((item)=><Text/>}"


class TestGroupExpression(unittest.TestCase):
    def test_plain_references_are_unchanged(self):
        """Names and member paths need no parentheses."""
        assert group_expression("list") == "list"
        assert group_expression("item.children") == "item.children"
        assert group_expression("$data") == "$data"

    def test_compound_expressions_are_parenthesized(self):
        """Anything with operators, calls or spaces is parenthesized."""
        assert group_expression("a || b") == "(a || b)"
        assert group_expression("xs[0]") == "(xs[0])"
        assert group_expression("f(x)") == "(f(x))"
