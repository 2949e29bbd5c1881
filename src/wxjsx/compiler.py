"""Compiler entry point: markup source in, component markup out."""

from .errors import MalformedInput
from .generator import Generator
from .tokenizer import Tokenizer
from .treebuilder import TreeBuilder


class Compiler:
    __slots__ = ("code", "debug", "generator", "root", "tokenizer", "tokens", "tree_builder")

    def __init__(
        self,
        source,
        *,
        debug=False,
        tokenizer_opts=None,
        tree_builder_opts=None,
        generator_opts=None,
    ):
        self.debug = bool(debug)
        self.tokenizer = Tokenizer(tokenizer_opts, debug=self.debug)
        self.tree_builder = TreeBuilder(tree_builder_opts, debug=self.debug)
        self.generator = Generator(generator_opts, debug=self.debug)

        self.tokens = self.tokenizer.run(source or "")
        # Both the tree builder and the generator recurse once per nesting level.
        try:
            self.root = self.tree_builder.build(self.tokens)
            self.code = self.generator.generate(self.root)
        except RecursionError as exc:
            raise MalformedInput(message="document nested too deeply", code="nesting-too-deep") from exc


def compile(source, **kwargs):  # noqa: A001
    """Compile ``source`` and return the generated markup.

    Raises a ``CompileError`` subclass on malformed input; nothing is
    returned for a document that fails.
    """
    return Compiler(source, **kwargs).code
