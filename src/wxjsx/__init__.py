from .compiler import Compiler, compile  # noqa: A004
from .errors import (
    CompileError,
    EndOfInput,
    ExpectedToken,
    MalformedInput,
    MismatchedTag,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .generator import Generator, GeneratorOpts
from .tokenizer import Tokenizer, TokenizerOpts
from .treebuilder import Node, TreeBuilder, TreeBuilderOpts

__all__ = [
    "CompileError",
    "Compiler",
    "EndOfInput",
    "ExpectedToken",
    "Generator",
    "GeneratorOpts",
    "MalformedInput",
    "MismatchedTag",
    "Node",
    "Tokenizer",
    "TokenizerOpts",
    "TreeBuilder",
    "TreeBuilderOpts",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "compile",
]
