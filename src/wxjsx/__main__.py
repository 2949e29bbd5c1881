"""Command line driver: python -m wxjsx [FILE]"""

import argparse
import sys
from pathlib import Path

from .compiler import Compiler
from .errors import CompileError
from .generator import GeneratorOpts
from .tokenizer import TokenizerOpts
from .treebuilder import TreeBuilderOpts


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="wxjsx",
        description="Compile mini-program markup into component markup",
    )
    parser.add_argument("file", nargs="?", type=Path, help="Markup file to compile (default: stdin)")
    parser.add_argument("--tokens", action="store_true", help="Print the token list before the output")
    parser.add_argument("--tree", action="store_true", help="Print the document tree before the output")
    parser.add_argument("--loose-text", action="store_true", help="Keep punctuation and spaces in text runs")
    parser.add_argument("--lenient", action="store_true", help="Accept closing tags that do not match their element")
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Legacy directive output: ignore wx:if, emit unbalanced wx:for wrappers",
    )
    parser.add_argument(
        "--uniform-case", action="store_true", help="Apply dashed-name casing to self-closing tags as well",
    )
    parser.add_argument("--debug", action="store_true", help="Trace every pipeline stage")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.file is not None:
        source = args.file.read_text(encoding="utf-8")
    else:
        source = sys.stdin.read()

    try:
        compiler = Compiler(
            source,
            debug=args.debug,
            tokenizer_opts=TokenizerOpts(loose_text=args.loose_text),
            tree_builder_opts=TreeBuilderOpts(check_close_tags=not args.lenient),
            generator_opts=GeneratorOpts(legacy_directives=args.legacy, uniform_tag_case=args.uniform_case),
        )
    except CompileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.tokens:
        for token in compiler.tokens:
            print(repr(token))
    if args.tree:
        print(compiler.root.to_test_format())
    print(compiler.code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
