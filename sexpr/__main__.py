"""CLI: python -m sexpr < program.sexp"""

import argparse
import logging
import sys

from .parser import DEFAULT_MAX_DEPTH, SexprSyntaxError, parse
from .printer import dump, render


def _depth(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog="sexpr",
        description="Parse an S-expression from stdin and print its tree.",
    )
    ap.add_argument(
        "--max-depth",
        type=_depth,
        default=DEFAULT_MAX_DEPTH,
        help=f"maximum list nesting depth, 0 for unlimited (default {DEFAULT_MAX_DEPTH})",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    src = sys.stdin.read()
    try:
        ast = parse(src, max_depth=args.max_depth or None)
    except SexprSyntaxError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"AST: {dump(ast)}")
    print(f"AST prettyprinted: {render(ast)}")


if __name__ == "__main__":
    main()
