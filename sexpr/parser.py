"""Tokenizer, atom classifier and structural parser for S-expressions."""

import logging
import re
from typing import Optional, Sequence

from .types import Atom, Float, Int, List, Node, Symbol

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 512

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:e[+-]?[0-9]+)?"
    r"|\.[0-9]+(?:e[+-]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)
# Unicode White_Space; str.split() would also split on U+001C..U+001F
_WS_RE = re.compile(
    r"[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


class SexprSyntaxError(SyntaxError):
    """Base class for structural parse failures.

    Catch this rather than the individual subclasses; new kinds may be added.
    """


class EmptyError(SexprSyntaxError):
    def __init__(self):
        super().__init__("Empty S-expression provided")


class UnmatchedParenError(SexprSyntaxError):
    def __init__(self):
        super().__init__("Unmatched parentheses found")


class NestingTooDeepError(SexprSyntaxError):
    def __init__(self, limit: int):
        super().__init__("max nesting depth exceeded")
        self.limit = limit


def tokenize(src: str) -> list[str]:
    padded = src.replace("(", " ( ").replace(")", " ) ")
    return [tok for tok in _WS_RE.split(padded) if tok]


def classify_atom(tok: str) -> Atom:
    """Classify a non-paren token: integer first, then float, else symbol."""
    if _INT_RE.fullmatch(tok):
        value = int(tok)
        if INT_MIN <= value <= INT_MAX:
            return Int(value)
    if _FLOAT_RE.fullmatch(tok):
        return Float(float(tok))
    return Symbol(tok)


def parse_tokens(tokens: Sequence[str], max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> Node:
    """Build a tree from a token sequence.

    The sequence must hold exactly one form: a lone atom token, or a
    balanced parenthesized list. Lists are built with an explicit stack,
    so input depth is bounded by max_depth (None for no limit) rather
    than by the interpreter's recursion limit.
    """
    if not tokens:
        raise EmptyError()
    first = tokens[0]
    if first != "(":
        if len(tokens) == 1 and first != ")":
            return classify_atom(first)
        raise UnmatchedParenError()
    if tokens[-1] != ")":
        raise UnmatchedParenError()

    last = len(tokens) - 1
    stack: list[list[Node]] = []
    for pos, tok in enumerate(tokens):
        if tok == "(":
            if max_depth is not None and len(stack) >= max_depth:
                raise NestingTooDeepError(max_depth)
            stack.append([])
        elif tok == ")":
            done = List(tuple(stack.pop()))
            if not stack:
                # The outermost list closed; nothing may follow it.
                if pos != last:
                    raise UnmatchedParenError()
                return done
            stack[-1].append(done)
        else:
            stack[-1].append(classify_atom(tok))
    raise UnmatchedParenError()


def parse(src: str, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> Node:
    """Parse an S-expression string into a tree.

    Raises:
        EmptyError: src holds no tokens
        UnmatchedParenError: unbalanced parens or stray tokens around a form
        NestingTooDeepError: lists nest deeper than max_depth
    """
    tokens = tokenize(src)
    logger.debug("tokenized %d chars into %d tokens", len(src), len(tokens))
    try:
        return parse_tokens(tokens, max_depth)
    except SexprSyntaxError as e:
        logger.debug("parse failed: %s", e)
        raise
