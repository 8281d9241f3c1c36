from .parser import (
    EmptyError,
    NestingTooDeepError,
    SexprSyntaxError,
    UnmatchedParenError,
    parse,
    tokenize,
)
from .printer import dump, render
from .types import Atom, Float, Int, List, Node, Symbol

__all__ = [
    "parse", "tokenize", "render", "dump",
    "Node", "Atom", "List", "Int", "Float", "Symbol",
    "SexprSyntaxError", "EmptyError", "UnmatchedParenError", "NestingTooDeepError",
]
