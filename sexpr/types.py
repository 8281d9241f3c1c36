from dataclasses import dataclass
from typing import Union

# Tree node types. A parsed tree is either a List of nodes or a single Atom;
# an Atom is exactly one of Int, Float or Symbol. All frozen: trees are
# built once by the parser and never mutated.

@dataclass(frozen=True)
class Int:
    value: int

@dataclass(frozen=True)
class Float:
    value: float

@dataclass(frozen=True)
class Symbol:
    name: str

@dataclass(frozen=True)
class List:
    items: tuple["Node", ...] = ()

Atom = Union[Int, Float, Symbol]
Node = Union[List, Atom]
