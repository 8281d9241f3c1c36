"""Debug rendering of parsed trees. Output is for inspection, not re-parsing."""

import math
from decimal import Decimal

from .types import Float, Int, List, Node, Symbol


def _float_text(x: float) -> str:
    # Positional notation, shortest round-trip digits, no trailing ".0"
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    s = format(Decimal(repr(x)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _atom_text(node: Node) -> str:
    match node:
        case Int(value):
            return str(value)
        case Float(value):
            return "f" + _float_text(value)
        case Symbol(name):
            return f'"{name}"'
    raise TypeError(f"not an S-expression node: {node!r}")


def render(node: Node) -> str:
    """Render a tree: lists in parens, ints bare, floats as f<digits>, symbols quoted."""
    out: list[str] = []
    # Work items are nodes, or the literal text to emit between them.
    work: list = [node]
    while work:
        item = work.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, List):
            work.append(")")
            for i in range(len(item.items) - 1, -1, -1):
                work.append(item.items[i])
                if i:
                    work.append(" ")
            work.append("(")
        else:
            out.append(_atom_text(item))
    return "".join(out)


def dump(node: Node, indent: int = 4) -> str:
    """Structural dump of a tree, one node per line.

    Atoms print as their dataclass repr; a non-empty List opens with
    "List(", lists its children one level deeper and closes with ")".
    """
    lines: list[str] = []
    work: list[tuple[int, object]] = [(0, node)]
    while work:
        level, item = work.pop()
        pad = " " * (indent * level)
        if isinstance(item, str):
            lines.append(pad + item)
        elif isinstance(item, List) and item.items:
            lines.append(pad + "List(")
            work.append((level, ")" if level == 0 else "),"))
            for child in reversed(item.items):
                work.append((level + 1, child))
        else:
            text = "List()" if isinstance(item, List) else repr(item)
            lines.append(pad + (text if level == 0 else text + ","))
    return "\n".join(lines)
