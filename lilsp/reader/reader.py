"""Reader: converts a parse tree into a Lilsp value AST.

Leaves become numbers or symbols; the root and every `sexpr` node become an
S-Expression, `qexpr` nodes a Q-Expression. Bracket tokens and raw `regex`
matches are structural and are skipped rather than read.
"""

from __future__ import annotations

import math
import re

from lilsp.errors import ErrorKind
from lilsp.reader.parse_tree import ParseNode, ROOT_TAG
from lilsp.types.value import Decimal, Error, Integer, QExpr, SExpr, Symbol, Value

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

BRACKETS = {"(", ")", "{", "}"}

# Same literal forms the grammar accepts
INTEGER_RE = re.compile(r"-?[0-9]+")
DECIMAL_RE = re.compile(r"-?[0-9]+\.[0-9]+")


def _invalid_number(text: str) -> Error:
    return Error(ErrorKind.INVALID_NUMBER, f"Invalid number '{text}'")


def read_number(node: ParseNode) -> Value:
    text = node.contents
    if "integer" in node.tag:
        if not INTEGER_RE.fullmatch(text):
            return _invalid_number(text)
        x = int(text, 10)
        return Integer(x) if INT_MIN <= x <= INT_MAX else _invalid_number(text)
    if "decimal" in node.tag:
        if not DECIMAL_RE.fullmatch(text):
            return _invalid_number(text)
        x = float(text)
        return Decimal(x) if math.isfinite(x) else _invalid_number(text)
    return _invalid_number(text)


def _read_children(node: ParseNode, into: SExpr | QExpr) -> SExpr | QExpr:
    for child in node.children:
        if child.contents in BRACKETS or child.tag == "regex":
            continue
        into.add(read(child))
    return into


def read(node: ParseNode) -> Value:
    """Build a Value from `node` without modifying it."""
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        return _read_children(node, SExpr())
    if "qexpr" in node.tag:
        return _read_children(node, QExpr())
    return Error(ErrorKind.MALFORMED_PARSE_TREE, f"Malformed parse tree node '{node.tag}'")
