"""
  Lilsp grammar and parser front-end

Parsing is delegated to lark. The resulting tree is adapted into ParseNodes
that follow the parser-combinator tagging convention the reader relies on:

    - chains of single-child rules collapse into one node, tags joined by '|'
    - pattern tokens (numbers, symbols) are tagged 'regex'
    - bracket tokens are tagged 'char'
    - the root node is tagged '>'
"""

from __future__ import annotations

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from lilsp.errors import LilspSyntaxError
from lilsp.reader.parse_tree import ParseNode, ROOT_TAG


GRAMMAR = r"""
    lilsp: expr*

    expr: number | symbol | sexpr | qexpr
    number: decimal | integer
    decimal: DECIMAL
    integer: INTEGER
    symbol: SYMBOL
    sexpr: "(" expr* ")"
    qexpr: "{" expr* "}"

    DECIMAL.3: /-?[0-9]+\.[0-9]+/
    INTEGER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z0-9_+\-*\/\\=<>!&%]+/

    %import common.WS
    %ignore WS
"""

PUNCTUATION = {"LPAR", "RPAR", "LBRACE", "RBRACE"}

_parser = Lark(GRAMMAR, start="lilsp", parser="lalr", keep_all_tokens=True)


def _token_node(token: Token, tags: list[str] | None = None) -> ParseNode:
    leaf = "char" if token.type in PUNCTUATION else "regex"
    return ParseNode("|".join([*(tags or []), leaf]), str(token))


def _to_node(tree: Tree | Token) -> ParseNode:
    if isinstance(tree, Token):
        return _token_node(tree)

    tags = [str(tree.data)]
    while len(tree.children) == 1:
        child = tree.children[0]
        if isinstance(child, Token):
            return _token_node(child, tags)
        tree = child
        tags.append(str(tree.data))
    return ParseNode("|".join(tags), "", tuple(_to_node(c) for c in tree.children))


def parse(source: str) -> ParseNode:
    """Parse `source` into a tree rooted at a '>' node.

    Raises LilspSyntaxError if the text does not match the grammar or is
    nested deeper than the recursion limit allows.
    """
    try:
        tree = _parser.parse(source)
        return ParseNode(ROOT_TAG, "", tuple(_to_node(c) for c in tree.children))
    except UnexpectedInput as exc:
        line = getattr(exc, "line", "?")
        column = getattr(exc, "column", "?")
        raise LilspSyntaxError(f"<stdin>:{line}:{column}: syntax error") from exc
    except RecursionError as exc:
        raise LilspSyntaxError("<stdin>: input is nested too deeply") from exc
