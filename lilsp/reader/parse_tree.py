from __future__ import annotations

from dataclasses import dataclass, field

# Tag given to the root of every parse tree
ROOT_TAG = ">"


@dataclass(frozen=True)
class ParseNode:
    """A read-only parse tree node.

    `tag` names the grammar rule(s) that produced the node, joined with `|`
    when single-child rules were collapsed (e.g. ``expr|number|integer|regex``).
    `contents` holds the token text of leaves and is empty for interior nodes.
    """

    tag: str
    contents: str = ""
    children: tuple[ParseNode, ...] = field(default_factory=tuple)
