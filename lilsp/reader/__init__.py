from lilsp.reader.grammar import parse
from lilsp.reader.parse_tree import ParseNode, ROOT_TAG
from lilsp.reader.reader import read

__all__ = ["parse", "read", "ParseNode", "ROOT_TAG"]
