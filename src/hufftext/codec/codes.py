from typing import Dict, List, Tuple

from hufftext.codec.errors import SingleSymbolError
from hufftext.codec.tree import Leaf, Node


CodeTable = Dict[str, str]


def assign_codes(tree: Node) -> CodeTable:
    """
    Build the code table: symbol -> bitstring like '0101'.
    Left edge appends '0', right edge appends '1'.
    """
    if isinstance(tree, Leaf):
        raise SingleSymbolError("a single-leaf tree has no codes")

    codes: CodeTable = {}

    # explicit stack instead of recursion: depth grows with alphabet size
    stack: List[Tuple[Node, str]] = [(tree, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))

    return codes
