"""
File: HuffmanTree.py
Author: Hannes Stalder
Description: Node types of the Huffman tree. A node is either a Leaf holding a
             symbol or an Internal node joining two subtrees.
"""


# the base class only provides the ordering heapq needs
class Node:
    __slots__ = ("count",)

    is_leaf = False

    def __init__(self, count: int):
        self.count = count

    def __lt__(self, other):
        return self.count < other.count


class Leaf(Node):
    __slots__ = ("symbol",)

    is_leaf = True

    def __init__(self, symbol, count: int):
        super().__init__(count)
        self.symbol = symbol

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.count})"


class Internal(Node):
    __slots__ = ("left", "right")

    def __init__(self, left: Node, right: Node):
        # count of a junction is always the sum of both branches
        super().__init__(left.count + right.count)
        self.left = left    # bit '0'
        self.right = right  # bit '1'

    def __repr__(self):
        # children by count only, the tree can be deeper than the recursion limit
        return f"Internal({self.count}, left={self.left.count}, right={self.right.count})"


def follow_code(root: Node, code: str):
    """Walk from the root along a code of '0'/'1' characters and return the symbol of the leaf reached.

    A single leaf root is reached by the code "0".
    """
    if root.is_leaf:
        if code != "0":
            raise ValueError(f"Code {code!r} does not lead to a leaf")
        return root.symbol

    node = root
    for bit in code:
        if node.is_leaf:
            raise ValueError(f"Code {code!r} runs past a leaf")
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise ValueError(f"Invalid bit {bit!r} in code {code!r}")

    if not node.is_leaf:
        raise ValueError(f"Code {code!r} ends at a junction node")
    return node.symbol
