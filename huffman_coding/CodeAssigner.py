"""
File: CodeAssigner.py
Author: Hannes Stalder
Description: Derives the binary code of every symbol by walking the Huffman tree.
"""

from typing import Iterator, NamedTuple

from huffman_coding.HuffmanTree import Node


class CodeEntry(NamedTuple):
    symbol: object
    frequency: int
    code: str


class CodeAssigner:
    def assign(self, root: Node) -> Iterator[CodeEntry]:
        """
        Yields (symbol, frequency, code) for every leaf, depth first, left branch before right.
        Every call starts a new walk, so the result can be iterated again.
        """
        # a lone leaf still needs one bit
        if root.is_leaf:
            yield CodeEntry(root.symbol, root.count, "0")
            return

        # walk with an explicit stack, a skewed tree can be deeper than the recursion limit
        stack = [(root, "")]
        while stack:
            node, current_code = stack.pop()

            # if there is a symbol then we reached the end of a branch
            if node.is_leaf:
                yield CodeEntry(node.symbol, node.count, current_code)
                continue

            # if not then we are at a junction node, the left branch is popped first
            stack.append((node.right, current_code + "1"))
            stack.append((node.left, current_code + "0"))

    def code_table(self, root: Node) -> dict:
        return {entry.symbol: entry.code for entry in self.assign(root)}
