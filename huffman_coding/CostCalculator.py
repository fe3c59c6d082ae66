"""
File: CostCalculator.py
Author: Hannes Stalder
Description: Calculates the weighted path length B(T) of a Huffman tree,
             the number of bits needed to encode every occurrence of every symbol.
"""

from huffman_coding.HuffmanTree import Node


class CostCalculator:
    def calculate(self, root: Node, depth: int = 0) -> int:
        """
        A leaf at depth d costs max(1, d) * count, a junction costs the sum of its
        two branches one level deeper. Walked with a stack instead of recursion.
        """
        cost = 0
        stack = [(root, depth)]
        while stack:
            node, node_depth = stack.pop()

            # a leaf at the root still costs one bit per occurrence
            if node.is_leaf:
                cost += max(1, node_depth) * node.count
            else:
                stack.append((node.left, node_depth + 1))
                stack.append((node.right, node_depth + 1))

        return cost

    def average_length(self, root: Node) -> float:
        """Expected code length in bits per symbol occurrence."""
        return self.calculate(root) / root.count
