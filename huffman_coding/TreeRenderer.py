"""
File: TreeRenderer.py
Author: Hannes Stalder
Description: Renders a Huffman tree as indented text, one line per node,
             with the left branch marked 0 and the right branch marked 1.
"""

from typing import List

from huffman_coding.HuffmanTree import Node

# control characters would break the one line per node layout
ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r"}


def escape_symbol(symbol) -> str:
    text = str(symbol)
    if text in ESCAPES:
        return ESCAPES[text]
    if not text.isprintable():
        # remaining separators and control characters, e.g. \x0b or \u2028
        return text.encode("unicode_escape").decode("ascii")
    return text


class TreeRenderer:
    def __init__(self, left_marker: str = "├──0─ ", right_marker: str = "└──1─ ",
                 left_indent: str = "│    ", right_indent: str = "     "):
        # Prefixes put in front of a child line and in front of that child's own children
        self.left_marker = left_marker
        self.right_marker = right_marker
        self.left_indent = left_indent
        self.right_indent = right_indent

    def render(self, root: Node) -> str:
        lines: List[str] = []

        # explicit stack of (node, prefix, children_prefix), tree depth can exceed the recursion limit
        stack = [(root, "", "")]
        while stack:
            node, prefix, children_prefix = stack.pop()
            lines.append(prefix + self.describe_node(node))

            if not node.is_leaf:
                # right is pushed first so the left branch is printed first
                stack.append((node.right, children_prefix + self.right_marker,
                              children_prefix + self.right_indent))
                stack.append((node.left, children_prefix + self.left_marker,
                              children_prefix + self.left_indent))

        return "".join(line + "\n" for line in lines)

    def describe_node(self, node: Node) -> str:
        if node.is_leaf:
            return f"{escape_symbol(node.symbol)} ({node.count})"
        return f"({node.count})"

    def describe_leaf(self, entry) -> str:
        """Formats a CodeEntry as it appears in the code listing: [c, f(c)]: code"""
        return f"[{escape_symbol(entry.symbol)}, {entry.frequency}]: {entry.code}"
