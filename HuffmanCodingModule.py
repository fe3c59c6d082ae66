"""
File: HuffmanCodingModule.py
Author: Hannes Stalder
Description: Main Huffman coding module. Builds the tree for a text or a
             frequency table and summarises codes, cost and tree.
"""

import logging
from typing import Optional

from huffman_coding.FrequencyCounter import FrequencyCounter, check_frequencies
from huffman_coding.TreeBuilder import TreeBuilder
from huffman_coding.CodeAssigner import CodeAssigner
from huffman_coding.CostCalculator import CostCalculator
from huffman_coding.TreeRenderer import TreeRenderer
from huffman_coding.EntropyCalculator import EntropyCalculator

logger = logging.getLogger(__name__)


class HuffmanCodingModule:
    def __init__(self, text: Optional[str] = None, frequencies: Optional[dict] = None, coin=None):

        if (text is None) == (frequencies is None):
            raise ValueError("Provide either a text or a frequency table")

        # Count the symbols of the text if no table was given
        if text is not None:
            self.frequencies = FrequencyCounter().count(text)
        else:
            self.frequencies = check_frequencies(frequencies)

        # Build the tree, everything else is read off it
        self.treeBuilder = TreeBuilder(coin=coin)
        self.root = self.treeBuilder.build(self.frequencies)

        self.codeAssigner = CodeAssigner()
        self.costCalculator = CostCalculator()
        self.treeRenderer = TreeRenderer()

        self.codes = list(self.codeAssigner.assign(self.root))
        self.cost = self.costCalculator.calculate(self.root, 0)
        self.average_length = self.costCalculator.average_length(self.root)

        self.entropyCalculator = EntropyCalculator(self.frequencies)
        self.efficiency = self.entropyCalculator.efficiency(self.average_length)

        self.tree_string = self.treeRenderer.render(self.root)

        logger.info("Huffman code for %d symbols built, B(T)=%d", len(self.frequencies), self.cost)

    def report(self) -> str:
        code_lines = "".join(self.treeRenderer.describe_leaf(entry) + "\n" for entry in self.codes)
        return ("Huffman code generation:\n"
                "The format is - [c, f(c)]: code,    where c = char, f(c) = frequency\n"
                f"{code_lines}"
                f"Cost of the tree is B(T)={self.cost}\n"
                "Tree:\n"
                f"{self.tree_string}"
                f"Entropy H={self.entropyCalculator.H:.4f} bits/char, "
                f"average code length L={self.average_length:.4f} bits/char, "
                f"efficiency={self.efficiency:.2%}\n")

    def __repr__(self):
        return self.report()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    text = "aaaaaaaaaabbbbbbbbbbccccddddef"

    myHuffmanCodingModule = HuffmanCodingModule(text=text)
    print(myHuffmanCodingModule)
