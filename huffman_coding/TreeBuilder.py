"""
File: TreeBuilder.py
Author: Hannes Stalder
Description: Builds a Huffman tree from a frequency table by greedily merging
             the two least frequent subtrees.
"""

import heapq
import itertools
import logging
import random
import secrets

from huffman_coding.FrequencyCounter import check_frequencies
from huffman_coding.HuffmanTree import Leaf, Internal, Node

logger = logging.getLogger(__name__)

# In this module we use heapq to efficiently keep track of the nodes.
# The nodes define __lt__ on their count, so the heap always yields the lowest count first.


def secure_coin() -> bool:
    return secrets.randbits(1) == 1


class SeededCoin:
    """Reproducible coin, the same seed always gives the same flips."""

    def __init__(self, seed):
        self.rng = random.Random(seed)

    def __call__(self) -> bool:
        return self.rng.getrandbits(1) == 1


class FixedCoin:
    """Replays the given outcomes in order and starts over when they run out."""

    def __init__(self, outcomes):
        outcomes = list(outcomes)
        if not outcomes:
            raise ValueError("FixedCoin needs at least one outcome")
        self.outcomes = itertools.cycle(outcomes)
        self.flips = 0

    def __call__(self) -> bool:
        self.flips += 1
        return bool(next(self.outcomes))


class TreeBuilder:
    def __init__(self, coin=None):
        # the coin decides whether two subtrees of equal count swap sides
        self.coin = coin if coin is not None else secure_coin

    def build(self, frequencies) -> Node:
        frequencies = check_frequencies(frequencies)

        # Create all the leaves and sort them
        priority_queue = [Leaf(symbol, count) for symbol, count in frequencies.items()]
        heapq.heapify(priority_queue)

        # only one symbol, the leaf itself is the root
        if len(priority_queue) == 1:
            root = priority_queue[0]
            logger.debug("Built single leaf tree for %r (%d)", root.symbol, root.count)
            return root

        while len(priority_queue) > 1:

            # we take the two lowest count nodes and form a new node
            left_node = heapq.heappop(priority_queue)
            right_node = heapq.heappop(priority_queue)

            # equal counts mean a different tree of the same cost can be built
            if left_node.count == right_node.count:
                swap = bool(self.coin())
                logger.debug("Equal counts %d and %d, swapped: %s", left_node.count, right_node.count, swap)
                if swap:
                    left_node, right_node = right_node, left_node

            heapq.heappush(priority_queue, Internal(left_node, right_node))

        root = priority_queue[0]
        logger.debug("Built tree for %d symbols with total count %d", len(frequencies), root.count)
        return root


# Example usage
if __name__ == "__main__":
    builder = TreeBuilder(coin=SeededCoin(7))
    print(builder.build({"c": 5, "d": 9, "a": 12, "b": 13, "e": 16, "f": 45}))
