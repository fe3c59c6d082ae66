import pytest

from huffman_coding.CostCalculator import CostCalculator
from huffman_coding.CodeAssigner import CodeAssigner
from huffman_coding.TreeBuilder import TreeBuilder, SeededCoin
from huffman_coding.FrequencyCounter import FrequencyCounter
from huffman_coding.HuffmanTree import Leaf, Internal


def test_classic_example_cost(classic_frequencies):
    root = TreeBuilder(coin=SeededCoin(0)).build(classic_frequencies)
    assert CostCalculator().calculate(root, 0) == 224


@pytest.mark.parametrize("seed", range(5))
def test_sample_text_cost(sample_text, seed):
    root = TreeBuilder(coin=SeededCoin(seed)).build(FrequencyCounter().count(sample_text))
    cost = CostCalculator().calculate(root)
    assert root.count == 30
    assert cost > 30
    assert cost == 68


def test_single_symbol_costs_one_bit_each():
    assert CostCalculator().calculate(Leaf("x", 11)) == 11


def test_depth_offsets_the_cost():
    root = Internal(Leaf("a", 2), Leaf("b", 3))
    assert CostCalculator().calculate(root, 0) == 5
    assert CostCalculator().calculate(root, 2) == 15


@pytest.mark.parametrize("table", [
    {"a": 1, "b": 2, "c": 4},
    {"c": 5, "d": 9, "a": 12, "b": 13, "e": 16, "f": 45},
    {"a": 7, "b": 7, "c": 7},
])
def test_cost_matches_code_lengths(table):
    root = TreeBuilder(coin=SeededCoin(9)).build(table)
    expected = sum(len(entry.code) * entry.frequency for entry in CodeAssigner().assign(root))
    assert CostCalculator().calculate(root) == expected


def test_average_length():
    root = Internal(Leaf("a", 2), Internal(Leaf("b", 1), Leaf("c", 1)))
    assert CostCalculator().average_length(root) == pytest.approx(1.5)


def test_cost_of_deep_tree():
    frequencies = {f"s{i}": 2 ** i for i in range(1100)}
    root = TreeBuilder(coin=SeededCoin(1)).build(frequencies)
    expected = sum(len(entry.code) * entry.frequency for entry in CodeAssigner().assign(root))
    assert CostCalculator().calculate(root) == expected
    assert repr(root).startswith(f"Internal({2 ** 1100 - 1}, ")
