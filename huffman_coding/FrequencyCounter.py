"""
File: FrequencyCounter.py
Author: Hannes Stalder
Description: Counts symbol occurrences in a text and checks frequency tables.
"""

from collections import Counter
from collections.abc import Mapping
from numbers import Integral

from huffman_coding.HuffmanErrors import EmptyInputError, InvalidFrequencyError


class FrequencyCounter:
    def count(self, text) -> dict:
        # Counter returns a dict with each symbol and occurance count
        return dict(Counter(text))


def check_frequencies(frequencies) -> dict:
    """Return a copy of the table after making sure it holds at least one symbol with a positive integer count."""
    if not isinstance(frequencies, Mapping):
        raise InvalidFrequencyError(None, None, f"Frequency table must be a mapping, got {type(frequencies).__name__}")
    if not frequencies:
        raise EmptyInputError("Frequency table cannot be empty")

    for symbol, count in frequencies.items():
        # bool is an Integral too, but True is not a count
        if isinstance(count, bool) or not isinstance(count, Integral) or count <= 0:
            raise InvalidFrequencyError(symbol, count)

    return {symbol: int(count) for symbol, count in frequencies.items()}


# Example usage
if __name__ == "__main__":
    counter = FrequencyCounter()
    print(counter.count("aaaaaaaaaabbbbbbbbbbccccddddef"))
