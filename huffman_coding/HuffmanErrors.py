"""
File: HuffmanErrors.py
Author: Hannes Stalder
Description: Exceptions raised by the Huffman tree construction and its helpers.
"""


class HuffmanError(ValueError):
    pass


class EmptyInputError(HuffmanError):
    """Raised when a tree is requested for a frequency table without symbols."""
    pass


class InvalidFrequencyError(HuffmanError):
    """Raised when a symbol's count is not a positive integer."""

    def __init__(self, symbol, count, message=None):
        self.symbol = symbol
        self.count = count
        if message is None:
            message = f"Frequency of {symbol!r} must be a positive integer, got {count!r}"
        super().__init__(message)
