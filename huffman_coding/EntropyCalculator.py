"""
File: EntropyCalculator.py
Author: Hannes Stalder
Description: Calculates entropy statistics for a frequency table and how close
             a Huffman code gets to the entropy bound.
"""

import numpy as np

from huffman_coding.FrequencyCounter import check_frequencies


class EntropyCalculator:
    def __init__(self, frequencies: dict):
        frequencies = check_frequencies(frequencies)

        counts = np.array(list(frequencies.values()), dtype=float)
        p = counts / counts.sum()

        self.H = float(np.dot(p, np.log2(1 / p)))         # entropy
        self.H0 = float(np.log2(len(p)))                  # max entropy
        self.R = self.H0 - self.H                         # absolute redundancy
        self.r = self.R / self.H0 if self.H0 > 0 else 0.0 # relative redundancy

    # ratio of the entropy to the average code length, 1.0 is the best a prefix code can do
    def efficiency(self, average_length: float) -> float:
        if average_length <= 0:
            return 0.0
        return self.H / average_length

    def __repr__(self):
        return (f"EntropyCalculator(H={self.H:.4f} bits/char, "
                f"H0={self.H0:.4f} bits/char, "
                f"R={self.R:.4f} bits/char, "
                f"r={self.r:.2%})")


# Example usage
if __name__ == "__main__":
    calc = EntropyCalculator({"a": 1, "b": 3, "c": 1})
    print(calc)
