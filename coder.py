from collections import Counter
from typing import Dict, Iterable, List, Mapping, Tuple

import codec
from efficiency import calculate_efficiency, efficiency_report, encoded_bit_length
from frequency import build_custom_frequency_table, build_frequency_table
from huffman import HuffmanNode, build_code_table, build_huffman_tree


class HuffmanCode:
    """A frequency table together with the tree and code table built from it.

    The three are created once and discarded together; none of them is
    mutated after construction.

    :ivar frequencies: Symbol frequencies the code was built from.
    :type frequencies: Counter
    :ivar root: Root of the Huffman tree.
    :type root: HuffmanNode
    :ivar codes: Mapping from symbol to binary code string.
    :type codes: Dict[str, str]
    """

    def __init__(self, frequencies: Mapping[str, int]):
        """Build the tree and code table for ``frequencies``.

        :param frequencies: Mapping from symbol to frequency.
        :type frequencies: Mapping[str, int]
        :raises EmptyAlphabetError: If ``frequencies`` is empty.
        """
        self.frequencies = Counter(frequencies)
        self.root: HuffmanNode = build_huffman_tree(self.frequencies)
        self.codes: Dict[str, str] = build_code_table(self.root)

    @classmethod
    def from_text(cls, text: str) -> "HuffmanCode":
        """Build a code from the symbol counts of ``text``."""
        return cls(build_frequency_table(text))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, int]]) -> "HuffmanCode":
        """Build a code from manually supplied ``(symbol, increment)`` pairs."""
        return cls(build_custom_frequency_table(pairs))

    def encode(self, text: str) -> str:
        return codec.encode(text, self.codes)

    def decode(self, bits: str) -> str:
        return codec.decode(bits, self.root)

    def efficiency(self, text: str, bit_width: int) -> str:
        return calculate_efficiency(text, self.codes, bit_width)

    def efficiency_report(self, text: str) -> List[Tuple[str, int, str]]:
        return efficiency_report(text, self.codes)

    def encoded_bit_length(self, text: str) -> int:
        return encoded_bit_length(text, self.codes)

    def code_lengths(self) -> Dict[str, int]:
        """Mapping from symbol to the length of its code."""
        return {sym: len(code) for sym, code in self.codes.items()}

    def weighted_path_length(self) -> int:
        """Sum of ``frequency * code length`` over the alphabet.

        This is the quantity the tree construction minimizes.
        """
        return sum(self.frequencies[sym] * len(code) for sym, code in self.codes.items())

    def rows(self) -> List[Tuple[str, int, str]]:
        """Rows ``(symbol, frequency, code)`` in frequency-table order."""
        return [(sym, freq, self.codes[sym]) for sym, freq in self.frequencies.items()]
