from typing import List, Mapping, Tuple

from errors import EmptyInputError, UnknownSymbolError
from frequency import build_frequency_table

#: Fixed-width encodings used as baselines, in bits per symbol
ENCODING_WIDTHS = {
    "ascii": 7,
    "ebcdic": 8,
    "unicode": 16,
}


def encoded_bit_length(text: str, code_table: Mapping[str, str]) -> int:
    """Number of bits ``text`` takes once Huffman-encoded.

    :param text: Symbol sequence.
    :type text: str
    :param code_table: Mapping from symbol to binary code string.
    :type code_table: Mapping[str, str]
    :returns: Sum over distinct symbols of ``frequency * len(code)``.
    :rtype: int
    :raises UnknownSymbolError: If a symbol of ``text`` has no code.
    """
    total = 0
    for symbol, freq in build_frequency_table(text).items():
        code = code_table.get(symbol)
        if code is None:
            raise UnknownSymbolError(symbol)
        total += freq * len(code)
    return total


def calculate_efficiency(text: str, code_table: Mapping[str, str], bit_width: int) -> str:
    """Storage saved by Huffman coding over a fixed-width encoding.

    :param text: Symbol sequence.
    :type text: str
    :param code_table: Mapping from symbol to binary code string.
    :type code_table: Mapping[str, str]
    :param bit_width: Bits per symbol of the baseline (7 for ASCII, ...).
    :type bit_width: int
    :returns: Savings as a percentage with two decimals, e.g. ``"78.57%"``.
    :rtype: str
    :raises EmptyInputError: If ``text`` is empty.
    :raises ValueError: If ``bit_width`` is not positive.
    """
    if bit_width < 1:
        raise ValueError(f"Bit width must be positive, got {bit_width}")
    if not text:
        raise EmptyInputError("Cannot estimate efficiency of empty text")
    original_bits = len(text) * bit_width
    encoded_bits = encoded_bit_length(text, code_table)
    savings = (original_bits - encoded_bits) / original_bits * 100
    return f"{savings:.2f}%"


def efficiency_report(text: str, code_table: Mapping[str, str]) -> List[Tuple[str, int, str]]:
    """Efficiency against every width in :data:`ENCODING_WIDTHS`.

    :returns: Rows ``(name, bit_width, percentage)``.
    :rtype: List[Tuple[str, int, str]]
    """
    return [
        (name, width, calculate_efficiency(text, code_table, width))
        for name, width in ENCODING_WIDTHS.items()
    ]
