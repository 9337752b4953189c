from typing import List, Mapping

from errors import MalformedBitstringError, UndecodableSequenceError, UnknownSymbolError
from huffman import HuffmanNode

BITS = frozenset("01")


def encode(text: str, code_table: Mapping[str, str]) -> str:
    """Concatenate the code of every symbol of ``text``, in order.

    :param text: Symbols to encode.
    :type text: str
    :param code_table: Mapping from symbol to binary code string.
    :type code_table: Mapping[str, str]
    :returns: The encoded bit string.
    :rtype: str
    :raises UnknownSymbolError: If a symbol of ``text`` has no code.
    """
    parts: List[str] = []
    for symbol in text:
        code = code_table.get(symbol)
        if code is None:
            raise UnknownSymbolError(symbol)
        parts.append(code)
    return "".join(parts)


def _check_bits(bits: str) -> None:
    for pos, char in enumerate(bits):
        if char not in BITS:
            raise MalformedBitstringError(pos, char)


def decode(bits: str, root: HuffmanNode) -> str:
    """Decode a bit string by walking ``root`` from the top for every symbol.

    Bits left over after the last complete symbol are dropped, since the
    format has no end-of-stream marker.

    :param bits: String over ``{'0', '1'}``.
    :type bits: str
    :param root: Root of the tree the bits were encoded with.
    :type root: HuffmanNode
    :returns: The decoded text.
    :rtype: str
    :raises MalformedBitstringError: If ``bits`` contains another character.
    :raises UndecodableSequenceError: If a bit leads nowhere in the tree, or
        non-empty ``bits`` yield no symbol at all.
    """
    _check_bits(bits)

    out: List[str] = []
    if root.is_leaf:
        # A lone leaf is reached through a single "0" branch.
        for pos, bit in enumerate(bits):
            if bit != "0":
                raise UndecodableSequenceError(
                    f"Bit {bit!r} at position {pos} has no branch in a one-symbol tree"
                )
            out.append(root.symbol)
        return "".join(out)

    node = root
    for pos, bit in enumerate(bits):
        node = node.left if bit == "0" else node.right
        if node is None:
            raise UndecodableSequenceError(f"Bit {bit!r} at position {pos} has no branch")
        if node.is_leaf:
            out.append(node.symbol)
            node = root

    if bits and not out:
        raise UndecodableSequenceError("Encoded text does not match any of the codes")
    return "".join(out)
