class HuffmanError(ValueError):
    """Base class for all Huffman coding failures."""


class EmptyAlphabetError(HuffmanError):
    """Raised when a tree is requested for an empty frequency table."""

    def __init__(self, message: str = "Cannot build a Huffman tree from an empty frequency table"):
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised when a symbol has no entry in the code table.

    :ivar symbol: The offending symbol.
    :type symbol: str
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"Symbol {symbol!r} has no code; the text must only use "
            "symbols the code table was built from"
        )


class MalformedBitstringError(HuffmanError):
    """Raised when an encoded string contains anything besides ``0``/``1``.

    :ivar position: Index of the first bad character.
    :type position: int
    :ivar char: The bad character itself.
    :type char: str
    """

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"Invalid character {char!r} at position {position} in encoded text"
        )


class UndecodableSequenceError(HuffmanError):
    """Raised when bits cannot be resolved into symbols with the given tree."""


class EmptyInputError(HuffmanError):
    """Raised when an efficiency estimate is requested for empty text."""
