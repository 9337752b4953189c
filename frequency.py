from collections import Counter
from typing import Iterable, List, Tuple


def build_frequency_table(text: str) -> Counter:
    """Count occurrences of every character in ``text``.

    Whitespace and punctuation are ordinary symbols. Keys keep first-seen
    order, which the tree builder uses to break frequency ties.

    :param text: Input symbol sequence.
    :type text: str
    :returns: Mapping from symbol to count; empty for empty input.
    :rtype: Counter
    """
    return Counter(text)


def build_custom_frequency_table(pairs: Iterable[Tuple[str, int]]) -> Counter:
    """Build a frequency table from manually supplied ``(symbol, increment)`` pairs.

    Repeated symbols accumulate.

    :param pairs: Sequence of ``(symbol, increment)`` pairs.
    :type pairs: Iterable[Tuple[str, int]]
    :returns: Mapping from symbol to accumulated count.
    :rtype: Counter
    :raises ValueError: If a symbol is not a single character or an
        increment is negative.
    """
    table: Counter = Counter()
    for symbol, increment in pairs:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"Symbol must be a single character, got {symbol!r}")
        if increment < 0:
            raise ValueError(f"Frequency of {symbol!r} must be non-negative, got {increment}")
        table[symbol] = table.get(symbol, 0) + increment
    return table


def parse_frequency_pairs(items: Iterable[str]) -> List[Tuple[str, int]]:
    """Parse ``SYM=N`` strings into ``(symbol, increment)`` pairs.

    The symbol is the first character, so ``"==2"`` means ``'='`` twice.

    :param items: Strings such as ``"a=3"``.
    :type items: Iterable[str]
    :returns: Parsed pairs in input order.
    :rtype: List[Tuple[str, int]]
    :raises ValueError: If an item is not of the form ``SYM=N``.
    """
    pairs: List[Tuple[str, int]] = []
    for item in items:
        if len(item) < 3 or item[1] != "=":
            raise ValueError(f"Expected SYM=N, got {item!r}")
        try:
            count = int(item[2:])
        except ValueError:
            raise ValueError(f"Frequency in {item!r} is not an integer") from None
        pairs.append((item[0], count))
    return pairs
