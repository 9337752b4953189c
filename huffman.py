import heapq
from typing import Dict, List, Mapping, Optional, Tuple

from errors import EmptyAlphabetError

DEGENERATE_CODE = "0"  #: Code given to the only symbol of a one-symbol alphabet


class HuffmanNode:
    """Immutable node of a strictly binary Huffman tree.

    :ivar symbol: The character stored at a leaf; ``None`` for internal nodes.
    :type symbol: str | None
    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    :ivar left: Left child node.
    :type left: HuffmanNode | None
    :ivar right: Right child node.
    :type right: HuffmanNode | None
    """

    __slots__ = ("_symbol", "_freq", "_left", "_right")

    def __init__(self, symbol=None, freq=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol for leaf nodes; ``None`` for internal nodes.
        :type symbol: str | None
        :param int freq: Frequency (weight) associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :raises ValueError: If exactly one child is given, or an internal
            node also carries a symbol.
        """
        if (left is None) != (right is None):
            raise ValueError("A Huffman node needs both children or none")
        if left is not None and symbol is not None:
            raise ValueError("Internal Huffman nodes carry no symbol")
        self._symbol = symbol
        self._freq = freq
        self._left = left
        self._right = right

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @property
    def freq(self) -> int:
        return self._freq

    @property
    def left(self) -> Optional["HuffmanNode"]:
        return self._left

    @property
    def right(self) -> Optional["HuffmanNode"]:
        return self._right

    @property
    def is_leaf(self) -> bool:
        return self._left is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self._symbol!r}, freq={self._freq})"
        return f"HuffmanNode(freq={self._freq}, left={self._left!r}, right={self._right!r})"


def build_huffman_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two lightest nodes.

    Ties on frequency are broken by a sequence number: leaves are numbered
    in the iteration order of ``frequencies`` and every merged node takes
    the next free number. The first node popped becomes the left child.

    :param frequencies: Mapping from symbol to observed frequency.
    :type frequencies: Mapping[str, int]
    :returns: Root of the tree. A one-symbol table yields a single leaf.
    :rtype: HuffmanNode
    :raises EmptyAlphabetError: If ``frequencies`` is empty.
    """
    if not frequencies:
        raise EmptyAlphabetError()

    heap: List[Tuple[int, int, HuffmanNode]] = [
        (freq, seq, HuffmanNode(symbol=sym, freq=freq))
        for seq, (sym, freq) in enumerate(frequencies.items())
    ]
    heapq.heapify(heap)
    seq = len(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=left_freq + right_freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, seq, merged))
        seq += 1

    return heap[0][2]


def build_code_table(root: HuffmanNode) -> Dict[str, str]:
    """Assign each leaf the path leading to it (``0`` left, ``1`` right).

    :param root: Root of a Huffman tree.
    :type root: HuffmanNode
    :returns: Mapping from symbol to its binary code string.
    :rtype: Dict[str, str]
    """
    if root.is_leaf:
        return {root.symbol: DEGENERATE_CODE}

    codes: Dict[str, str] = {}
    # Explicit stack: skewed trees can be as deep as the alphabet is large.
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
        else:
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
    return codes


def count_nodes(root: HuffmanNode) -> Tuple[int, int]:
    """Count the leaves and internal nodes of a tree.

    :param root: Root of a Huffman tree.
    :type root: HuffmanNode
    :returns: Tuple ``(leaves, internal)``.
    :rtype: Tuple[int, int]
    """
    leaves = internal = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            leaves += 1
        else:
            internal += 1
            stack.append(node.left)
            stack.append(node.right)
    return leaves, internal
