import pytest

from codec import decode, encode
from errors import (
    HuffmanError,
    MalformedBitstringError,
    UndecodableSequenceError,
    UnknownSymbolError,
)
from frequency import build_frequency_table
from huffman import build_code_table, build_huffman_tree


def _build(text):
    root = build_huffman_tree(build_frequency_table(text))
    return root, build_code_table(root)


@pytest.mark.parametrize(
    "text",
    [
        "aaabbc",
        "abracadabra",
        "The quick brown fox jumps over the lazy dog.\n\tDone!",
        "naïve café ☕ naïve",
        "zzzzzz",
        "ab",
    ],
)
def test_roundtrip(text, prefix_free_fn):
    root, codes = _build(text)
    assert prefix_free_fn(codes)
    bits = encode(text, codes)
    assert set(bits) <= {"0", "1"}
    assert decode(bits, root) == text


def test_scenario_encoding():
    root, codes = _build("aaabbc")
    bits = encode("aaabbc", codes)
    assert bits == "000111110"
    assert len(bits) == 9


def test_encode_unknown_symbol_raises():
    _, codes = _build("aab")
    with pytest.raises(UnknownSymbolError) as exc:
        encode("abc", codes)
    assert exc.value.symbol == "c"
    assert isinstance(exc.value, HuffmanError)


def test_encode_subset_and_empty():
    _, codes = _build("aaabbc")
    assert encode("cab", codes) == "10011"
    assert encode("", codes) == ""


def test_decode_malformed_bitstring():
    root, _ = _build("aab")
    with pytest.raises(MalformedBitstringError) as exc:
        decode("01102", root)
    assert exc.value.position == 4
    assert exc.value.char == "2"


def test_decode_rejects_non_binary_before_decoding():
    root, _ = _build("aaabbc")
    with pytest.raises(MalformedBitstringError):
        decode("0 0", root)


def test_decode_empty():
    root, _ = _build("aaabbc")
    assert decode("", root) == ""


def test_decode_drops_trailing_partial_path():
    root, _ = _build("aaabbc")
    assert decode("0101", root) == "ac"


def test_decode_without_any_symbol_raises():
    root, _ = _build("aaabbc")
    with pytest.raises(UndecodableSequenceError):
        decode("1", root)


def test_single_symbol_roundtrip():
    root, codes = _build("xxxx")
    assert codes == {"x": "0"}
    assert encode("xxxx", codes) == "0000"
    assert decode("0000", root) == "xxxx"


def test_single_symbol_decode_one_bit_raises():
    root, _ = _build("xxxx")
    with pytest.raises(UndecodableSequenceError):
        decode("001", root)
