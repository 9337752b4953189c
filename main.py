import argparse
import sys

from typing import List, Optional
from coder import HuffmanCode
from errors import HuffmanError
from frequency import parse_frequency_pairs
from huffman import count_nodes

#: Text used when neither source text nor frequencies are given
SAMPLE_TEXT = (
    "Huffman coding assigns short codes to frequent symbols and long codes "
    "to rare ones, so the encoded text is shorter than a fixed-width one."
)


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    """Attach the options that select what the code is built from.

    :param parser: Subcommand parser to extend.
    :type parser: argparse.ArgumentParser
    :returns: None
    :rtype: None
    """
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-s", "--source", help="Text whose symbol counts build the code"
    )
    group.add_argument(
        "-f",
        "--freq",
        action="append",
        metavar="SYM=N",
        help="Add N to the frequency of SYM (repeatable)",
    )


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Build Huffman codes for text and encode/decode with them"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    table = subparsers.add_parser(
        "table", aliases=["t"], help="Show the code table and its efficiency"
    )
    table.add_argument(
        "text", nargs="?", help="Text to build the code from (default: sample)"
    )
    table.add_argument(
        "-f",
        "--freq",
        action="append",
        metavar="SYM=N",
        help="Add N to the frequency of SYM instead of counting text",
    )

    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode a message into bits"
    )
    encode.add_argument("message", help="Message to encode")
    _add_source_args(encode)

    decode = subparsers.add_parser(
        "decode", aliases=["d"], help="Decode bits back into a message"
    )
    decode.add_argument("bits", help="String of 0 and 1 to decode")
    _add_source_args(decode)

    return parser


def _fmt_symbol(symbol: str) -> str:
    """Printable form of a symbol; whitespace is shown escaped.

    :param symbol: Single character.
    :type symbol: str
    :returns: Display string.
    :rtype: str
    """
    if symbol.isspace():
        return repr(symbol)
    return symbol


def _load_code(text: Optional[str], freq: Optional[List[str]]) -> HuffmanCode:
    """Build the code from explicit frequencies, source text, or the sample.

    :param text: Source text, if any.
    :type text: Optional[str]
    :param freq: ``SYM=N`` items, if any.
    :type freq: Optional[List[str]]
    :returns: The built code.
    :rtype: HuffmanCode
    :raises ValueError: If a ``SYM=N`` item is malformed.
    :raises EmptyAlphabetError: If the source is empty.
    """
    if freq:
        return HuffmanCode.from_pairs(parse_frequency_pairs(freq))
    return HuffmanCode.from_text(SAMPLE_TEXT if text is None else text)


def show_table(text: Optional[str], freq: Optional[List[str]]) -> None:
    """Print the encoding table, tree shape and efficiency figures.

    Efficiency is only shown when the code was built from text.

    :param text: Source text, or ``None`` for the sample.
    :type text: Optional[str]
    :param freq: ``SYM=N`` items, if any.
    :type freq: Optional[List[str]]
    :returns: None
    :rtype: None
    """
    code = _load_code(text, freq)
    print("Huffman Encoding Table:")
    print(f"{'Character':<15}{'Frequency':<15}{'Huffman Code':<15}")
    for symbol, count, bits in code.rows():
        print(f"{_fmt_symbol(symbol):<15}{count:<15}{bits:<15}")

    leaves, internal = count_nodes(code.root)
    print(f"\nTree: {leaves} leaves, {internal} internal nodes")
    print(f"Weighted path length: {code.weighted_path_length()}")

    if freq:
        return
    source = SAMPLE_TEXT if text is None else text
    print(f"\nEncoded text:\n{code.encode(source)}")
    print("\nEntire Huffman Efficiency")
    for name, width, pct in code.efficiency_report(source):
        print(f"{name.upper():<8} ({width:>2} bits)  {pct}")


def main(argv=None):
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        if args.cmd in ["table", "t"]:
            show_table(args.text, args.freq)
        elif args.cmd in ["encode", "e"]:
            code = _load_code(args.source, args.freq)
            print(code.encode(args.message))
        elif args.cmd in ["decode", "d"]:
            code = _load_code(args.source, args.freq)
            print(code.decode(args.bits))
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    except ValueError as e:
        print(f"[!] Invalid frequency: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
