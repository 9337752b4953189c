def test_cli_parser_accepts_subcommands(m):
    parser = m.get_parser()
    ns = parser.parse_args(["table", "hello"])
    assert ns.cmd in ("table", "t") and ns.text == "hello"
    ns2 = parser.parse_args(["e", "ab", "-f", "a=1", "-f", "b=2"])
    assert ns2.cmd in ("encode", "e") and ns2.freq == ["a=1", "b=2"]
    ns3 = parser.parse_args(["decode", "0101", "--source", "aab"])
    assert ns3.cmd in ("decode", "d") and ns3.source == "aab"


def test_table_prints_codes_and_efficiency(m, capsys):
    assert m.main(["table", "aaabbc"]) == 0
    out = capsys.readouterr().out
    assert "Huffman Encoding Table:" in out
    assert "000111110" in out
    assert "78.57%" in out
    assert "3 leaves, 2 internal nodes" in out


def test_table_from_frequencies_skips_efficiency(m, capsys):
    assert m.main(["table", "-f", "a=3", "-f", " =1"]) == 0
    out = capsys.readouterr().out
    assert "' '" in out
    assert "Efficiency" not in out


def test_table_uses_sample_text_by_default(m, capsys):
    assert m.main(["t"]) == 0
    out = capsys.readouterr().out
    assert m.HuffmanCode.from_text(m.SAMPLE_TEXT).encode(m.SAMPLE_TEXT) in out


def test_encode_and_decode(m, capsys):
    assert m.main(["encode", "ab", "-f", "a=3", "-f", "b=1"]) == 0
    assert capsys.readouterr().out.strip() == "10"
    assert m.main(["decode", "10", "-f", "a=3", "-f", "b=1"]) == 0
    assert capsys.readouterr().out.strip() == "ab"
    assert m.main(["d", "000111110", "-s", "aaabbc"]) == 0
    assert capsys.readouterr().out.strip() == "aaabbc"


def test_errors_are_reported_not_raised(m, capsys):
    assert m.main(["encode", "abc", "-s", "aab"]) == 1
    assert capsys.readouterr().out.startswith("[!]")
    assert m.main(["decode", "01102", "-s", "aab"]) == 1
    assert "position 4" in capsys.readouterr().out
    assert m.main(["table", ""]) == 1
    assert m.main(["table", "-f", "a3"]) == 2
    assert "Invalid frequency" in capsys.readouterr().out
