import pytest

from packed_dna import DecodeError, NucleotideCounts, ParseError, Symbol


def test_codes_are_fixed():
    """Test that each symbol keeps its 2-bit code."""
    assert [int(symbol) for symbol in Symbol] == [0b00, 0b01, 0b10, 0b11]
    assert [symbol.char for symbol in Symbol] == ["A", "C", "G", "T"]


@pytest.mark.parametrize("ch,expected", [
    ("A", Symbol.A), ("a", Symbol.A),
    ("C", Symbol.C), ("c", Symbol.C),
    ("G", Symbol.G), ("g", Symbol.G),
    ("T", Symbol.T), ("t", Symbol.T),
])
def test_from_char(ch, expected):
    """Test that characters parse case-insensitively."""
    assert Symbol.from_char(ch) is expected


@pytest.mark.parametrize("ch", ["B", "b", "N", " ", "U", "AC", ""])
def test_from_char_rejects_other_characters(ch):
    with pytest.raises(ParseError) as excinfo:
        Symbol.from_char(ch)
    assert excinfo.value.value == ch


def test_from_str():
    """Test one-letter strings in both cases."""
    assert Symbol.from_str("A") is Symbol.A
    assert Symbol.from_str("c") is Symbol.C
    assert Symbol.from_str("G") is Symbol.G
    assert Symbol.from_str("t") is Symbol.T
    assert Symbol.from_str("a") != Symbol.T


@pytest.mark.parametrize("text", ["B", "b", "ATC", ""])
def test_from_str_rejects_bad_text(text):
    """Test that anything but a single nucleotide letter fails."""
    with pytest.raises(ParseError) as excinfo:
        Symbol.from_str(text)
    assert excinfo.value.value == text.upper()


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError, match="failed to parse nucleotide from 'B'"):
        Symbol.from_char("B")


def test_from_code():
    assert [Symbol.from_code(code) for code in range(4)] == [
        Symbol.A, Symbol.C, Symbol.G, Symbol.T
    ]
    with pytest.raises(DecodeError) as excinfo:
        Symbol.from_code(4)
    assert excinfo.value.code == 4
    with pytest.raises(DecodeError):
        Symbol.from_code(-1)


def test_counts():
    """Test tally accessors and the fixed report order."""
    counts = NucleotideCounts()
    counts.add(Symbol.T, 3)
    counts.add(Symbol.A)
    counts.add(Symbol.G)
    assert counts[Symbol.T] == 3
    assert counts[Symbol.C] == 0
    assert counts.total == 5
    assert counts.lines() == ["A: 1", "C: 0", "G: 1", "T: 3"]

    summed = counts + NucleotideCounts(a=1, c=2, g=3, t=4)
    assert summed == NucleotideCounts(a=2, c=2, g=4, t=7)
