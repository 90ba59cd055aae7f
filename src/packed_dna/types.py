from dataclasses import dataclass
from enum import IntEnum

from .errors import DecodeError, ParseError


class Symbol(IntEnum):
    """
    A nucleotide. The integer value of each member is its 2-bit code, which
    fixes the byte layout of packed sequences.
    """
    A = 0b00
    C = 0b01
    G = 0b10
    T = 0b11

    @property
    def char(self) -> str:
        return self.name

    @classmethod
    def from_char(cls, ch: str) -> "Symbol":
        """
        Parse a single character, ignoring case.

        :param ch: One of A, C, G, T in either case.
        :returns: The matching symbol.
        :raises ParseError: If the character is not a nucleotide.
        """
        try:
            return _BY_CHAR[ch]
        except (KeyError, TypeError):
            raise ParseError(ch) from None

    @classmethod
    def from_str(cls, text: str) -> "Symbol":
        """
        Parse a one-letter string, ignoring case. Empty strings and strings
        longer than one character are rejected.
        """
        upper = text.upper()
        if len(upper) != 1 or upper not in _BY_CHAR:
            raise ParseError(upper)
        return _BY_CHAR[upper]

    @classmethod
    def from_code(cls, code: int) -> "Symbol":
        """Map a 2-bit code back to its symbol."""
        if not 0 <= code < len(_BY_CODE):
            raise DecodeError(code)
        return _BY_CODE[code]


_BY_CODE = tuple(Symbol)
_BY_CHAR = {
    **{symbol.name: symbol for symbol in Symbol},
    **{symbol.name.lower(): symbol for symbol in Symbol},
}


@dataclass(slots=True)
class NucleotideCounts:
    """Occurrences of each nucleotide in a sequence."""
    a: int = 0
    c: int = 0
    g: int = 0
    t: int = 0

    def __getitem__(self, symbol: Symbol) -> int:
        return getattr(self, symbol.name.lower())

    def add(self, symbol: Symbol, count: int = 1) -> None:
        field = symbol.name.lower()
        setattr(self, field, getattr(self, field) + count)

    def __add__(self, other: "NucleotideCounts") -> "NucleotideCounts":
        if not isinstance(other, NucleotideCounts):
            return NotImplemented
        return NucleotideCounts(
            a=self.a + other.a,
            c=self.c + other.c,
            g=self.g + other.g,
            t=self.t + other.t,
        )

    @property
    def total(self) -> int:
        return self.a + self.c + self.g + self.t

    def lines(self) -> list[str]:
        """Report lines in fixed A, C, G, T order."""
        return [f"{symbol.name}: {self[symbol]}" for symbol in Symbol]
