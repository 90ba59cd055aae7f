from typing import Iterable, Iterator

from .codec import pack_codes, pack_text, unit_count, unpack_code
from .errors import PackedIndexError
from .types import NucleotideCounts, Symbol


class PackedSequence:
    """
    An immutable nucleotide sequence stored at 2 bits per symbol.

    Instances are built with :meth:`from_text` or :meth:`from_symbols` and
    never change afterwards, so they can be shared freely between threads.
    """
    __slots__ = ("_units", "_length")

    def __init__(self, units: bytes = b"", length: int = 0):
        if not isinstance(length, int) or length < 0:
            raise ValueError(f"Sequence length must be a non-negative integer, got {length!r}")
        if len(units) != unit_count(length):
            raise ValueError(
                f"{len(units)} storage units cannot hold a sequence of length {length}"
            )
        self._units = bytes(units)
        self._length = length

    @classmethod
    def from_text(cls, text: str) -> "PackedSequence":
        """
        Pack nucleotide text. Case is ignored.

        :param text: A string of A, C, G and T characters.
        :returns: The packed sequence.
        :raises ParseError: If any character is not a nucleotide.
        """
        units, length = pack_text(text)
        return cls(units, length)

    @classmethod
    def from_symbols(cls, symbols: Iterable[Symbol]) -> "PackedSequence":
        """Pack an iterable of symbols."""
        units, length = pack_codes(int(Symbol(symbol)) for symbol in symbols)
        return cls(units, length)

    def get(self, index: int) -> Symbol:
        """
        Return the symbol at a zero-based index.

        :param index: Position in the range ``0 <= index < len(self)``.
        :returns: The decoded symbol.
        :raises PackedIndexError: If the index is out of range.
        """
        if not 0 <= index < self._length:
            raise PackedIndexError(index, self._length)
        return Symbol.from_code(unpack_code(self._units, self._length, index))

    def is_empty(self) -> bool:
        return self._length == 0

    def raw_units(self) -> bytes:
        """Copy of the packed storage units."""
        return bytes(self._units)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> Symbol:
        if isinstance(index, slice):
            raise TypeError("PackedSequence does not support slicing")
        if index < 0:
            index += self._length
            if index < 0:
                raise PackedIndexError(index - self._length, self._length)
        return self.get(index)

    def __iter__(self) -> Iterator[Symbol]:
        for index in range(self._length):
            yield Symbol.from_code(unpack_code(self._units, self._length, index))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackedSequence):
            return NotImplemented
        return self._length == other._length and self._units == other._units

    def __hash__(self) -> int:
        return hash((self._length, self._units))

    def __str__(self) -> str:
        return "".join(symbol.char for symbol in self)

    def __repr__(self) -> str:
        return f"PackedSequence({str(self)!r})"


def parse_packed(text: str) -> PackedSequence:
    """Shorthand for :meth:`PackedSequence.from_text`."""
    return PackedSequence.from_text(text)


def count_nucleotides(sequence: PackedSequence) -> NucleotideCounts:
    """Tally each nucleotide by reading every index of the sequence."""
    counts = NucleotideCounts()
    for index in range(len(sequence)):
        counts.add(sequence.get(index))
    return counts
