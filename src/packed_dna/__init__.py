"""
Memory efficient nucleotide sequences, stored at 2 bits per base.
"""
from .errors import DecodeError, PackedDnaError, PackedIndexError, ParseError
from .packed import PackedSequence, count_nucleotides, parse_packed
from .types import NucleotideCounts, Symbol

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "NucleotideCounts",
    "PackedDnaError",
    "PackedIndexError",
    "PackedSequence",
    "ParseError",
    "Symbol",
    "count_nucleotides",
    "parse_packed",
]
