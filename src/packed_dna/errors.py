class PackedDnaError(Exception):
    """Base class for errors raised by packed_dna."""


class ParseError(PackedDnaError, ValueError):
    """
    Raised when text contains something other than A, C, G or T.

    :param value: The offending character, or the whole text when a single
        symbol was expected.
    """
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"failed to parse nucleotide from {value!r}")


class PackedIndexError(PackedDnaError, IndexError):
    """Raised when an index falls outside of a packed sequence."""
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"failed to get nucleotide from index {index} (length {length})"
        )


class DecodeError(PackedDnaError, ValueError):
    """Raised when a 2-bit field does not map onto a nucleotide."""
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"failed to decode nucleotide from code {code}")
