"""
Bit-packing kernels for 2-bit nucleotide storage.

Codes are packed four to a byte by shifting the accumulator left two bits and
adding the next code. A byte that receives four codes holds the first in bits
7-6 and the last in bits 1-0. The trailing byte of a sequence whose length is
not a multiple of four is never padded, so its codes sit in the low bits with
the most recent one in bits 1-0.

This module is compiled with Cython by setup.py, but stays importable as plain
Python.
"""
from typing import Iterable, Iterator

from .errors import ParseError

CODES_PER_UNIT = 4
CODE_MASK = 0b11

CHAR_CODES: dict[str, int] = {
    "A": 0, "C": 1, "G": 2, "T": 3,
    "a": 0, "c": 1, "g": 2, "t": 3,
}


def pack_codes(codes: Iterable[int]) -> tuple[bytes, int]:
    """
    Pack 2-bit codes into storage units.

    :param codes: Codes in the range 0-3.
    :returns: The packed units and the number of codes consumed.
    """
    units = bytearray()
    unit = 0
    length = 0
    for code in codes:
        if length % CODES_PER_UNIT == 0 and length != 0:
            units.append(unit)
            unit = 0
        unit = (unit << 2) + code
        length += 1

    if length != 0:
        units.append(unit)
    return bytes(units), length


def text_codes(text: str) -> Iterator[int]:
    """
    Yield the code of each character, ignoring case.

    :raises ParseError: On the first character that is not a nucleotide.
    """
    for ch in text:
        code = CHAR_CODES.get(ch)
        if code is None:
            raise ParseError(ch)
        yield code


def pack_text(text: str) -> tuple[bytes, int]:
    """
    Pack nucleotide text into storage units, ignoring case.

    :param text: Characters drawn from A, C, G, T in either case.
    :returns: The packed units and the sequence length.
    :raises ParseError: On the first character that is not a nucleotide.
    """
    return pack_codes(text_codes(text))


def unpack_code(units: bytes, length: int, index: int) -> int:
    """
    Read the code at ``index`` from packed units. The index must already be
    known to lie within ``length``.
    """
    units_complete = length // CODES_PER_UNIT
    unit = units[index // CODES_PER_UNIT]
    if index >= units_complete * CODES_PER_UNIT:
        # Trailing partial unit
        shift = 2 * (length - index - 1)
    else:
        shift = 2 * (CODES_PER_UNIT - 1 - index % CODES_PER_UNIT)
    return (unit >> shift) & CODE_MASK


def unit_count(length: int) -> int:
    """Number of storage units needed for ``length`` codes."""
    return (length + CODES_PER_UNIT - 1) // CODES_PER_UNIT
