"""
Vectorized decoding of packed sequences with numpy.

These functions decode every code in one pass instead of one index at a time,
and must agree with :meth:`PackedSequence.get` for every index.
"""
import numpy as np

from .codec import CODE_MASK, CODES_PER_UNIT, unit_count
from .packed import PackedSequence
from .types import NucleotideCounts

# Shift for each slot of a unit holding four codes, first code in bits 7-6.
FULL_UNIT_SHIFTS = np.array([6, 4, 2, 0], dtype=np.uint8)


def decode_codes(units: bytes, length: int) -> np.ndarray:
    """
    Decode packed units into an array of 2-bit codes.

    :param units: Packed storage units.
    :param length: Number of codes stored in ``units``.
    :returns: A ``uint8`` array of shape ``(length,)`` with values 0-3.
    """
    if len(units) != unit_count(length):
        raise ValueError(
            f"{len(units)} storage units cannot hold a sequence of length {length}"
        )
    packed = np.frombuffer(units, dtype=np.uint8)
    n_full, remainder = divmod(length, CODES_PER_UNIT)

    full = (packed[:n_full, None] >> FULL_UNIT_SHIFTS[None, :]) & CODE_MASK
    codes = full.reshape(-1)
    if remainder:
        # The trailing unit is filled from the low bits, most recent code last
        tail_shifts = np.arange(remainder - 1, -1, -1, dtype=np.uint8) * 2
        tail = (packed[n_full] >> tail_shifts) & CODE_MASK
        codes = np.concatenate([codes, tail])
    return codes.astype(np.uint8, copy=False)


def sequence_codes(sequence: PackedSequence) -> np.ndarray:
    """Decode a whole packed sequence into an array of codes."""
    return decode_codes(sequence.raw_units(), len(sequence))


def count_codes(sequence: PackedSequence) -> NucleotideCounts:
    """Tally nucleotides with a single bincount over the decoded codes."""
    tally = np.bincount(sequence_codes(sequence), minlength=CODES_PER_UNIT)
    a, c, g, t = (int(n) for n in tally)
    return NucleotideCounts(a=a, c=c, g=g, t=t)
