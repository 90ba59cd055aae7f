import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .errors import PackedDnaError
from .io import FastAReader
from .packed import PackedSequence, count_nucleotides
from .types import NucleotideCounts
from .vectorized import count_codes

LOGGER = logging.getLogger(__name__)


def run_dna(args: argparse.Namespace) -> int:
    """Count the nucleotides of a sequence given on the command line."""
    print(f"Input: {args.dna}")
    print()
    try:
        sequence = PackedSequence.from_text(args.dna)
        counts = count_nucleotides(sequence)
    except PackedDnaError as exc:
        print(f"unsupported input: {exc}", file=sys.stderr)
        return 1

    for line in counts.lines():
        print(line)
    return 0


def run_fasta(args: argparse.Namespace) -> int:
    """Count the nucleotides of every record in a FASTA file."""
    start = time.time()
    fasta_path = Path(args.fasta)
    if not fasta_path.exists():
        raise FileNotFoundError(f"Missing FASTA file: {fasta_path}")

    total = NucleotideCounts()
    with FastAReader(fasta_path) as reader:
        for record in reader:
            counts = count_codes(record.sequence)
            total = total + counts
            print(f">{record.header}")
            for line in counts.lines():
                print(line)
            print()
        n_records = reader.total
        n_skipped = reader.skipped

    print("Total")
    for line in total.lines():
        print(line)

    LOGGER.debug(
        "Counted %d nucleotides in %d records (%d skipped) in %.2g seconds",
        total.total, n_records, n_skipped, time.time() - start,
    )
    if n_records == 0 and n_skipped > 0:
        print(f"unsupported input: all {n_skipped} records were skipped", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuccount",
        description="Count the number of occurrences of each nucleotide in the provided DNA.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--dna", "-d",
        help="DNA sequence to count. Case insensitive, only A, C, G and T are supported.",
    )
    source.add_argument(
        "--fasta", "-f",
        help="FASTA file whose records should be counted",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.dna is not None:
        return run_dna(args)
    return run_fasta(args)
