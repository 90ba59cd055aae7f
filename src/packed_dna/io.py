import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import ParseError
from .packed import PackedSequence

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FastaRecord:
    """A FASTA record with its sequence packed."""
    header: str
    sequence: PackedSequence


class FastAReader:
    """
    A simple FASTA file reader that yields packed records.

    Sequence lines are joined until the next header. Records containing
    anything other than A, C, G or T, including non-ASCII bytes, are skipped
    and counted.
    """
    def __init__(self, fasta_file: str | Path):
        self.fasta_file = Path(fasta_file)
        self.total = 0
        self.skipped = 0

    def __iter__(self):
        with self.fasta_file.open("r", encoding="latin-1") as f:
            header = None
            chunks: list[str] = []
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                if line.startswith(">"):
                    if header is not None:
                        record = self._pack(header, chunks)
                        if record is not None:
                            yield record
                    header = line[1:].strip()
                    chunks = []
                elif header is None:
                    raise ValueError(
                        f"Sequence data before first header in {self.fasta_file} "
                        f"at line {line_number}"
                    )
                else:
                    chunks.append(line)

            if header is not None:
                record = self._pack(header, chunks)
                if record is not None:
                    yield record

    def _pack(self, header: str, chunks: list[str]) -> FastaRecord | None:
        try:
            sequence = PackedSequence.from_text("".join(chunks))
        except ParseError as exc:
            self.skipped += 1
            LOGGER.warning("Skipping record %r: %s", header, exc)
            return None
        self.total += 1
        return FastaRecord(header=header, sequence=sequence)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass
