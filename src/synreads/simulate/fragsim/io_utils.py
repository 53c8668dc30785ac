"""
Input/output module

- FASTA/FASTQ reading with format detection (plain or gzip, "-" for stdin)
- FASTQ/FASTA writing (plain or gzip, "-" for stdout)
"""

import gzip
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from .errors import FormatError
from .models import InputRecord, OutputRead

logger = logging.getLogger(__name__)

# IUPAC nucleotide codes accepted as-is
VALID_BASES = set('ACGTNRYSWKMBDHV')

FASTA = "fasta"
FASTQ = "fastq"


def open_text(path: Union[str, Path], mode: str = "r") -> TextIO:
    """Open a text stream; "-" maps to stdin/stdout and ".gz" to gzip."""
    if str(path) == "-":
        return sys.stdin if "r" in mode else sys.stdout
    path = Path(path)
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t")
    return open(path, mode)


def validate_sequence(seq: str, seq_id: str) -> str:
    """
    Upper-case a sequence and replace non-IUPAC symbols with N.

    Args:
        seq: Sequence string
        seq_id: Sequence ID (for the warning message)

    Returns:
        Cleaned sequence
    """
    seq = seq.upper()
    invalid_chars = set(seq) - VALID_BASES
    if invalid_chars:
        logger.warning(
            f"Sequence '{seq_id}' contains non-standard bases: {sorted(invalid_chars)}. "
            f"These will be converted to 'N'."
        )
        seq = ''.join(c if c in VALID_BASES else 'N' for c in seq)
    return seq


def detect_format(first_line: str) -> str:
    """Identify the format from the first non-blank line."""
    if first_line.startswith(">"):
        return FASTA
    if first_line.startswith("@"):
        return FASTQ
    raise FormatError(
        f"Input is neither FASTA ('>') nor FASTQ ('@'): starts with {first_line[:20]!r}"
    )


class RecordReader:
    """
    Streaming reader for FASTA or FASTQ input.

    The format is detected when the reader is opened, so unsupported input
    fails before any record is processed.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = path
        self.format: Optional[str] = None
        self._handle: Optional[TextIO] = None
        self._first_line: Optional[str] = None

    def open(self):
        self._handle = open_text(self.path, "r")
        for line in self._handle:
            line = line.strip()
            if line:
                self._first_line = line
                break
        if self._first_line is None:
            self.close()
            raise FormatError(f"Input is empty: {self.path}")
        try:
            self.format = detect_format(self._first_line)
        except FormatError:
            self.close()
            raise
        logger.debug(f"Detected {self.format.upper()} input: {self.path}")
        return self

    def close(self):
        if self._handle is not None and self._handle is not sys.stdin:
            self._handle.close()
        self._handle = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __iter__(self) -> Iterator[InputRecord]:
        if self._handle is None:
            raise RuntimeError("RecordReader must be opened before iteration")
        if self.format == FASTA:
            return self._iter_fasta()
        return self._iter_fastq()

    def _lines(self) -> Iterator[str]:
        yield self._first_line
        for line in self._handle:
            yield line.rstrip("\r\n")

    def _iter_fasta(self) -> Iterator[InputRecord]:
        current_id = None
        chunks: List[str] = []
        for line in self._lines():
            line = line.strip()
            if not line:
                continue
            if line.startswith(">"):
                if current_id is not None:
                    record = self._fasta_record(current_id, chunks)
                    if record is not None:
                        yield record
                header = line[1:].split()
                current_id = header[0] if header else ""
                chunks = []
            else:
                chunks.append(line)
        if current_id is not None:
            record = self._fasta_record(current_id, chunks)
            if record is not None:
                yield record

    @staticmethod
    def _fasta_record(seq_id: str, chunks: List[str]) -> Optional[InputRecord]:
        seq = validate_sequence("".join(chunks), seq_id)
        if not seq:
            logger.warning(f"Skipping empty sequence: {seq_id}")
            return None
        return InputRecord(id=seq_id, sequence=seq)

    def _iter_fastq(self) -> Iterator[InputRecord]:
        lines = self._lines()
        for header in lines:
            if not header.strip():
                continue
            if not header.startswith("@"):
                raise FormatError(f"Expected FASTQ header, got: {header[:40]!r}")
            seq_id = header[1:].split()[0] if header[1:].split() else ""
            try:
                seq = next(lines).strip()
                plus = next(lines)
                qual = next(lines).strip()
            except StopIteration:
                raise FormatError(f"Truncated FASTQ record: {seq_id}") from None
            if not plus.startswith("+"):
                raise FormatError(f"FASTQ record '{seq_id}' is missing its '+' line")
            if len(qual) != len(seq):
                raise FormatError(
                    f"FASTQ record '{seq_id}': quality length {len(qual)} "
                    f"does not match sequence length {len(seq)}"
                )
            seq = validate_sequence(seq, seq_id)
            if not seq:
                logger.warning(f"Skipping empty sequence: {seq_id}")
                continue
            yield InputRecord(id=seq_id, sequence=seq, quality=qual)


def iter_records(path: Union[str, Path]) -> Iterator[InputRecord]:
    """
    Iterate over FASTA or FASTQ records.

    Yields:
        InputRecord (quality set for FASTQ input)
    """
    with RecordReader(path) as reader:
        yield from reader


class ReadWriter:
    """Writes OutputRead records as FASTQ, or FASTA for contig output."""

    def __init__(
        self,
        output_path: Union[str, Path],
        fasta: bool = False,
        line_width: int = 80,
    ):
        """
        Args:
            output_path: Output file path ("-" for stdout, ".gz" to compress)
            fasta: Write FASTA instead of FASTQ
            line_width: FASTA line width
        """
        self.output_path = output_path
        self.fasta = fasta
        self.line_width = line_width
        self.count = 0
        self._file: Optional[TextIO] = None

    def open(self):
        if str(self.output_path) != "-":
            Path(self.output_path).parent.mkdir(parents=True, exist_ok=True)
        self._file = open_text(self.output_path, "w")
        return self

    def close(self):
        if self._file is None:
            return
        if self._file is sys.stdout:
            self._file.flush()
        else:
            self._file.close()
        self._file = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write(self, read: OutputRead):
        if self.fasta:
            self._file.write(read.to_fasta(self.line_width))
        else:
            self._file.write(read.to_fastq())
        self.count += 1

    def write_all(self, reads: Iterable[OutputRead]) -> int:
        """Write every read from an iterable; returns the number written."""
        before = self.count
        for read in reads:
            self.write(read)
        return self.count - before
