"""
Core data structures.

1. Input records and regions are read-only views of the caller's data
2. Fragments are plain (offset, length) pairs relative to their region
3. RunContext carries the only state shared across regions
"""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from .seq_utils import flat_quality


# =============================================================================
# Input data structures
# =============================================================================

@dataclass(frozen=True)
class InputRecord:
    """One input sequence, with quality when read from FASTQ."""
    id: str
    sequence: str
    quality: Optional[str] = None

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def has_quality(self) -> bool:
        return self.quality is not None


@dataclass(frozen=True)
class Region:
    """A window of an InputRecord processed independently."""
    sequence: str
    quality: Optional[str] = None
    base_offset: int = 0           # start in the original sequence (bookkeeping)

    @property
    def length(self) -> int:
        return len(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class Fragment:
    """Sampled span of a region (0-based offset)."""
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def fits(self, region_length: int) -> bool:
        return self.offset >= 0 and self.length >= 1 and self.end <= region_length


# =============================================================================
# Output data structures
# =============================================================================

@dataclass
class OutputRead:
    """A synthesized read; contig records carry no quality."""
    name: str
    sequence: str
    quality: Optional[str] = None

    def __len__(self) -> int:
        return len(self.sequence)

    def to_fastq(self) -> str:
        qual = self.quality if self.quality is not None else flat_quality(len(self.sequence))
        return f"@{self.name}\n{self.sequence}\n+\n{qual}\n"

    def to_fasta(self, line_width: int = 80) -> str:
        lines = [f">{self.name}"]
        seq = self.sequence
        for i in range(0, len(seq), line_width):
            lines.append(seq[i:i + line_width])
        return "\n".join(lines) + "\n"


# =============================================================================
# Run state
# =============================================================================

@dataclass
class RunContext:
    """
    Run-wide state threaded through every driver call.

    The fragment counter is never reset between records or regions,
    so fragment names are unique across the whole run.
    """
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    counter: int = 0

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "RunContext":
        return cls(rng=np.random.default_rng(seed))

    def next_fragment_id(self) -> int:
        self.counter += 1
        return self.counter

    def flip_strand(self) -> bool:
        """Unbiased binary draw; True means reverse strand."""
        return bool(self.rng.integers(0, 2))
