"""
Paired modes

Both modes sample one insert per fragment and read both ends of it; they
differ only in mate orientation, which the assembler applies:
- pe: mate 2 reverse-complemented (inward-facing)
- mp: mate 1 reverse-complemented (outward-facing)
"""

from typing import List

from ..config import Mode
from ..models import Fragment, Region, RunContext
from ..sampling import fixed_lengths, insert_lengths, sample_offsets
from .base import BaseModeDriver


class _InsertDriver(BaseModeDriver):
    """Insert-size sampling shared by pe and mp."""

    def plan(self, region: Region, context: RunContext) -> List[Fragment]:
        count = self.fragment_count(region)
        systematic = self.config.effective_systematic
        offsets = sample_offsets(
            region.length, self.anchor_length, count, context.rng,
            systematic=systematic,
        )
        if systematic:
            lengths = fixed_lengths(self.config.insert_size, len(offsets))
        else:
            lengths = insert_lengths(
                self.config.insert_size, self.config.read_length, len(offsets), context.rng
            )
        return [Fragment(o, l) for o, l in zip(offsets, lengths)]


class PairedEndDriver(_InsertDriver):
    mode = Mode.PE


class MatePairDriver(_InsertDriver):
    mode = Mode.MP
