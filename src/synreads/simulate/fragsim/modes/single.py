"""
Single-read modes

- se: fixed-length reads
- pacbio: negative-binomial read lengths (fixed when systematic)
"""

from typing import List

from ..config import Mode
from ..models import Fragment, Region, RunContext
from ..sampling import fixed_lengths, long_read_lengths, sample_offsets
from .base import BaseModeDriver


class SingleEndDriver(BaseModeDriver):
    """Single-end short reads"""

    mode = Mode.SE

    def plan(self, region: Region, context: RunContext) -> List[Fragment]:
        count = self.fragment_count(region)
        offsets = sample_offsets(
            region.length, self.anchor_length, count, context.rng,
            systematic=self.config.effective_systematic,
        )
        lengths = fixed_lengths(self.config.read_length, len(offsets))
        return [Fragment(o, l) for o, l in zip(offsets, lengths)]


class LongReadDriver(BaseModeDriver):
    """PacBio-style long reads"""

    mode = Mode.PACBIO

    def plan(self, region: Region, context: RunContext) -> List[Fragment]:
        count = self.fragment_count(region)
        systematic = self.config.effective_systematic
        offsets = sample_offsets(
            region.length, self.anchor_length, count, context.rng,
            systematic=systematic,
        )
        if systematic:
            lengths = fixed_lengths(self.config.read_length, len(offsets))
        else:
            lengths = long_read_lengths(self.config.read_length, len(offsets), context.rng)
        return [Fragment(o, l) for o, l in zip(offsets, lengths)]
