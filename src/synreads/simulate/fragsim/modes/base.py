"""
Mode driver base module

Shared statistics and the region-level generation loop used by every mode.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List

from ..assembler import FragmentAssembler
from ..config import Mode, SimConfig
from ..models import Fragment, OutputRead, Region, RunContext

logger = logging.getLogger(__name__)


@dataclass
class ModeStats:
    """Per-driver counters, accumulated over every region of a run."""
    regions: int = 0
    regions_skipped: int = 0
    fragments_planned: int = 0
    fragments_emitted: int = 0
    fragments_skipped: int = 0
    reads: int = 0
    bases: int = 0

    @property
    def mean_read_length(self) -> float:
        return self.bases / self.reads if self.reads else 0.0

    def summary(self) -> str:
        return (
            f"{self.fragments_emitted} fragments -> {self.reads} reads, "
            f"{self.bases}bp (mean {self.mean_read_length:.0f}bp), "
            f"skipped {self.fragments_skipped} fragments / "
            f"{self.regions_skipped} of {self.regions} regions"
        )


class BaseModeDriver(ABC):
    """Plans fragments for a region and streams the assembled reads."""

    mode: Mode

    def __init__(self, config: SimConfig):
        if config.mode is not self.mode:
            raise ValueError(
                f"{type(self).__name__} handles mode '{self.mode.value}', "
                f"got '{config.mode.value}'"
            )
        self.config = config
        self.assembler = FragmentAssembler(config)
        self.stats = ModeStats()

    @property
    def anchor_length(self) -> int:
        return self.config.anchor_length

    def fragment_count(self, region: Region) -> int:
        return self.config.fragment_count(region.length)

    @abstractmethod
    def plan(self, region: Region, context: RunContext) -> List[Fragment]:
        """Sample the fragments of one region, in ascending offset order."""

    def generate(self, region: Region, context: RunContext) -> Iterator[OutputRead]:
        """
        Lazily yield the reads of one region.

        Regions shorter than the anchor length yield nothing.
        """
        self.stats.regions += 1
        if region.length < self.anchor_length:
            self.stats.regions_skipped += 1
            logger.debug(
                f"Skipped region at {region.base_offset} "
                f"({region.length}bp < {self.anchor_length}bp anchor)"
            )
            return

        fragments = self.plan(region, context)
        self.stats.fragments_planned += len(fragments)

        for fragment in fragments:
            reads = self.assembler.assemble(region, fragment, context)
            if not reads:
                self.stats.fragments_skipped += 1
                continue
            self.stats.fragments_emitted += 1
            self.stats.reads += len(reads)
            self.stats.bases += sum(len(r) for r in reads)
            yield from reads
