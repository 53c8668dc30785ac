"""
Contig tiling mode

Tiles a region with contigs instead of sampling it to a depth:
1. draw region_length / read_length uniform anchors plus one extra anchor
2. sort them; each anchor starts a tile reaching toward the next anchor
3. every tile length is fuzzed (overlap, abutment or gap with its neighbour)
4. the last tile is fuzzed against the region end, and dropped when its
   length is within a few bases of the previous tile's
"""

from typing import List

from ..config import CONTIG_MIN_TAIL_DELTA, Mode
from ..models import Fragment, Region, RunContext
from ..sampling import contig_fuzz, fuzz_tile_length, random_offsets
from .base import BaseModeDriver


class ContigDriver(BaseModeDriver):
    """FASTA contig tiles"""

    mode = Mode.CONTIG

    def anchors(self, region: Region, context: RunContext) -> List[int]:
        """Sorted tile start positions (random placement only)."""
        count = self.fragment_count(region)
        span = region.length - self.anchor_length
        anchors = random_offsets(region.length, self.anchor_length, count, context.rng)
        anchors.append(int(context.rng.integers(0, span, endpoint=True)))
        anchors.sort()
        return anchors

    def plan(self, region: Region, context: RunContext) -> List[Fragment]:
        seq_end = region.length
        anchors = self.anchors(region, context)

        tiles = []
        for start, following in zip(anchors, anchors[1:]):
            length = fuzz_tile_length(start, following - start, seq_end, contig_fuzz(context.rng))
            tiles.append(Fragment(start, length))

        last = anchors[-1]
        length = fuzz_tile_length(last, seq_end - last, seq_end, contig_fuzz(context.rng))
        tiles.append(Fragment(last, length))

        if len(tiles) >= 2 and abs(tiles[-1].length - tiles[-2].length) < CONTIG_MIN_TAIL_DELTA:
            tiles.pop()
        return tiles
