"""Tests for region splitting."""

import pytest

from synreads.simulate.fragsim.config import SimConfig
from synreads.simulate.fragsim.models import InputRecord
from synreads.simulate.fragsim.regions import region_bounds, split_regions


class TestRegionBounds:
    """Test window computation."""

    def test_short_sequence_single_region(self):
        """Sequences up to region_length are not split."""
        assert region_bounds(1000, 200000, 180) == [(0, 1000)]
        assert region_bounds(200000, 200000, 180) == [(0, 200000)]

    def test_one_megabase(self):
        """1 Mb with 200 kb windows and a 180 bp margin gives 5 windows."""
        bounds = region_bounds(1000000, 200000, 180)

        assert bounds == [
            (0, 200180),
            (200000, 400180),
            (400000, 600180),
            (600000, 800180),
            (800000, 1000000),
        ]

        # Union covers the whole sequence
        assert bounds[0][0] == 0
        assert bounds[-1][1] == 1000000
        for (_, prev_end), (start, _) in zip(bounds, bounds[1:]):
            assert start <= prev_end
            assert prev_end - start == 180

    def test_terminal_region_takes_remainder(self):
        """The last window absorbs what would otherwise be a tiny tail."""
        bounds = region_bounds(200100, 200000, 180)
        assert bounds == [(0, 200100)]

        bounds = region_bounds(450000, 200000, 180)
        assert bounds == [(0, 200180), (200000, 400180), (400000, 450000)]


class TestSplitRegions:
    """Test region extraction from records."""

    def test_margin_by_mode(self):
        """se/pe/mp overlap by insert_size; pacbio/contig by read_length."""
        se = SimConfig(mode="se", read_length=100, coverage=1, insert_size=180)
        pacbio = SimConfig(mode="pacbio", read_length=5000, coverage=1, insert_size=180)
        assert se.region_margin == 180
        assert pacbio.region_margin == 5000

    def test_regions_slice_sequence_and_quality(self):
        """Region sequence and quality stay aligned with the record."""
        seq = "ACGT" * 300
        qual = "".join(chr(33 + (i % 40)) for i in range(len(seq)))
        record = InputRecord(id="r", sequence=seq, quality=qual)
        config = SimConfig(mode="se", read_length=50, coverage=1,
                           insert_size=20, region_length=500)

        regions = list(split_regions(record, config))

        assert [r.base_offset for r in regions] == [0, 500, 1000]
        for region in regions:
            start = region.base_offset
            assert region.sequence == seq[start:start + region.length]
            assert region.quality == qual[start:start + region.length]
        assert regions[0].length == 520
        assert regions[-1].base_offset + regions[-1].length == len(seq)

    def test_fasta_record_has_no_quality(self):
        """Sequence-only records produce regions without quality."""
        record = InputRecord(id="r", sequence="A" * 100)
        config = SimConfig(mode="se", read_length=10, coverage=1)

        regions = list(split_regions(record, config))

        assert len(regions) == 1
        assert regions[0].quality is None
        assert regions[0].base_offset == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
