"""
Region splitting for long input sequences.

Very long sequences (chromosomes) are cut into overlapping windows so that
fragment slicing never works on the whole sequence at once. Consecutive
windows overlap by a margin at least as long as the widest fragment anchor,
so no fragment starting inside a window's nominal span is truncated at its
boundary. Fragments are not deduplicated across the overlaps.
"""

from typing import Iterator, List, Tuple

from .config import SimConfig
from .models import InputRecord, Region


def region_bounds(
    total_length: int,
    region_length: int,
    margin: int,
) -> List[Tuple[int, int]]:
    """
    Compute [start, end) windows covering a sequence.

    Args:
        total_length: Sequence length L
        region_length: Nominal window length R
        margin: Overlap m added to every non-terminal window

    Returns:
        List of (start, end) pairs in ascending order
    """
    if total_length <= region_length:
        return [(0, total_length)]

    bounds = []
    start = 0
    while start + region_length + margin < total_length:
        bounds.append((start, start + region_length + margin))
        start += region_length
    bounds.append((start, total_length))
    return bounds


def split_regions(record: InputRecord, config: SimConfig) -> Iterator[Region]:
    """Yield the regions of one input record, in sequence order."""
    seq = record.sequence
    qual = record.quality

    if record.length <= config.region_length:
        yield Region(sequence=seq, quality=qual, base_offset=0)
        return

    for start, end in region_bounds(record.length, config.region_length, config.region_margin):
        yield Region(
            sequence=seq[start:end],
            quality=qual[start:end] if qual is not None else None,
            base_offset=start,
        )
