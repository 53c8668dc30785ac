"""
Offset and length sampling.

Offsets:
- random: uniform draws over every start with room for the anchor, sorted
- systematic: fixed step, deterministic, starting at 0

Lengths:
- fixed: every fragment is exactly the anchor length
- long read: negative binomial with mean ~read_length (right-skewed)
- insert size: normal around insert_size, never shorter than one read
- contig fuzz: negative binomial shifted by -400, applied to tile gaps
"""

from typing import List

import numpy as np

from .config import (
    CONTIG_FUZZ_OFFSET,
    CONTIG_FUZZ_P,
    CONTIG_FUZZ_SHAPE,
    INSERT_SD_RATIO,
    LONG_READ_SHAPE,
)


# =============================================================================
# Offsets
# =============================================================================

def random_offsets(
    region_length: int,
    anchor_length: int,
    count: int,
    rng: np.random.Generator,
) -> List[int]:
    """
    Draw sorted uniform start positions.

    Args:
        region_length: Length of the region being sampled
        anchor_length: Span each offset must have room for
        count: Number of offsets
        rng: Random generator

    Returns:
        Ascending offsets in [0, region_length - anchor_length]
    """
    if count <= 0:
        return []
    offsets = rng.integers(0, region_length - anchor_length, size=count, endpoint=True)
    offsets.sort()
    return offsets.tolist()


def systematic_offsets(
    region_length: int,
    anchor_length: int,
    count: int,
) -> List[int]:
    """Evenly spaced offsets 0, step, 2*step, ... with step = floor(span / count)."""
    if count <= 0:
        return []
    step = (region_length - anchor_length) // count
    return [i * step for i in range(count)]


def sample_offsets(
    region_length: int,
    anchor_length: int,
    count: int,
    rng: np.random.Generator,
    systematic: bool = False,
) -> List[int]:
    """Dispatch to systematic or random placement."""
    if region_length < anchor_length:
        raise ValueError(
            f"Region of {region_length}bp cannot hold an anchor of {anchor_length}bp"
        )
    if systematic:
        return systematic_offsets(region_length, anchor_length, count)
    return random_offsets(region_length, anchor_length, count, rng)


# =============================================================================
# Lengths
# =============================================================================

def fixed_lengths(anchor_length: int, count: int) -> List[int]:
    return [anchor_length] * max(count, 0)


def long_read_lengths(
    read_length: int,
    count: int,
    rng: np.random.Generator,
) -> List[int]:
    """
    Negative-binomial read lengths with mean close to read_length.

    Shape 5 and success probability 5/read_length give most reads near the
    mean, a long right tail, and some mass near zero.
    """
    if count <= 0:
        return []
    p = min(1.0, LONG_READ_SHAPE / read_length)
    return rng.negative_binomial(LONG_READ_SHAPE, p, size=count).tolist()


def insert_lengths(
    insert_size: int,
    read_length: int,
    count: int,
    rng: np.random.Generator,
) -> List[int]:
    """Normal insert sizes (sd = 12% of mean), floored and clamped to read_length."""
    if count <= 0:
        return []
    draws = np.floor(rng.normal(insert_size, INSERT_SD_RATIO * insert_size, size=count))
    return np.maximum(draws.astype(np.int64), read_length).tolist()


def contig_fuzz(rng: np.random.Generator) -> int:
    """One tiling fuzz value: mostly small, floor at -400, long positive tail."""
    return int(rng.negative_binomial(CONTIG_FUZZ_SHAPE, CONTIG_FUZZ_P)) - CONTIG_FUZZ_OFFSET


def fuzz_tile_length(start: int, gap: int, seq_end: int, fuzz: int) -> int:
    """
    Apply a fuzz value to a tile spanning `gap` bases from `start`.

    A tile that would shrink below one base is halved instead; a tile that
    would run past `seq_end` keeps its unfuzzed length.
    """
    length = gap - fuzz
    if length < 1:
        return gap // 2
    if start + length > seq_end:
        return gap
    return length
