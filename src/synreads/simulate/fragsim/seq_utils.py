"""
Sequence helper functions
"""

from typing import Optional, Tuple

from .config import FLAT_QUALITY_SYMBOL

_COMPLEMENT = {
    'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G',
    'a': 't', 't': 'a', 'g': 'c', 'c': 'g',
    'N': 'N', 'n': 'n',
    'R': 'Y', 'Y': 'R', 'S': 'S', 'W': 'W',
    'K': 'M', 'M': 'K', 'B': 'V', 'V': 'B',
    'D': 'H', 'H': 'D',
    'r': 'y', 'y': 'r', 's': 's', 'w': 'w',
    'k': 'm', 'm': 'k', 'b': 'v', 'v': 'b',
    'd': 'h', 'h': 'd',
}
_COMPLEMENT_TABLE = str.maketrans(_COMPLEMENT)


def complement(seq: str) -> str:
    """Complement IUPAC bases; other symbols are left unchanged."""
    return seq.translate(_COMPLEMENT_TABLE)


def reverse_complement(seq: str) -> str:
    return complement(seq)[::-1]


def reverse_complement_read(
    seq: str,
    qual: Optional[str],
) -> Tuple[str, Optional[str]]:
    """Reverse-complement a sequence and reverse its quality in step."""
    return reverse_complement(seq), (qual[::-1] if qual is not None else None)


def flat_quality(length: int, symbol: str = FLAT_QUALITY_SYMBOL) -> str:
    """High-confidence quality string for sequence-only input."""
    return symbol * length

