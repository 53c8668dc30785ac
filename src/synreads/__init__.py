"""
synreads: synthetic sequencing reads from reference sequences.

This package provides tools for:
- Single-end and paired-end short read simulation
- Mate-pair libraries with outward-facing mates
- PacBio-style long reads with a negative-binomial length profile
- Tiled contig sampling with randomized overlaps and gaps
"""

__version__ = "0.3.0"
__author__ = "synreads Team"
