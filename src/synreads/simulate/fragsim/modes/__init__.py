"""
Mode drivers

One driver per sequencing mode:
- se: single-end short reads
- pe / mp: paired-end and mate-pair reads
- pacbio: long reads
- contig: FASTA contig tiles
"""

from typing import Dict, Type

from ..config import Mode, SimConfig
from .base import BaseModeDriver, ModeStats
from .contig import ContigDriver
from .paired import MatePairDriver, PairedEndDriver
from .single import LongReadDriver, SingleEndDriver

DRIVERS: Dict[Mode, Type[BaseModeDriver]] = {
    Mode.SE: SingleEndDriver,
    Mode.PE: PairedEndDriver,
    Mode.MP: MatePairDriver,
    Mode.PACBIO: LongReadDriver,
    Mode.CONTIG: ContigDriver,
}


def get_driver(config: SimConfig) -> BaseModeDriver:
    """Instantiate the driver for the configured mode."""
    return DRIVERS[config.mode](config)


__all__ = [
    'BaseModeDriver', 'ModeStats',
    'SingleEndDriver', 'LongReadDriver',
    'PairedEndDriver', 'MatePairDriver',
    'ContigDriver',
    'DRIVERS', 'get_driver',
]
