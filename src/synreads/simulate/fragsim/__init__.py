"""
Fragment simulator.

Samples fragments from input sequences region by region and assembles
them into single-end, paired-end, mate-pair, long-read or contig records.
"""

from .config import Mode, SimConfig, get_default_config
from .errors import ConfigurationError, FormatError
from .models import Fragment, InputRecord, OutputRead, Region, RunContext
from .io_utils import ReadWriter, RecordReader, iter_records
from .modes import get_driver
from .regions import split_regions

__all__ = [
    'Mode',
    'SimConfig',
    'get_default_config',
    'ConfigurationError',
    'FormatError',
    'Fragment',
    'InputRecord',
    'OutputRead',
    'Region',
    'RunContext',
    'ReadWriter',
    'RecordReader',
    'iter_records',
    'get_driver',
    'split_regions',
]
