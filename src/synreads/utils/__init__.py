"""Utility modules for synreads."""

from synreads.utils.io import SUMMARY_COLS, save_table
from synreads.utils.logging_utils import setup_logger
from synreads.utils.validation import (
    require_positive,
    validate_file_exists,
)
