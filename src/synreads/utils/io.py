"""File I/O utilities for synreads."""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

SUMMARY_COLS = ["record_id", "length", "regions", "fragments", "reads", "bases", "mean_depth"]


def save_table(
    df: pd.DataFrame,
    filepath: Union[str, Path],
    sep: str = "\t",
) -> None:
    """
    Save a DataFrame as a delimited text table.

    Args:
        df: DataFrame to save
        filepath: Output file path
        sep: Field separator (default: tab)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(filepath, sep=sep, index=False)
    logger.info(f"Saved {len(df)} rows to {filepath}")
