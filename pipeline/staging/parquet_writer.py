# pipeline/staging/parquet_writer.py
#
# Parquet read/write for the import staging area. The rest of the pipeline
# never calls polars file I/O directly.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write df to path, creating parent directories as needed.

    Returns:
        path, for call-chain convenience.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path


def read_parquet(path: Path) -> pl.DataFrame:
    """Raises FileNotFoundError when path does not exist."""
    return pl.read_parquet(path)
