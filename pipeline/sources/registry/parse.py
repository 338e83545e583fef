# pipeline/sources/registry/parse.py
#
# Parse the registry spreadsheet exports (CSV) into string-typed DataFrames.
#
#   - Every column is read as a string (infer_schema_length=0). Typing and
#     validation happen in validate.py, with the same domain rules the API uses.
#   - Header names are normalised (stripped, lowercase); unknown columns are
#     dropped and missing ones come back as all-null columns.
#   - Cells are stripped; empty cells are null.
#
# Invariant: the output columns are exactly SOURCE_COLUMNS[source], in order.
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import polars as pl

from pipeline.log import log

SOURCE_COLUMNS: dict[str, tuple[str, ...]] = {
    "producers": ("document", "name"),
    "properties": (
        "producer_document",
        "name",
        "city",
        "state",
        "total_area_ha",
        "arable_area_ha",
        "vegetation_area_ha",
        "cep",
        "complement",
        "latitude",
        "longitude",
    ),
    "crops": ("name",),
    "harvests": ("label", "year", "start_date", "end_date"),
    "plantings": ("producer_document", "property_name", "harvest_label", "crop_name"),
}


def empty_frame(columns: Sequence[str]) -> pl.DataFrame:
    return pl.DataFrame({c: pl.Series(c, [], dtype=pl.Utf8) for c in columns})


def parse_registry_csv(path: Path, columns: Sequence[str]) -> pl.DataFrame:
    """Read a comma-delimited UTF-8 CSV keeping only ``columns``.

    A missing file yields an empty frame: every export is optional.
    """
    if not path.exists():
        log(f"  {path.name} not found, skipping")
        return empty_frame(columns)

    raw = pl.read_csv(
        path,
        separator=",",
        encoding="utf8",
        infer_schema_length=0,
        null_values=[""],
        truncate_ragged_lines=True,
    )
    raw = raw.rename({col: col.strip().lower() for col in raw.columns})

    missing = [c for c in columns if c not in raw.columns]
    if missing:
        raw = raw.with_columns([pl.lit(None, dtype=pl.Utf8).alias(c) for c in missing])

    cleaned = [pl.col(c).cast(pl.Utf8).str.strip_chars().alias(c) for c in columns]
    df = raw.select(cleaned)
    return df.with_columns(
        [pl.when(pl.col(c) == "").then(None).otherwise(pl.col(c)).alias(c) for c in columns]
    )


def parse_source(raw_dir: Path, source: str) -> pl.DataFrame:
    """Parse ``<raw_dir>/<source>.csv`` with the columns declared for it."""
    return parse_registry_csv(raw_dir / f"{source}.csv", SOURCE_COLUMNS[source])
