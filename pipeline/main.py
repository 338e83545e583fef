# pipeline/main.py
#
# Import orchestrator: spreadsheet exports -> validated staging -> DuckDB.
#
#   1. Parse the five CSV exports in parallel (IO-bound, ThreadPoolExecutor).
#   2. Validate in dependency order: producers, properties, crops, harvests,
#      then plantings, which need the ids of all four.
#   3. Write Parquet staging files.
#   4. Build the DuckDB file atomically and log the row count of each table.
#
# Invariant: the DuckDB file is replaced only after every step succeeded.
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import polars as pl

from pipeline.config import ImportConfig, load_config
from pipeline.log import log
from pipeline.output.build_duckdb import build_duckdb, validate_tables
from pipeline.sources.registry.parse import SOURCE_COLUMNS, parse_source
from pipeline.sources.registry.validate import (
    validate_crops,
    validate_harvests,
    validate_plantings,
    validate_producers,
    validate_properties,
)
from pipeline.staging.parquet_writer import write_parquet


def run_import(config: ImportConfig) -> Path:
    """Run the full import and return the path of the built DuckDB file."""
    log(f"Reading exports from {config.raw_dir}...")
    parsed = _parse_sources(config)

    log("Validating...")
    producers = validate_producers(parsed["producers"])
    properties = validate_properties(parsed["properties"], producers)
    crops = validate_crops(parsed["crops"])
    harvests = validate_harvests(parsed["harvests"])
    property_crops = validate_plantings(parsed["plantings"], producers, properties, harvests, crops)

    log("Writing staging parquets...")
    staging = {
        "producers": producers,
        "properties": properties,
        "crops": crops,
        "harvests": harvests,
        "property_crops": property_crops,
    }
    for stem, df in staging.items():
        write_parquet(df, config.staging_dir / f"{stem}.parquet")

    log("Building DuckDB...")
    output_path = build_duckdb(config.staging_dir, config.duckdb_output_path)
    for table, count in sorted(validate_tables(output_path).items()):
        log(f"  {table}: {count:,} rows")
    log(f"Done. DuckDB written to: {output_path}")
    return output_path


def _parse_sources(config: ImportConfig) -> dict[str, pl.DataFrame]:
    """Parse every export; an error in any source aborts the import."""
    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        futures = {
            source: pool.submit(parse_source, config.raw_dir, source)
            for source in SOURCE_COLUMNS
        }
    parsed = {source: future.result() for source, future in futures.items()}
    for source, df in parsed.items():
        log(f"  Parsed {source}: {len(df):,} rows")
    return parsed


if __name__ == "__main__":
    run_import(load_config())
