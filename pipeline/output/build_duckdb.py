# pipeline/output/build_duckdb.py
#
# Atomic DuckDB build: staging Parquet files -> final .duckdb file.
#
#   - The build writes to <output>.tmp.duckdb and renames it over the final
#     path only after every table loaded. On failure the tmp file is removed
#     and the previous output stays untouched.
#   - The schema comes from the API's schema.sql, so the API can open the
#     imported file directly (apply_schema is idempotent).
#   - Each staging column is CAST to its table column type, which turns the
#     decimal strings of the areas into DECIMAL(12,2) without float rounding.
#
# Invariant: output_path is replaced only by a fully built database.
from __future__ import annotations

from pathlib import Path

import duckdb

from api.infrastructure.duckdb_connection import apply_schema
from pipeline.log import log

# Staging parquet stem -> DuckDB table. Stems without a file are skipped.
STAGING_TO_TABLE: dict[str, str] = {
    "producers": "producers",
    "properties": "properties",
    "crops": "crops",
    "harvests": "harvests",
    "property_crops": "property_crops",
}


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Build the DuckDB database atomically from staging Parquet files.

    Raises:
        Any duckdb or filesystem error, after removing the tmp file.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Stale tmp file from a previous crashed run.
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            apply_schema(conn)
            _load_staging_data(conn, staging_dir)
        finally:
            conn.close()

        if output_path.exists():
            output_path.unlink()
        tmp_path.rename(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    """Insert each existing staging Parquet into its table.

    Only columns present in both the table and the parquet are copied; columns
    left out take their schema default (deleted_at stays NULL).
    """
    loaded = 0
    for file_stem, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_dir / f"{file_stem}.parquet"
        if not parquet_path.exists():
            continue

        log(f"  Loading {file_stem} -> {table_name}...")

        table_cols = conn.execute(
            "SELECT column_name, data_type FROM information_schema.columns "
            "WHERE table_name = ? ORDER BY ordinal_position",
            [table_name],
        ).fetchall()

        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(
                f"SELECT name FROM parquet_schema('{posix_path}')"  # noqa: S608
            ).fetchall()
        }

        shared = [(name, data_type) for name, data_type in table_cols if name in parquet_cols]
        if not shared:
            continue

        # S608 noqa: table and column names come from STAGING_TO_TABLE and
        # information_schema, the path from staging_dir; none from CSV contents.
        cols_sql = ", ".join(name for name, _ in shared)
        casts_sql = ", ".join(f"CAST({name} AS {data_type})" for name, data_type in shared)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {casts_sql} FROM read_parquet('{posix_path}')"
        )
        loaded += 1

    log(f"  DuckDB: {loaded} tables loaded")


def validate_tables(output_path: Path) -> dict[str, int]:
    """Open the finished DuckDB read-only and return row counts per table."""
    conn = duckdb.connect(str(output_path), read_only=True)
    try:
        counts: dict[str, int] = {}
        for (table_name,) in conn.execute("SHOW TABLES").fetchall():
            row = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()  # noqa: S608
            counts[table_name] = int(row[0]) if row else 0
        return counts
    finally:
        conn.close()
