# tests/pipeline/test_build_atomico.py
#
# Atomic DuckDB build from staging parquets.
#
# Strategy: write minimal staging parquets shaped like validate.py output, run
# build_duckdb into tmp_path and inspect the resulting file. A duplicated
# primary key forces a ConstraintException for the failure cases.
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import duckdb
import polars as pl
import pytest

from pipeline.output.build_duckdb import build_duckdb, validate_tables
from pipeline.sources.registry.validate import (
    CROPS_SCHEMA,
    HARVESTS_SCHEMA,
    PRODUCERS_SCHEMA,
    PROPERTIES_SCHEMA,
)

NOW = datetime(2025, 1, 1, 12, 0, 0)


def _write_parquet(directory: Path, name: str, df: pl.DataFrame) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    df.write_parquet(directory / f"{name}.parquet")


def _producers_df(ids: list[str] | None = None) -> pl.DataFrame:
    ids = ids or ["p1"]
    return pl.DataFrame(
        [
            {
                "id": pid,
                "document_type": "CPF",
                "document": "52998224725",
                "name": f"Produtor {n}",
                "created_at": NOW,
                "updated_at": NOW,
            }
            for n, pid in enumerate(ids)
        ],
        schema=PRODUCERS_SCHEMA,
    )


def _properties_df() -> pl.DataFrame:
    return pl.DataFrame(
        [
            {
                "id": "f1",
                "producer_id": "p1",
                "name": "Fazenda Uniao",
                "city": "Rio Verde",
                "state": "GO",
                "total_area_ha": "1250.75",
                "arable_area_ha": "800.50",
                "vegetation_area_ha": "450.25",
                "cep": None,
                "complement": None,
                "latitude": "-17.797",
                "longitude": None,
                "created_at": NOW,
                "updated_at": NOW,
            }
        ],
        schema=PROPERTIES_SCHEMA,
    )


def _create_minimal_staging(staging_dir: Path) -> None:
    _write_parquet(staging_dir, "producers", _producers_df())
    _write_parquet(staging_dir, "properties", _properties_df())
    _write_parquet(
        staging_dir,
        "crops",
        pl.DataFrame([{"id": "c1", "name": "Soja", "created_at": NOW}], schema=CROPS_SCHEMA),
    )
    _write_parquet(
        staging_dir,
        "harvests",
        pl.DataFrame(
            [
                {
                    "id": "h1",
                    "label": "Safra 2024",
                    "year": 2024,
                    "start_date": date(2024, 1, 1),
                    "end_date": date(2024, 12, 31),
                    "created_at": NOW,
                    "updated_at": NOW,
                }
            ],
            schema=HARVESTS_SCHEMA,
        ),
    )


def test_build_creates_final_duckdb(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    _create_minimal_staging(staging)
    output = tmp_path / "output" / "test.duckdb"

    result = build_duckdb(staging, output)

    assert result == output
    assert output.exists()
    assert not output.with_suffix(".tmp.duckdb").exists()


def test_build_output_contains_all_tables(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    _create_minimal_staging(staging)
    output = tmp_path / "output" / "test.duckdb"

    build_duckdb(staging, output)

    counts = validate_tables(output)
    assert counts == {
        "crops": 1,
        "harvests": 1,
        "producers": 1,
        "properties": 1,
        "property_crops": 0,
    }


def test_build_casts_decimal_strings_without_rounding(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    _create_minimal_staging(staging)
    output = tmp_path / "output" / "test.duckdb"

    build_duckdb(staging, output)

    conn = duckdb.connect(str(output), read_only=True)
    try:
        row = conn.execute(
            "SELECT total_area_ha, arable_area_ha, latitude, deleted_at FROM properties"
        ).fetchone()
        harvest = conn.execute("SELECT start_date, end_date FROM harvests").fetchone()
    finally:
        conn.close()

    assert row is not None
    assert row[0] == Decimal("1250.75")
    assert row[1] == Decimal("800.50")
    assert row[2] == Decimal("-17.797000")
    assert row[3] is None
    assert harvest == (date(2024, 1, 1), date(2024, 12, 31))


def test_build_removes_tmp_on_failure(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    output = tmp_path / "output" / "test.duckdb"
    _write_parquet(staging, "producers", _producers_df(["dup", "dup"]))

    with pytest.raises(duckdb.ConstraintException):
        build_duckdb(staging, output)

    assert not output.with_suffix(".tmp.duckdb").exists()
    assert not output.exists()


def test_build_does_not_overwrite_existing_output_on_failure(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    output = tmp_path / "output" / "test.duckdb"
    _create_minimal_staging(staging)
    build_duckdb(staging, output)
    mtime_before = output.stat().st_mtime

    staging2 = tmp_path / "staging2"
    _write_parquet(staging2, "producers", _producers_df(["dup", "dup"]))

    with pytest.raises(duckdb.ConstraintException):
        build_duckdb(staging2, output)

    assert output.exists()
    assert output.stat().st_mtime == pytest.approx(mtime_before, abs=1e-3)
    assert validate_tables(output)["producers"] == 1


def test_build_replaces_stale_tmp_file(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    _create_minimal_staging(staging)
    output = tmp_path / "output" / "test.duckdb"
    output.parent.mkdir(parents=True)
    output.with_suffix(".tmp.duckdb").write_bytes(b"lixo de uma execucao anterior")

    build_duckdb(staging, output)

    assert validate_tables(output)["producers"] == 1
