# pipeline/config.py
#
# Import configuration loaded from environment variables.
#
#   - Frozen dataclass; pydantic stays in the API layer.
#   - Paths default to pipeline/data relative to this file, so a fresh checkout
#     can run the import after dropping CSVs into pipeline/data/raw.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class ImportConfig:
    """Immutable import configuration.

    Invariant: raw_dir, staging_dir and output_dir all live under data_dir.
    """

    data_dir: Path
    duckdb_output_path: Path
    max_workers: int = 5

    @property
    def raw_dir(self) -> Path:
        """Directory holding the spreadsheet exports (CSV)."""
        return self.data_dir / "raw"

    @property
    def staging_dir(self) -> Path:
        """Directory for cleaned Parquet staging files."""
        return self.data_dir / "staging"

    @property
    def output_dir(self) -> Path:
        return self.data_dir / "output"


def load_config() -> ImportConfig:
    """Build ImportConfig from IMPORT_DATA_DIR and DUCKDB_OUTPUT_PATH."""
    data_dir = Path(os.environ.get("IMPORT_DATA_DIR", str(_PIPELINE_DIR / "data")))
    duckdb_output_path = Path(
        os.environ.get(
            "DUCKDB_OUTPUT_PATH",
            str(data_dir / "output" / "agro_registry.duckdb"),
        )
    )
    return ImportConfig(
        data_dir=data_dir,
        duckdb_output_path=duckdb_output_path,
        max_workers=int(os.environ.get("IMPORT_MAX_WORKERS", "5")),
    )
