# api/infrastructure/repositories/duckdb_reports_store.py
from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import duckdb

from api.domain.reports.store import AreaColumn


class DuckDBReportsStore:
    """ReportsStore sobre DuckDB. Um cursor por consulta: o overview chama
    os metodos em paralelo e a conexao nao pode ser compartilhada entre threads."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def count_live_properties(self) -> int:
        row = self._um("SELECT count(*) FROM properties WHERE deleted_at IS NULL")
        return int(row[0]) if row else 0

    def sum_live_property_areas(
        self, columns: Sequence[AreaColumn],
    ) -> dict[AreaColumn, Decimal | None]:
        if not columns:
            return {}
        # Nomes de coluna vem do enum AreaColumn, nunca de input do usuario
        somas = ", ".join(f"sum({AreaColumn(c).value})" for c in columns)
        row = self._um(f"SELECT {somas} FROM properties WHERE deleted_at IS NULL")  # noqa: S608
        valores = row if row else (None,) * len(columns)
        return {
            AreaColumn(c): (Decimal(str(v)) if v is not None else None)
            for c, v in zip(columns, valores)
        }

    def count_live_properties_by_state(self) -> list[tuple[str, int]]:
        return self._todos("""
            SELECT state, count(*)
            FROM properties
            WHERE deleted_at IS NULL
            GROUP BY state
        """)

    def count_live_properties_by_crop(self) -> list[tuple[str, int]]:
        return self._todos("""
            SELECT c.name, count(DISTINCT p.id)
            FROM property_crops pc
            JOIN crops c ON pc.crop_id = c.id
            JOIN properties p ON pc.property_id = p.id
            WHERE p.deleted_at IS NULL
              AND pc.deleted_at IS NULL
            GROUP BY c.name
        """)

    def _um(self, sql: str) -> tuple | None:  # type: ignore[type-arg]
        with self._conn.cursor() as cur:
            return cur.execute(sql).fetchone()

    def _todos(self, sql: str) -> list[tuple[str, int]]:
        with self._conn.cursor() as cur:
            rows = cur.execute(sql).fetchall()
        return [(str(r[0]), int(r[1])) for r in rows]
