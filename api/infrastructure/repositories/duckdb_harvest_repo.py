# api/infrastructure/repositories/duckdb_harvest_repo.py
from __future__ import annotations

from datetime import date

import duckdb

from api.domain.harvest.entities import Harvest
from api.domain.pagination import Page, PageRequest

from .duckdb_paging import agora, fetch_page, novo_id

_COLUNAS = "id, label, year, start_date, end_date, created_at, updated_at"

_ORDENAVEIS = {
    "created_at": "created_at",
    "year": "year",
    "label": "label",
    "start_date": "start_date",
}


class DuckDBHarvestRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def create(self, label: str, year: int, start_date: date, end_date: date) -> Harvest:
        momento = agora()
        harvest = Harvest(
            id=novo_id(),
            label=label,
            year=year,
            start_date=start_date,
            end_date=end_date,
            created_at=momento,
            updated_at=momento,
        )
        with self._conn.cursor() as cur:
            cur.execute(
                f"INSERT INTO harvests ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?)",  # noqa: S608
                [harvest.id, harvest.label, harvest.year, harvest.start_date,
                 harvest.end_date, harvest.created_at, harvest.updated_at],
            )
        return harvest

    def find_by_id(self, id: str) -> Harvest | None:
        with self._conn.cursor() as cur:
            row = cur.execute(
                f"SELECT {_COLUNAS} FROM harvests WHERE id = ?",  # noqa: S608
                [id],
            ).fetchone()
        return self._hidratar(row) if row else None

    def find_all(self, request: PageRequest) -> Page[Harvest]:
        rows, total = fetch_page(
            self._conn,
            select_sql=f"SELECT {_COLUNAS} FROM harvests",  # noqa: S608
            count_sql="SELECT count(*) FROM harvests",
            params=[],
            request=request,
            sortable=_ORDENAVEIS,
            tiebreak="id",
        )
        return Page.of([self._hidratar(r) for r in rows], total, request)

    def _hidratar(self, row: tuple) -> Harvest:  # type: ignore[type-arg]
        return Harvest(
            id=str(row[0]),
            label=str(row[1]),
            year=int(row[2]),
            start_date=row[3],
            end_date=row[4],
            created_at=row[5],
            updated_at=row[6],
        )
