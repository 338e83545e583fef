# api/infrastructure/repositories/duckdb_crop_repo.py
from __future__ import annotations

import duckdb

from api.domain.crop.entities import Crop
from api.domain.pagination import Page, PageRequest

from .duckdb_paging import agora, fetch_page, novo_id

_ORDENAVEIS = {"name": "name", "created_at": "created_at"}


class DuckDBCropRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def create(self, name: str) -> Crop:
        crop = Crop(id=novo_id(), name=name, created_at=agora())
        with self._conn.cursor() as cur:
            cur.execute(
                "INSERT INTO crops (id, name, created_at) VALUES (?, ?, ?)",
                [crop.id, crop.name, crop.created_at],
            )
        return crop

    def find_by_id(self, id: str) -> Crop | None:
        return self._buscar_um("id = ?", id)

    def find_by_name(self, name: str) -> Crop | None:
        return self._buscar_um("name = ?", name)

    def find_all(self, request: PageRequest) -> Page[Crop]:
        rows, total = fetch_page(
            self._conn,
            select_sql="SELECT id, name, created_at FROM crops",
            count_sql="SELECT count(*) FROM crops",
            params=[],
            request=request,
            sortable=_ORDENAVEIS,
            tiebreak="id",
        )
        return Page.of([Crop(id=str(r[0]), name=str(r[1]), created_at=r[2]) for r in rows], total, request)

    def _buscar_um(self, condicao: str, valor: str) -> Crop | None:
        with self._conn.cursor() as cur:
            row = cur.execute(
                f"SELECT id, name, created_at FROM crops WHERE {condicao}",  # noqa: S608
                [valor],
            ).fetchone()
        return Crop(id=str(row[0]), name=str(row[1]), created_at=row[2]) if row else None
