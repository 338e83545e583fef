# api/infrastructure/repositories/duckdb_property_crop_repo.py
from __future__ import annotations

import duckdb

from api.domain.pagination import Page, PageRequest
from api.domain.property_crop.entities import PropertyCrop

from .duckdb_paging import agora, fetch_page, novo_id

_SELECT = """
    SELECT pc.id, pc.property_id, pc.harvest_id, pc.crop_id, pc.created_at,
           p.name, h.label, c.name
    FROM property_crops pc
    LEFT JOIN properties p ON pc.property_id = p.id
    LEFT JOIN harvests h ON pc.harvest_id = h.id
    LEFT JOIN crops c ON pc.crop_id = c.id
    WHERE pc.deleted_at IS NULL
"""

_ORDENAVEIS = {"created_at": "pc.created_at"}


class DuckDBPropertyCropRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def create(self, property_id: str, harvest_id: str, crop_id: str) -> PropertyCrop:
        link_id = novo_id()
        with self._conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO property_crops (id, property_id, harvest_id, crop_id, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                [link_id, property_id, harvest_id, crop_id, agora()],
            )
        criado = self.find_by_id(link_id)
        if criado is None:
            raise RuntimeError(f"Plantio {link_id} nao encontrado apos INSERT")
        return criado

    def find_by_id(self, id: str) -> PropertyCrop | None:
        with self._conn.cursor() as cur:
            row = cur.execute(f"{_SELECT} AND pc.id = ?", [id]).fetchone()  # noqa: S608
        return self._hidratar(row) if row else None

    def find_link(self, property_id: str, harvest_id: str, crop_id: str) -> PropertyCrop | None:
        with self._conn.cursor() as cur:
            row = cur.execute(
                f"{_SELECT} AND pc.property_id = ? AND pc.harvest_id = ? AND pc.crop_id = ?",  # noqa: S608
                [property_id, harvest_id, crop_id],
            ).fetchone()
        return self._hidratar(row) if row else None

    def find_all(self, request: PageRequest) -> Page[PropertyCrop]:
        rows, total = fetch_page(
            self._conn,
            select_sql=_SELECT,
            count_sql="SELECT count(*) FROM property_crops WHERE deleted_at IS NULL",
            params=[],
            request=request,
            sortable=_ORDENAVEIS,
            tiebreak="pc.id",
        )
        return Page.of([self._hidratar(r) for r in rows], total, request)

    def soft_delete(self, id: str) -> None:
        with self._conn.cursor() as cur:
            cur.execute(
                "UPDATE property_crops SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                [agora(), id],
            )

    def _hidratar(self, row: tuple) -> PropertyCrop:  # type: ignore[type-arg]
        return PropertyCrop(
            id=str(row[0]),
            property_id=str(row[1]),
            harvest_id=str(row[2]),
            crop_id=str(row[3]),
            created_at=row[4],
            property_name=row[5],
            harvest_label=row[6],
            crop_name=row[7],
        )
