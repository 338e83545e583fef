# api/infrastructure/repositories/duckdb_property_repo.py
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import duckdb

from api.domain.pagination import Page, PageRequest
from api.domain.property.entities import NewProperty, Property

from .duckdb_paging import agora, fetch_page, novo_id

_COLUNAS = (
    "id, producer_id, name, city, state, total_area_ha, arable_area_ha, "
    "vegetation_area_ha, cep, complement, latitude, longitude, created_at, updated_at"
)

_ORDENAVEIS = {
    "created_at": "created_at",
    "updated_at": "updated_at",
    "name": "name",
    "city": "city",
    "state": "state",
    "total_area_ha": "total_area_ha",
}


_ESCALA_AREA = Decimal("0.01")
_ESCALA_COORDENADA = Decimal("0.000001")


def _decimal(valor: object) -> Decimal | None:
    return Decimal(str(valor)) if valor is not None else None


def _na_escala(p: Property) -> Property:
    """Mesma escala das colunas DECIMAL(12,2) e DECIMAL(10,6)."""
    return replace(
        p,
        total_area_ha=p.total_area_ha.quantize(_ESCALA_AREA),
        arable_area_ha=p.arable_area_ha.quantize(_ESCALA_AREA),
        vegetation_area_ha=p.vegetation_area_ha.quantize(_ESCALA_AREA),
        latitude=p.latitude.quantize(_ESCALA_COORDENADA) if p.latitude is not None else None,
        longitude=p.longitude.quantize(_ESCALA_COORDENADA) if p.longitude is not None else None,
    )


class DuckDBPropertyRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def create(self, data: NewProperty) -> Property:
        momento = agora()
        property_ = _na_escala(Property(
            id=novo_id(),
            producer_id=data.producer_id,
            name=data.name,
            city=data.city,
            state=data.state,
            total_area_ha=Decimal(data.total_area_ha),
            arable_area_ha=Decimal(data.arable_area_ha),
            vegetation_area_ha=Decimal(data.vegetation_area_ha),
            cep=data.cep,
            complement=data.complement,
            latitude=_decimal(data.latitude),
            longitude=_decimal(data.longitude),
            created_at=momento,
            updated_at=momento,
        ))
        with self._conn.cursor() as cur:
            cur.execute(
                f"INSERT INTO properties ({_COLUNAS}) "  # noqa: S608
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                [
                    property_.id, property_.producer_id, property_.name, property_.city,
                    property_.state, property_.total_area_ha, property_.arable_area_ha,
                    property_.vegetation_area_ha, property_.cep, property_.complement,
                    property_.latitude, property_.longitude,
                    property_.created_at, property_.updated_at,
                ],
            )
        return property_

    def update(self, property_: Property) -> Property:
        atualizado = _na_escala(replace(property_, updated_at=agora()))
        with self._conn.cursor() as cur:
            cur.execute(
                """
                UPDATE properties
                SET name = ?, city = ?, state = ?, total_area_ha = ?, arable_area_ha = ?,
                    vegetation_area_ha = ?, cep = ?, complement = ?, latitude = ?,
                    longitude = ?, updated_at = ?
                WHERE id = ? AND deleted_at IS NULL
                """,
                [
                    atualizado.name, atualizado.city, atualizado.state,
                    atualizado.total_area_ha, atualizado.arable_area_ha,
                    atualizado.vegetation_area_ha, atualizado.cep, atualizado.complement,
                    atualizado.latitude, atualizado.longitude, atualizado.updated_at,
                    atualizado.id,
                ],
            )
        return atualizado

    def find_by_id(self, id: str) -> Property | None:
        with self._conn.cursor() as cur:
            row = cur.execute(
                f"SELECT {_COLUNAS} FROM properties WHERE id = ? AND deleted_at IS NULL",  # noqa: S608
                [id],
            ).fetchone()
        return self._hidratar(row) if row else None

    def find_all(self, request: PageRequest) -> Page[Property]:
        rows, total = fetch_page(
            self._conn,
            select_sql=f"SELECT {_COLUNAS} FROM properties WHERE deleted_at IS NULL",  # noqa: S608
            count_sql="SELECT count(*) FROM properties WHERE deleted_at IS NULL",
            params=[],
            request=request,
            sortable=_ORDENAVEIS,
            tiebreak="id",
        )
        return Page.of([self._hidratar(r) for r in rows], total, request)

    def soft_delete(self, id: str) -> None:
        with self._conn.cursor() as cur:
            cur.execute(
                "UPDATE properties SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                [agora(), id],
            )

    def _hidratar(self, row: tuple) -> Property:  # type: ignore[type-arg]
        return Property(
            id=str(row[0]),
            producer_id=str(row[1]),
            name=str(row[2]),
            city=str(row[3]),
            state=str(row[4]),
            total_area_ha=Decimal(str(row[5])),
            arable_area_ha=Decimal(str(row[6])),
            vegetation_area_ha=Decimal(str(row[7])),
            cep=str(row[8]) if row[8] else None,
            complement=str(row[9]) if row[9] else None,
            latitude=_decimal(row[10]),
            longitude=_decimal(row[11]),
            created_at=row[12],
            updated_at=row[13],
        )
