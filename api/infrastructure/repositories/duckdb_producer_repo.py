# api/infrastructure/repositories/duckdb_producer_repo.py
from __future__ import annotations

from dataclasses import replace

import duckdb

from api.domain.pagination import Page, PageRequest
from api.domain.producer.document import DocumentType
from api.domain.producer.entities import Producer

from .duckdb_paging import agora, fetch_page, novo_id

_COLUNAS = "id, document_type, document, name, created_at, updated_at"

_ORDENAVEIS = {
    "created_at": "created_at",
    "updated_at": "updated_at",
    "name": "name",
}


class DuckDBProducerRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def create(self, document_type: DocumentType, document: str, name: str) -> Producer:
        momento = agora()
        producer = Producer(
            id=novo_id(),
            document_type=document_type,
            document=document,
            name=name,
            created_at=momento,
            updated_at=momento,
        )
        with self._conn.cursor() as cur:
            cur.execute(
                f"INSERT INTO producers ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?)",  # noqa: S608
                [producer.id, producer.document_type.value, producer.document,
                 producer.name, producer.created_at, producer.updated_at],
            )
        return producer

    def update(self, producer: Producer) -> Producer:
        atualizado = replace(producer, updated_at=agora())
        with self._conn.cursor() as cur:
            cur.execute(
                """
                UPDATE producers
                SET document_type = ?, document = ?, name = ?, updated_at = ?
                WHERE id = ? AND deleted_at IS NULL
                """,
                [atualizado.document_type.value, atualizado.document, atualizado.name,
                 atualizado.updated_at, atualizado.id],
            )
        return atualizado

    def get_by_id(self, id: str) -> Producer | None:
        return self._buscar_um("id = ?", id)

    def get_by_document(self, document: str) -> Producer | None:
        return self._buscar_um("document = ?", document)

    def get_by_name(self, name: str) -> Producer | None:
        return self._buscar_um("name = ?", name)

    def find_all(self, request: PageRequest) -> Page[Producer]:
        rows, total = fetch_page(
            self._conn,
            select_sql=f"SELECT {_COLUNAS} FROM producers WHERE deleted_at IS NULL",  # noqa: S608
            count_sql="SELECT count(*) FROM producers WHERE deleted_at IS NULL",
            params=[],
            request=request,
            sortable=_ORDENAVEIS,
            tiebreak="id",
        )
        return Page.of([self._hidratar(r) for r in rows], total, request)

    def soft_delete(self, id: str) -> None:
        with self._conn.cursor() as cur:
            cur.execute(
                "UPDATE producers SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                [agora(), id],
            )

    def _buscar_um(self, condicao: str, valor: str) -> Producer | None:
        # condicao vem de codigo interno, nao de input do usuario
        with self._conn.cursor() as cur:
            row = cur.execute(
                f"SELECT {_COLUNAS} FROM producers WHERE {condicao} AND deleted_at IS NULL",  # noqa: S608
                [valor],
            ).fetchone()
        return self._hidratar(row) if row else None

    def _hidratar(self, row: tuple) -> Producer:  # type: ignore[type-arg]
        return Producer(
            id=str(row[0]),
            document_type=DocumentType(row[1]),
            document=str(row[2]),
            name=str(row[3]),
            created_at=row[4],
            updated_at=row[5],
        )
