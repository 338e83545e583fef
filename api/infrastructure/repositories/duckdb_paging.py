# api/infrastructure/repositories/duckdb_paging.py
from __future__ import annotations

import uuid
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

import duckdb

from api.domain.pagination import PageRequest


def novo_id() -> str:
    return str(uuid.uuid4())


def agora() -> datetime:
    """UTC sem tzinfo: colunas sao TIMESTAMP, nao TIMESTAMPTZ."""
    return datetime.now(UTC).replace(tzinfo=None)


def fetch_page(
    conn: duckdb.DuckDBPyConnection,
    *,
    select_sql: str,
    count_sql: str,
    params: Sequence[object],
    request: PageRequest,
    sortable: Mapping[str, str],
    tiebreak: str,
) -> tuple[list[tuple], int]:  # type: ignore[type-arg]
    """Executa select_sql paginado e count_sql com os mesmos params.

    sortable mapeia o valor do enum de ordenacao para a expressao SQL; so
    expressoes deste dicionario entram no ORDER BY.
    """
    if request.order_by not in sortable:
        raise ValueError(f"orderBy nao suportado: {request.order_by}")
    coluna = sortable[request.order_by]
    direcao = "ASC" if request.order == "ASC" else "DESC"

    with conn.cursor() as cur:
        row = cur.execute(count_sql, list(params)).fetchone()
        total = int(row[0]) if row else 0
        rows = cur.execute(
            f"{select_sql} ORDER BY {coluna} {direcao}, {tiebreak} ASC LIMIT ? OFFSET ?",
            [*params, request.limit, request.offset],
        ).fetchall()
    return rows, total
