# api/domain/reports/aggregation.py
#
# Pure core do dashboard: ordenacao e formatacao das metricas. Sem IO.
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .entities import AGRICULTURAL_LABEL, VEGETATION_LABEL, PieItem


def rank_counts(rows: Iterable[tuple[str, int]]) -> list[PieItem]:
    """Contagem decrescente; empate desempata por label crescente."""
    ordenado = sorted(rows, key=lambda row: (-row[1], row[0]))
    return [PieItem(label=label, value=int(count)) for label, count in ordenado]


def format_sum(value: Decimal | None) -> str:
    """Soma decimal como string; "0" quando nao ha linhas."""
    if value is None:
        return "0"
    return str(value)


def land_use_items(arable: Decimal | None, vegetation: Decimal | None) -> list[PieItem]:
    return [
        PieItem(label=AGRICULTURAL_LABEL, value=format_sum(arable)),
        PieItem(label=VEGETATION_LABEL, value=format_sum(vegetation)),
    ]
