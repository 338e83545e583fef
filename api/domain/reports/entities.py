# api/domain/reports/entities.py
from __future__ import annotations

from dataclasses import dataclass

AGRICULTURAL_LABEL = "Agricultural"
VEGETATION_LABEL = "Vegetation"


@dataclass(frozen=True)
class PieItem:
    """Fatia de grafico. value: contagem (int) ou soma decimal serializada (str)."""

    label: str
    value: int | str


@dataclass(frozen=True)
class Overview:
    """Metricas calculadas independentemente; sem consistencia transacional entre elas."""

    total_farms: int
    total_hectares: str
    farms_by_state: list[PieItem]
    farms_by_crop: list[PieItem]
    land_use: list[PieItem]
