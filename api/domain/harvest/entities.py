# api/domain/harvest/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class HarvestOrderBy(StrEnum):
    CREATED_AT = "created_at"
    YEAR = "year"
    LABEL = "label"
    START_DATE = "start_date"


@dataclass(frozen=True)
class Harvest:
    """Safra (ex: "Safra 2024/25") com janela [start_date, end_date]."""

    id: str
    label: str
    year: int
    start_date: date
    end_date: date
    created_at: datetime
    updated_at: datetime
