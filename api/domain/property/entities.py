# api/domain/property/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum


class PropertyOrderBy(StrEnum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    NAME = "name"
    CITY = "city"
    STATE = "state"
    TOTAL_AREA_HA = "total_area_ha"


@dataclass(frozen=True)
class Property:
    """Fazenda. Areas em hectares, Decimal com 2 casas. Nunca float."""

    id: str
    producer_id: str
    name: str
    city: str
    state: str
    total_area_ha: Decimal
    arable_area_ha: Decimal
    vegetation_area_ha: Decimal
    created_at: datetime
    updated_at: datetime
    cep: str | None = None
    complement: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None


@dataclass(frozen=True)
class NewProperty:
    """Dados ja validados para insercao. Areas como strings decimais."""

    producer_id: str
    name: str
    city: str
    state: str
    total_area_ha: str
    arable_area_ha: str
    vegetation_area_ha: str
    cep: str | None = None
    complement: str | None = None
    latitude: str | None = None
    longitude: str | None = None
