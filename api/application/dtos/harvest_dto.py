# api/application/dtos/harvest_dto.py
from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, ValidationInfo, field_validator

from api.domain.harvest.dates import (
    DateRejection,
    describe_iso_date_error,
    explain_rejected_date,
    normalize_date,
)
from api.domain.harvest.entities import Harvest

Rotulo = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=30)]


class CreateHarvestDTO(BaseModel):
    """Datas aceitam YYYY-MM-DD, DD/MM/YYYY, YYYY-MM e YYYY.

    Datas parciais: start_date vai para o primeiro dia, end_date para o ultimo.
    """

    label: Rotulo
    year: int = Field(ge=1800, le=9999)
    start_date: date
    end_date: date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _normalizar(cls, value: object, info: ValidationInfo) -> object:
        field = info.field_name or "date"
        normalizado = normalize_date(value, "end" if field == "end_date" else "start")
        if normalizado is DateRejection.INVALID:
            raise ValueError(explain_rejected_date(str(value), field))
        erro = describe_iso_date_error(normalizado, field)
        if erro:
            raise ValueError(erro)
        return normalizado


class HarvestDTO(BaseModel):
    id: str
    label: str
    year: int
    start_date: str
    end_date: str

    @classmethod
    def from_domain(cls, harvest: Harvest) -> HarvestDTO:
        return cls(
            id=harvest.id,
            label=harvest.label,
            year=harvest.year,
            start_date=harvest.start_date.isoformat(),
            end_date=harvest.end_date.isoformat(),
        )
