# api/application/dtos/reports_dto.py
from __future__ import annotations

from pydantic import BaseModel

from api.domain.reports.entities import Overview, PieItem


class PieItemDTO(BaseModel):
    label: str
    value: int | str  # contagem, ou soma Decimal serializada como string

    @classmethod
    def from_domain(cls, item: PieItem) -> PieItemDTO:
        return cls(label=item.label, value=item.value)


def pie(items: list[PieItem]) -> list[PieItemDTO]:
    return [PieItemDTO.from_domain(i) for i in items]


class TotalFarmsDTO(BaseModel):
    total_farms: int


class TotalHectaresDTO(BaseModel):
    total_hectares: str


class OverviewDTO(BaseModel):
    total_farms: int
    total_hectares: str
    farms_by_state: list[PieItemDTO]
    farms_by_crop: list[PieItemDTO]
    land_use: list[PieItemDTO]

    @classmethod
    def from_domain(cls, overview: Overview) -> OverviewDTO:
        return cls(
            total_farms=overview.total_farms,
            total_hectares=overview.total_hectares,
            farms_by_state=pie(overview.farms_by_state),
            farms_by_crop=pie(overview.farms_by_crop),
            land_use=pie(overview.land_use),
        )
