# api/interfaces/api/routes/reports_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.reports_dto import (
    OverviewDTO,
    PieItemDTO,
    TotalFarmsDTO,
    TotalHectaresDTO,
    pie,
)
from api.application.services.reporting_aggregator import ReportingAggregator
from api.interfaces.api.dependencies import get_reporting_aggregator

router = APIRouter(prefix="/reports")


@router.get("/overview", response_model=OverviewDTO)
def get_overview(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> OverviewDTO:
    return OverviewDTO.from_domain(aggregator.overview())


@router.get("/total-farms", response_model=TotalFarmsDTO)
def get_total_farms(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> TotalFarmsDTO:
    return TotalFarmsDTO(total_farms=aggregator.total_farms())


@router.get("/total-hectares", response_model=TotalHectaresDTO)
def get_total_hectares(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> TotalHectaresDTO:
    return TotalHectaresDTO(total_hectares=aggregator.total_hectares())


@router.get("/pie-by-state", response_model=list[PieItemDTO])
def get_farms_by_state(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> list[PieItemDTO]:
    return pie(aggregator.farms_by_state())


@router.get("/pie-by-crop", response_model=list[PieItemDTO])
def get_farms_by_crop(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> list[PieItemDTO]:
    return pie(aggregator.farms_by_crop())


@router.get("/pie-by-land-use", response_model=list[PieItemDTO])
def get_land_use(
    aggregator: ReportingAggregator = Depends(get_reporting_aggregator),  # noqa: B008
) -> list[PieItemDTO]:
    return pie(aggregator.land_use())
