# api/interfaces/api/routes/harvest_routes.py
from fastapi import APIRouter, Depends, Query

from api.application.dtos.harvest_dto import CreateHarvestDTO, HarvestDTO
from api.application.dtos.page_dto import PageDTO, to_page_dto
from api.application.services.harvest_service import HarvestService
from api.domain.harvest.entities import HarvestOrderBy
from api.interfaces.api.dependencies import get_harvest_service
from api.interfaces.api.pagination import page_request

router = APIRouter()


@router.post("/harvests", response_model=HarvestDTO, status_code=201)
def create_harvest(
    body: CreateHarvestDTO,
    service: HarvestService = Depends(get_harvest_service),  # noqa: B008
) -> HarvestDTO:
    harvest = service.create(body.label, body.year, body.start_date, body.end_date)
    return HarvestDTO.from_domain(harvest)


@router.get("/harvests", response_model=PageDTO[HarvestDTO])
def list_harvests(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    order: str = Query(default="DESC"),
    order_by: HarvestOrderBy = Query(default=HarvestOrderBy.YEAR),
    service: HarvestService = Depends(get_harvest_service),  # noqa: B008
) -> PageDTO[HarvestDTO]:
    resultado = service.list(page_request(page, limit, order, order_by))
    return to_page_dto(resultado, HarvestDTO.from_domain)


@router.get("/harvests/{harvest_id}", response_model=HarvestDTO)
def get_harvest(
    harvest_id: str,
    service: HarvestService = Depends(get_harvest_service),  # noqa: B008
) -> HarvestDTO:
    return HarvestDTO.from_domain(service.get(harvest_id))
