# api/interfaces/api/routes/crop_routes.py
from fastapi import APIRouter, Depends, Query

from api.application.dtos.crop_dto import CreateCropDTO, CropDTO
from api.application.dtos.page_dto import PageDTO, to_page_dto
from api.application.services.crop_service import CropService
from api.domain.crop.entities import CropOrderBy
from api.interfaces.api.dependencies import get_crop_service
from api.interfaces.api.pagination import page_request

router = APIRouter()


@router.post("/crops", response_model=CropDTO, status_code=201)
def create_crop(
    body: CreateCropDTO,
    service: CropService = Depends(get_crop_service),  # noqa: B008
) -> CropDTO:
    return CropDTO.from_domain(service.create(body.name))


@router.get("/crops", response_model=PageDTO[CropDTO])
def list_crops(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    order: str = Query(default="ASC"),
    order_by: CropOrderBy = Query(default=CropOrderBy.NAME),
    service: CropService = Depends(get_crop_service),  # noqa: B008
) -> PageDTO[CropDTO]:
    resultado = service.list(page_request(page, limit, order, order_by))
    return to_page_dto(resultado, CropDTO.from_domain)


@router.get("/crops/{crop_id}", response_model=CropDTO)
def get_crop(
    crop_id: str,
    service: CropService = Depends(get_crop_service),  # noqa: B008
) -> CropDTO:
    return CropDTO.from_domain(service.get(crop_id))
