# api/interfaces/api/routes/property_crop_routes.py
from fastapi import APIRouter, Depends, Query, Response

from api.application.dtos.page_dto import PageDTO, to_page_dto
from api.application.dtos.property_crop_dto import CreatePropertyCropDTO, PropertyCropDTO
from api.application.services.property_crop_service import PropertyCropService
from api.domain.property_crop.entities import PropertyCropOrderBy
from api.interfaces.api.dependencies import get_property_crop_service
from api.interfaces.api.pagination import page_request

router = APIRouter()


@router.post("/property-crops", response_model=PropertyCropDTO, status_code=201)
def create_property_crop(
    body: CreatePropertyCropDTO,
    service: PropertyCropService = Depends(get_property_crop_service),  # noqa: B008
) -> PropertyCropDTO:
    link = service.create(str(body.property_id), str(body.harvest_id), str(body.crop_id))
    return PropertyCropDTO.from_domain(link)


@router.get("/property-crops", response_model=PageDTO[PropertyCropDTO])
def list_property_crops(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    order: str = Query(default="DESC"),
    order_by: PropertyCropOrderBy = Query(default=PropertyCropOrderBy.CREATED_AT),
    service: PropertyCropService = Depends(get_property_crop_service),  # noqa: B008
) -> PageDTO[PropertyCropDTO]:
    resultado = service.list(page_request(page, limit, order, order_by))
    return to_page_dto(resultado, PropertyCropDTO.from_domain)


@router.get("/property-crops/{link_id}", response_model=PropertyCropDTO)
def get_property_crop(
    link_id: str,
    service: PropertyCropService = Depends(get_property_crop_service),  # noqa: B008
) -> PropertyCropDTO:
    return PropertyCropDTO.from_domain(service.get(link_id))


@router.delete("/property-crops/{link_id}", status_code=204)
def delete_property_crop(
    link_id: str,
    service: PropertyCropService = Depends(get_property_crop_service),  # noqa: B008
) -> Response:
    service.delete(link_id)
    return Response(status_code=204)
