# api/interfaces/api/routes/property_routes.py
from fastapi import APIRouter, Depends, Query, Response

from api.application.dtos.page_dto import PageDTO, to_page_dto
from api.application.dtos.property_dto import CreatePropertyDTO, PropertyDTO, UpdatePropertyDTO
from api.application.services.property_service import PropertyService
from api.domain.property.entities import PropertyOrderBy
from api.interfaces.api.dependencies import get_property_service
from api.interfaces.api.pagination import page_request

router = APIRouter()


@router.post("/properties", response_model=PropertyDTO, status_code=201)
def create_property(
    body: CreatePropertyDTO,
    service: PropertyService = Depends(get_property_service),  # noqa: B008
) -> PropertyDTO:
    return PropertyDTO.from_domain(service.create(body.to_domain()))


@router.get("/properties", response_model=PageDTO[PropertyDTO])
def list_properties(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    order: str = Query(default="DESC"),
    order_by: PropertyOrderBy = Query(default=PropertyOrderBy.CREATED_AT),
    service: PropertyService = Depends(get_property_service),  # noqa: B008
) -> PageDTO[PropertyDTO]:
    resultado = service.list(page_request(page, limit, order, order_by))
    return to_page_dto(resultado, PropertyDTO.from_domain)


@router.get("/properties/{property_id}", response_model=PropertyDTO)
def get_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),  # noqa: B008
) -> PropertyDTO:
    return PropertyDTO.from_domain(service.get(property_id))


@router.put("/properties/{property_id}", response_model=PropertyDTO)
def update_property(
    property_id: str,
    body: UpdatePropertyDTO,
    service: PropertyService = Depends(get_property_service),  # noqa: B008
) -> PropertyDTO:
    return PropertyDTO.from_domain(service.update(property_id, body.changes()))


@router.delete("/properties/{property_id}", status_code=204)
def delete_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),  # noqa: B008
) -> Response:
    service.delete(property_id)
    return Response(status_code=204)
