# api/interfaces/api/routes/producer_routes.py
from fastapi import APIRouter, Depends, Query, Response

from api.application.dtos.page_dto import PageDTO, to_page_dto
from api.application.dtos.producer_dto import CreateProducerDTO, ProducerDTO, UpdateProducerDTO
from api.application.services.producer_service import ProducerService
from api.domain.producer.entities import ProducerOrderBy
from api.interfaces.api.dependencies import get_producer_service
from api.interfaces.api.pagination import page_request

router = APIRouter()


@router.post("/producers", response_model=ProducerDTO, status_code=201)
def create_producer(
    body: CreateProducerDTO,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    return ProducerDTO.from_domain(service.create(body.document, body.name))


@router.get("/producers", response_model=PageDTO[ProducerDTO])
def list_producers(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    order: str = Query(default="DESC"),
    order_by: ProducerOrderBy = Query(default=ProducerOrderBy.CREATED_AT),
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> PageDTO[ProducerDTO]:
    resultado = service.list(page_request(page, limit, order, order_by))
    return to_page_dto(resultado, ProducerDTO.from_domain)


@router.get("/producers/{producer_id}", response_model=ProducerDTO)
def get_producer(
    producer_id: str,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    return ProducerDTO.from_domain(service.get(producer_id))


@router.put("/producers/{producer_id}", response_model=ProducerDTO)
def update_producer(
    producer_id: str,
    body: UpdateProducerDTO,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    return ProducerDTO.from_domain(
        service.update(producer_id, document=body.document, name=body.name),
    )


@router.delete("/producers/{producer_id}", status_code=204)
def delete_producer(
    producer_id: str,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> Response:
    service.delete(producer_id)
    return Response(status_code=204)
