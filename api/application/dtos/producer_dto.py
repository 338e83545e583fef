# api/application/dtos/producer_dto.py
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, StringConstraints

from api.domain.producer.entities import Producer

Nome = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=150)]
Documento = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=18)]


class CreateProducerDTO(BaseModel):
    document: Documento
    name: Nome


class UpdateProducerDTO(BaseModel):
    document: Documento | None = None
    name: Nome | None = None


class ProducerDTO(BaseModel):
    id: str
    document_type: str
    document: str
    name: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, producer: Producer) -> ProducerDTO:
        return cls(
            id=producer.id,
            document_type=producer.document_type.value,
            document=producer.document,
            name=producer.name,
            created_at=producer.created_at.isoformat(),
            updated_at=producer.updated_at.isoformat(),
        )
