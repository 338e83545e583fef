# api/application/services/producer_service.py
from __future__ import annotations

from dataclasses import replace

from api.domain.errors import ConflictError, DomainValidationError, NotFoundError
from api.domain.pagination import Page, PageRequest
from api.domain.producer.document import clean_document, validate_document
from api.domain.producer.entities import Producer
from api.domain.producer.repository import ProducerRepository


class ProducerService:
    def __init__(self, producer_repo: ProducerRepository) -> None:
        self._repo = producer_repo

    def create(self, document: str, name: str) -> Producer:
        document_type = validate_document(document)
        digitos = clean_document(document)

        if self._repo.get_by_name(name):
            raise ConflictError("Producer name already exists")
        if self._repo.get_by_document(digitos):
            raise ConflictError("Producer document already exists")

        return self._repo.create(document_type, digitos, name)

    def get(self, id: str) -> Producer:
        if not id:
            raise DomainValidationError("Id is required")
        producer = self._repo.get_by_id(id)
        if producer is None:
            raise NotFoundError("Producer not found")
        return producer

    def list(self, request: PageRequest) -> Page[Producer]:
        return self._repo.find_all(request)

    def update(self, id: str, document: str | None = None, name: str | None = None) -> Producer:
        producer = self.get(id)

        if document:
            digitos = clean_document(document)
            if digitos != producer.document:
                document_type = validate_document(document)
                if self._repo.get_by_document(digitos):
                    raise ConflictError("Producer document already exists")
                producer = replace(producer, document=digitos, document_type=document_type)

        if name and name != producer.name:
            if self._repo.get_by_name(name):
                raise ConflictError("Producer name already exists")
            producer = replace(producer, name=name)

        return self._repo.update(producer)

    def delete(self, id: str) -> None:
        self.get(id)
        self._repo.soft_delete(id)
