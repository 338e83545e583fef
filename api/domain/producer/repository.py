# api/domain/producer/repository.py
from __future__ import annotations

from typing import Protocol

from api.domain.pagination import Page, PageRequest

from .document import DocumentType
from .entities import Producer


class ProducerRepository(Protocol):
    def create(self, document_type: DocumentType, document: str, name: str) -> Producer: ...
    def update(self, producer: Producer) -> Producer: ...
    def get_by_id(self, id: str) -> Producer | None: ...
    def get_by_document(self, document: str) -> Producer | None: ...
    def get_by_name(self, name: str) -> Producer | None: ...
    def find_all(self, request: PageRequest) -> Page[Producer]: ...
    def soft_delete(self, id: str) -> None: ...
