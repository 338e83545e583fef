# api/domain/property/repository.py
from __future__ import annotations

from typing import Protocol

from api.domain.pagination import Page, PageRequest

from .entities import NewProperty, Property


class PropertyRepository(Protocol):
    def create(self, data: NewProperty) -> Property: ...
    def update(self, property_: Property) -> Property: ...
    def find_by_id(self, id: str) -> Property | None: ...
    def find_all(self, request: PageRequest) -> Page[Property]: ...
    def soft_delete(self, id: str) -> None: ...
