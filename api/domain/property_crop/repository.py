# api/domain/property_crop/repository.py
from __future__ import annotations

from typing import Protocol

from api.domain.pagination import Page, PageRequest

from .entities import PropertyCrop


class PropertyCropRepository(Protocol):
    def create(self, property_id: str, harvest_id: str, crop_id: str) -> PropertyCrop: ...
    def find_by_id(self, id: str) -> PropertyCrop | None: ...
    def find_link(self, property_id: str, harvest_id: str, crop_id: str) -> PropertyCrop | None: ...
    def find_all(self, request: PageRequest) -> Page[PropertyCrop]: ...
    def soft_delete(self, id: str) -> None: ...
