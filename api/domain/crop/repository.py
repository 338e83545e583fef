# api/domain/crop/repository.py
from __future__ import annotations

from typing import Protocol

from api.domain.pagination import Page, PageRequest

from .entities import Crop


class CropRepository(Protocol):
    def create(self, name: str) -> Crop: ...
    def find_by_id(self, id: str) -> Crop | None: ...
    def find_by_name(self, name: str) -> Crop | None: ...
    def find_all(self, request: PageRequest) -> Page[Crop]: ...
