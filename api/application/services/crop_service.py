# api/application/services/crop_service.py
from __future__ import annotations

from api.domain.crop.entities import Crop
from api.domain.crop.repository import CropRepository
from api.domain.errors import ConflictError, DomainValidationError, NotFoundError
from api.domain.pagination import Page, PageRequest


class CropService:
    def __init__(self, crop_repo: CropRepository) -> None:
        self._repo = crop_repo

    def create(self, name: str) -> Crop:
        nome = name.strip()
        if not nome:
            raise DomainValidationError("Crop name must not be empty")
        if self._repo.find_by_name(nome):
            raise ConflictError("Crop with this name already exists")
        return self._repo.create(nome)

    def get(self, id: str) -> Crop:
        if not id:
            raise DomainValidationError("Id is required")
        crop = self._repo.find_by_id(id)
        if crop is None:
            raise NotFoundError("Crop not found")
        return crop

    def list(self, request: PageRequest) -> Page[Crop]:
        return self._repo.find_all(request)
