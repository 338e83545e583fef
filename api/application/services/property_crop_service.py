# api/application/services/property_crop_service.py
from __future__ import annotations

from api.domain.errors import ConflictError, DomainValidationError, NotFoundError
from api.domain.pagination import Page, PageRequest
from api.domain.property_crop.entities import PropertyCrop
from api.domain.property_crop.repository import PropertyCropRepository

from .crop_service import CropService
from .harvest_service import HarvestService
from .property_service import PropertyService


class PropertyCropService:
    """Plantios: liga propriedade viva, safra e cultura existentes."""

    def __init__(
        self,
        property_crop_repo: PropertyCropRepository,
        property_service: PropertyService,
        harvest_service: HarvestService,
        crop_service: CropService,
    ) -> None:
        self._repo = property_crop_repo
        self._properties = property_service
        self._harvests = harvest_service
        self._crops = crop_service

    def create(self, property_id: str, harvest_id: str, crop_id: str) -> PropertyCrop:
        self._properties.get(property_id)
        self._harvests.get(harvest_id)
        self._crops.get(crop_id)

        if self._repo.find_link(property_id, harvest_id, crop_id):
            raise ConflictError("Crop already planted on this property for this harvest")
        return self._repo.create(property_id, harvest_id, crop_id)

    def get(self, id: str) -> PropertyCrop:
        if not id:
            raise DomainValidationError("Id is required")
        link = self._repo.find_by_id(id)
        if link is None:
            raise NotFoundError("Property crop not found")
        return link

    def list(self, request: PageRequest) -> Page[PropertyCrop]:
        return self._repo.find_all(request)

    def delete(self, id: str) -> None:
        self.get(id)
        self._repo.soft_delete(id)
