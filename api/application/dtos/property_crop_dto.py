# api/application/dtos/property_crop_dto.py
from __future__ import annotations

from pydantic import UUID4, BaseModel

from api.domain.property_crop.entities import PropertyCrop


class CreatePropertyCropDTO(BaseModel):
    property_id: UUID4
    harvest_id: UUID4
    crop_id: UUID4


class PropertyCropDTO(BaseModel):
    id: str
    property_id: str
    harvest_id: str
    crop_id: str
    property_name: str | None
    harvest_label: str | None
    crop_name: str | None
    created_at: str

    @classmethod
    def from_domain(cls, link: PropertyCrop) -> PropertyCropDTO:
        return cls(
            id=link.id,
            property_id=link.property_id,
            harvest_id=link.harvest_id,
            crop_id=link.crop_id,
            property_name=link.property_name,
            harvest_label=link.harvest_label,
            crop_name=link.crop_name,
            created_at=link.created_at.isoformat(),
        )
