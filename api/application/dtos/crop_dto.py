# api/application/dtos/crop_dto.py
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, StringConstraints

from api.domain.crop.entities import Crop


class CreateCropDTO(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=150)]


class CropDTO(BaseModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, crop: Crop) -> CropDTO:
        return cls(id=crop.id, name=crop.name)
