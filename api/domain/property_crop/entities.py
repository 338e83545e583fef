# api/domain/property_crop/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class PropertyCropOrderBy(StrEnum):
    CREATED_AT = "created_at"


@dataclass(frozen=True)
class PropertyCrop:
    """Plantio: uma cultura numa propriedade durante uma safra.

    Nomes denormalizados vem do JOIN de leitura, para exibicao.
    """

    id: str
    property_id: str
    harvest_id: str
    crop_id: str
    created_at: datetime
    property_name: str | None = None
    harvest_label: str | None = None
    crop_name: str | None = None
