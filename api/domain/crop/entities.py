# api/domain/crop/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class CropOrderBy(StrEnum):
    NAME = "name"
    CREATED_AT = "created_at"


@dataclass(frozen=True)
class Crop:
    id: str
    name: str
    created_at: datetime
