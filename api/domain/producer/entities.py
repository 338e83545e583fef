# api/domain/producer/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .document import DocumentType


class ProducerOrderBy(StrEnum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    NAME = "name"


@dataclass(frozen=True)
class Producer:
    """Produtor rural (pessoa fisica ou juridica). document guarda so digitos."""

    id: str
    document_type: DocumentType
    document: str
    name: str
    created_at: datetime
    updated_at: datetime
