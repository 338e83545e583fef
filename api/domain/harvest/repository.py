# api/domain/harvest/repository.py
from __future__ import annotations

from datetime import date
from typing import Protocol

from api.domain.pagination import Page, PageRequest

from .entities import Harvest


class HarvestRepository(Protocol):
    def create(self, label: str, year: int, start_date: date, end_date: date) -> Harvest: ...
    def find_by_id(self, id: str) -> Harvest | None: ...
    def find_all(self, request: PageRequest) -> Page[Harvest]: ...
