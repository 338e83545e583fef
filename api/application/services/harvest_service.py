# api/application/services/harvest_service.py
from __future__ import annotations

from datetime import date

from api.domain.errors import DomainValidationError, NotFoundError
from api.domain.harvest.entities import Harvest
from api.domain.harvest.repository import HarvestRepository
from api.domain.pagination import Page, PageRequest


class HarvestService:
    def __init__(self, harvest_repo: HarvestRepository) -> None:
        self._repo = harvest_repo

    def create(self, label: str, year: int, start_date: date, end_date: date) -> Harvest:
        if end_date < start_date:
            raise DomainValidationError("End date must be on or after start date")
        return self._repo.create(label, year, start_date, end_date)

    def get(self, id: str) -> Harvest:
        if not id:
            raise DomainValidationError("Id is required")
        harvest = self._repo.find_by_id(id)
        if harvest is None:
            raise NotFoundError("Harvest not found")
        return harvest

    def list(self, request: PageRequest) -> Page[Harvest]:
        return self._repo.find_all(request)
