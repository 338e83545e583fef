# api/application/services/property_service.py
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from api.domain.errors import DomainValidationError, NotFoundError
from api.domain.pagination import Page, PageRequest
from api.domain.property.areas import to_area_decimal, validate_areas
from api.domain.property.entities import NewProperty, Property
from api.domain.property.repository import PropertyRepository

from .producer_service import ProducerService

# Ausente em changes = mantem o atual; None explicito = apaga.
_CAMPOS_ANULAVEIS = ("cep", "complement")
_COORDENADAS = ("latitude", "longitude")


class PropertyService:
    def __init__(self, property_repo: PropertyRepository, producer_service: ProducerService) -> None:
        self._repo = property_repo
        self._producers = producer_service

    def create(self, data: NewProperty) -> Property:
        validate_areas(data.total_area_ha, data.arable_area_ha, data.vegetation_area_ha)
        for area in (data.total_area_ha, data.arable_area_ha, data.vegetation_area_ha):
            to_area_decimal(area)
        self._producers.get(data.producer_id)
        return self._repo.create(data)

    def get(self, id: str) -> Property:
        if not id:
            raise DomainValidationError("Id is required")
        property_ = self._repo.find_by_id(id)
        if property_ is None:
            raise NotFoundError("Property not found")
        return property_

    def list(self, request: PageRequest) -> Page[Property]:
        return self._repo.find_all(request)

    def update(self, id: str, changes: dict[str, str | None]) -> Property:
        """Mescla changes com o registro atual e revalida o trio de areas resultante."""
        current = self.get(id)

        total = changes.get("total_area_ha") or str(current.total_area_ha)
        arable = changes.get("arable_area_ha") or str(current.arable_area_ha)
        vegetation = changes.get("vegetation_area_ha") or str(current.vegetation_area_ha)
        validate_areas(total, arable, vegetation)

        merged = replace(
            current,
            name=changes.get("name") or current.name,
            city=changes.get("city") or current.city,
            state=changes.get("state") or current.state,
            total_area_ha=to_area_decimal(total),
            arable_area_ha=to_area_decimal(arable),
            vegetation_area_ha=to_area_decimal(vegetation),
        )

        opcionais: dict[str, object] = {}
        for campo in _CAMPOS_ANULAVEIS:
            if campo in changes:
                opcionais[campo] = changes[campo]
        for campo in _COORDENADAS:
            if campo in changes:
                valor = changes[campo]
                opcionais[campo] = Decimal(valor) if valor is not None else None

        return self._repo.update(replace(merged, **opcionais))

    def delete(self, id: str) -> None:
        self.get(id)
        self._repo.soft_delete(id)
