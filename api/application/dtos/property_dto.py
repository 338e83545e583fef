# api/application/dtos/property_dto.py
from __future__ import annotations

import re
from typing import Annotated

from pydantic import UUID4, BaseModel, StringConstraints, field_validator

from api.domain.property.entities import NewProperty, Property

Texto150 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=150)]
Texto100 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
Complemento = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
Cep = Annotated[str, StringConstraints(min_length=8, max_length=20)]
# Hectares com ate 2 casas decimais, sempre string (Decimal, nunca float)
Area = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^[0-9]+(\.[0-9]{1,2})?$")]
Coordenada = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^-?[0-9]+(\.[0-9]{1,6})?$")]

_NAO_DIGITO = re.compile(r"\D", re.ASCII)


def _apenas_digitos(value: object) -> object:
    return _NAO_DIGITO.sub("", value) if isinstance(value, str) else value


class CreatePropertyDTO(BaseModel):
    producer_id: UUID4
    name: Texto150
    city: Texto100
    state: Texto100
    total_area_ha: Area
    arable_area_ha: Area
    vegetation_area_ha: Area
    cep: Cep | None = None
    complement: Complemento | None = None
    latitude: Coordenada | None = None
    longitude: Coordenada | None = None

    @field_validator("cep", mode="before")
    @classmethod
    def _limpar_cep(cls, value: object) -> object:
        return _apenas_digitos(value)

    def to_domain(self) -> NewProperty:
        return NewProperty(
            producer_id=str(self.producer_id),
            name=self.name,
            city=self.city,
            state=self.state,
            total_area_ha=self.total_area_ha,
            arable_area_ha=self.arable_area_ha,
            vegetation_area_ha=self.vegetation_area_ha,
            cep=self.cep,
            complement=self.complement,
            latitude=self.latitude,
            longitude=self.longitude,
        )


class UpdatePropertyDTO(BaseModel):
    """Campos omitidos mantem o valor atual; null em campo opcional apaga."""

    name: Texto150 | None = None
    city: Texto100 | None = None
    state: Texto100 | None = None
    total_area_ha: Area | None = None
    arable_area_ha: Area | None = None
    vegetation_area_ha: Area | None = None
    cep: Cep | None = None
    complement: Complemento | None = None
    latitude: Coordenada | None = None
    longitude: Coordenada | None = None

    @field_validator("cep", mode="before")
    @classmethod
    def _limpar_cep(cls, value: object) -> object:
        return _apenas_digitos(value)

    def changes(self) -> dict[str, str | None]:
        return self.model_dump(exclude_unset=True)


class PropertyDTO(BaseModel):
    id: str
    producer_id: str
    name: str
    city: str
    state: str
    total_area_ha: str
    arable_area_ha: str
    vegetation_area_ha: str
    cep: str | None
    complement: str | None
    latitude: str | None
    longitude: str | None
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, p: Property) -> PropertyDTO:
        return cls(
            id=p.id,
            producer_id=p.producer_id,
            name=p.name,
            city=p.city,
            state=p.state,
            total_area_ha=str(p.total_area_ha),
            arable_area_ha=str(p.arable_area_ha),
            vegetation_area_ha=str(p.vegetation_area_ha),
            cep=p.cep,
            complement=p.complement,
            latitude=str(p.latitude) if p.latitude is not None else None,
            longitude=str(p.longitude) if p.longitude is not None else None,
            created_at=p.created_at.isoformat(),
            updated_at=p.updated_at.isoformat(),
        )
