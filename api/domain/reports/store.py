# api/domain/reports/store.py
from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from enum import StrEnum
from typing import Protocol


class AreaColumn(StrEnum):
    TOTAL = "total_area_ha"
    ARABLE = "arable_area_ha"
    VEGETATION = "vegetation_area_ha"


class ReportsStore(Protocol):
    """Capacidades de agregacao sobre registros vivos (deleted_at IS NULL).

    Ordem das linhas retornadas e irrelevante; quem ordena e o agregador.
    """

    def count_live_properties(self) -> int: ...

    def sum_live_property_areas(
        self, columns: Sequence[AreaColumn],
    ) -> dict[AreaColumn, Decimal | None]:
        """None quando nao ha propriedade viva."""
        ...

    def count_live_properties_by_state(self) -> list[tuple[str, int]]: ...

    def count_live_properties_by_crop(self) -> list[tuple[str, int]]:
        """Propriedades DISTINTAS por nome de cultura, so plantios vivos."""
        ...
