# api/application/services/reporting_aggregator.py
from __future__ import annotations

import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from api.domain.reports.aggregation import format_sum, land_use_items, rank_counts
from api.domain.reports.entities import Overview, PieItem
from api.domain.reports.store import AreaColumn, ReportsStore
from api.infrastructure.log import debug

T = TypeVar("T")


class ReportingAggregator:
    """Imperative Shell do dashboard: consulta o store e delega ordenacao e
    formatacao ao pure core (api.domain.reports.aggregation).

    Erros do store propagam sem traducao e sem retry.
    """

    def __init__(self, store: ReportsStore, max_workers: int = 5) -> None:
        self._store = store
        self._max_workers = max_workers

    def total_farms(self) -> int:
        return self._medir("total_farms", self._total_farms)

    def total_hectares(self) -> str:
        return self._medir("total_hectares", self._total_hectares)

    def farms_by_state(self) -> list[PieItem]:
        return self._medir("farms_by_state", self._farms_by_state)

    def farms_by_crop(self) -> list[PieItem]:
        return self._medir("farms_by_crop", self._farms_by_crop)

    def land_use(self) -> list[PieItem]:
        return self._medir("land_use", self._land_use)

    def overview(self) -> Overview:
        """As cinco metricas rodam em paralelo; a primeira falha aborta o overview."""
        inicio = time.monotonic()
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            farms_future = pool.submit(self._total_farms)
            hectares_future = pool.submit(self._total_hectares)
            state_future = pool.submit(self._farms_by_state)
            crop_future = pool.submit(self._farms_by_crop)
            land_use_future = pool.submit(self._land_use)

            overview = Overview(
                total_farms=farms_future.result(),
                total_hectares=hectares_future.result(),
                farms_by_state=state_future.result(),
                farms_by_crop=crop_future.result(),
                land_use=land_use_future.result(),
            )
        debug(f"overview computed in {_ms_desde(inicio)}ms")
        return overview

    def _total_farms(self) -> int:
        return self._store.count_live_properties()

    def _total_hectares(self) -> str:
        somas = self._store.sum_live_property_areas([AreaColumn.TOTAL])
        return format_sum(somas.get(AreaColumn.TOTAL))

    def _farms_by_state(self) -> list[PieItem]:
        return rank_counts(self._store.count_live_properties_by_state())

    def _farms_by_crop(self) -> list[PieItem]:
        return rank_counts(self._store.count_live_properties_by_crop())

    def _land_use(self) -> list[PieItem]:
        somas = self._store.sum_live_property_areas([AreaColumn.ARABLE, AreaColumn.VEGETATION])
        return land_use_items(somas.get(AreaColumn.ARABLE), somas.get(AreaColumn.VEGETATION))

    def _medir(self, nome: str, fn: Callable[[], T]) -> T:
        inicio = time.monotonic()
        resultado = fn()
        debug(f"{nome} computed in {_ms_desde(inicio)}ms")
        return resultado


def _ms_desde(inicio: float) -> int:
    return int((time.monotonic() - inicio) * 1000)
