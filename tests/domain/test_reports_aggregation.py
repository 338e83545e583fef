# tests/domain/test_reports_aggregation.py
#
# ReportingAggregator sobre um store falso em memoria: ordenacao, defaults,
# paralelismo do overview e propagacao de erros.
from __future__ import annotations

import threading
from collections.abc import Generator, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from api.application.services.reporting_aggregator import ReportingAggregator
from api.domain.reports.aggregation import format_sum, land_use_items, rank_counts
from api.domain.reports.entities import PieItem
from api.domain.reports.store import AreaColumn


@dataclass
class FakeReportsStore:
    farms: int = 0
    sums: dict[AreaColumn, Decimal] = field(default_factory=dict)
    by_state: list[tuple[str, int]] = field(default_factory=list)
    by_crop: list[tuple[str, int]] = field(default_factory=list)

    def count_live_properties(self) -> int:
        return self.farms

    def sum_live_property_areas(self, columns: Sequence[AreaColumn]) -> dict[AreaColumn, Decimal | None]:
        return {c: self.sums.get(c) for c in columns}

    def count_live_properties_by_state(self) -> list[tuple[str, int]]:
        return list(self.by_state)

    def count_live_properties_by_crop(self) -> list[tuple[str, int]]:
        return list(self.by_crop)


class BarrierStore(FakeReportsStore):
    """Cada consulta espera as outras quatro: so termina se rodarem em paralelo."""

    def __init__(self) -> None:
        super().__init__()
        self.barrier = threading.Barrier(5, timeout=5)

    def count_live_properties(self) -> int:
        self.barrier.wait()
        return super().count_live_properties()

    def sum_live_property_areas(self, columns: Sequence[AreaColumn]) -> dict[AreaColumn, Decimal | None]:
        self.barrier.wait()
        return super().sum_live_property_areas(columns)

    def count_live_properties_by_state(self) -> list[tuple[str, int]]:
        self.barrier.wait()
        return super().count_live_properties_by_state()

    def count_live_properties_by_crop(self) -> list[tuple[str, int]]:
        self.barrier.wait()
        return super().count_live_properties_by_crop()


class FailingStore(FakeReportsStore):
    def count_live_properties_by_crop(self) -> list[tuple[str, int]]:
        raise RuntimeError("storage down")


@pytest.fixture()
def populated_store() -> FakeReportsStore:
    return FakeReportsStore(
        farms=4,
        sums={
            AreaColumn.TOTAL: Decimal("1250.50"),
            AreaColumn.ARABLE: Decimal("800.25"),
            AreaColumn.VEGETATION: Decimal("300.00"),
        },
        by_state=[("SP", 1), ("MG", 2), ("GO", 1)],
        by_crop=[("Soja", 2), ("Milho", 3), ("Cafe", 2)],
    )


def test_store_vazio_retorna_defaults():
    agg = ReportingAggregator(FakeReportsStore())
    assert agg.total_farms() == 0
    assert agg.total_hectares() == "0"
    assert agg.farms_by_state() == []
    assert agg.farms_by_crop() == []
    assert agg.land_use() == [PieItem("Agricultural", "0"), PieItem("Vegetation", "0")]


def test_total_farms_e_hectares(populated_store):
    agg = ReportingAggregator(populated_store)
    assert agg.total_farms() == 4
    assert agg.total_hectares() == "1250.50"


def test_por_estado_ordena_por_contagem_e_label(populated_store):
    agg = ReportingAggregator(populated_store)
    assert agg.farms_by_state() == [
        PieItem("MG", 2),
        PieItem("GO", 1),
        PieItem("SP", 1),
    ]


def test_por_cultura_ordena_por_contagem_e_label(populated_store):
    agg = ReportingAggregator(populated_store)
    assert [(i.label, i.value) for i in agg.farms_by_crop()] == [
        ("Milho", 3),
        ("Cafe", 2),
        ("Soja", 2),
    ]


def test_uso_do_solo_sempre_duas_fatias(populated_store):
    agg = ReportingAggregator(populated_store)
    assert agg.land_use() == [
        PieItem("Agricultural", "800.25"),
        PieItem("Vegetation", "300.00"),
    ]


def test_overview_junta_as_cinco_metricas(populated_store):
    overview = ReportingAggregator(populated_store).overview()
    assert overview.total_farms == 4
    assert overview.total_hectares == "1250.50"
    assert overview.farms_by_state[0] == PieItem("MG", 2)
    assert overview.farms_by_crop[0] == PieItem("Milho", 3)
    assert [i.label for i in overview.land_use] == ["Agricultural", "Vegetation"]


def test_overview_roda_metricas_em_paralelo():
    store = BarrierStore()
    overview = ReportingAggregator(store, max_workers=5).overview()
    assert overview.total_farms == 0
    assert not store.barrier.broken


def test_overview_propaga_falha_do_store():
    agg = ReportingAggregator(FailingStore(farms=1))
    with pytest.raises(RuntimeError, match="storage down"):
        agg.overview()


def test_metrica_isolada_propaga_falha_do_store():
    with pytest.raises(RuntimeError):
        ReportingAggregator(FailingStore()).farms_by_crop()


def test_rank_counts_puro():
    assert rank_counts([("b", 1), ("a", 1), ("c", 5)]) == [
        PieItem("c", 5),
        PieItem("a", 1),
        PieItem("b", 1),
    ]


def test_format_sum():
    assert format_sum(None) == "0"
    assert format_sum(Decimal("10.00")) == "10.00"


def test_land_use_items_defaults():
    assert land_use_items(None, Decimal("1.5")) == [
        PieItem("Agricultural", "0"),
        PieItem("Vegetation", "1.5"),
    ]


@pytest.fixture()
def debug_ligado(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    from api.infrastructure.config import get_settings

    monkeypatch.setenv("API_DEBUG", "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_tempo_das_metricas_vai_para_o_log_em_debug(debug_ligado, capsys, populated_store):
    ReportingAggregator(populated_store).total_farms()
    out = capsys.readouterr().out
    assert "total_farms computed in" in out
    assert "ms" in out
