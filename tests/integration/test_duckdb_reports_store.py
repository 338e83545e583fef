# tests/integration/test_duckdb_reports_store.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import duckdb
import pytest

from api.domain.reports.store import AreaColumn
from api.infrastructure.repositories.duckdb_reports_store import DuckDBReportsStore

AGORA = datetime(2025, 1, 1, 12, 0, 0)


def _propriedade(
    conn: duckdb.DuckDBPyConnection,
    id: str,
    state: str,
    total: str,
    arable: str,
    vegetation: str,
    deleted: bool = False,
) -> None:
    conn.execute(
        """
        INSERT INTO properties (id, producer_id, name, city, state, total_area_ha,
            arable_area_ha, vegetation_area_ha, created_at, updated_at, deleted_at)
        VALUES (?, 'p1', ?, 'Cidade', ?, ?, ?, ?, ?, ?, ?)
        """,
        [id, f"Fazenda {id}", state, total, arable, vegetation, AGORA, AGORA, AGORA if deleted else None],
    )


def _plantio(conn: duckdb.DuckDBPyConnection, id: str, property_id: str, crop_id: str, deleted: bool = False) -> None:
    conn.execute(
        "INSERT INTO property_crops VALUES (?, ?, 'h1', ?, ?, ?)",
        [id, property_id, crop_id, AGORA, AGORA if deleted else None],
    )


@pytest.fixture()
def store(test_db: duckdb.DuckDBPyConnection) -> DuckDBReportsStore:
    test_db.execute("INSERT INTO crops VALUES ('c1', 'Soja', ?), ('c2', 'Milho', ?)", [AGORA, AGORA])
    _propriedade(test_db, "a", "SP", "100.10", "50.05", "25")
    _propriedade(test_db, "b", "SP", "200", "100", "100")
    _propriedade(test_db, "x", "RJ", "1000", "1", "1", deleted=True)
    _plantio(test_db, "l1", "a", "c1")
    _plantio(test_db, "l2", "a", "c1")
    _plantio(test_db, "l3", "b", "c2", deleted=True)
    _plantio(test_db, "l4", "x", "c2")
    return DuckDBReportsStore(test_db)


def test_conta_so_propriedades_vivas(store: DuckDBReportsStore) -> None:
    assert store.count_live_properties() == 2


def test_soma_areas_em_decimal(store: DuckDBReportsStore) -> None:
    somas = store.sum_live_property_areas([AreaColumn.TOTAL, AreaColumn.ARABLE, AreaColumn.VEGETATION])
    assert somas == {
        AreaColumn.TOTAL: Decimal("300.10"),
        AreaColumn.ARABLE: Decimal("150.05"),
        AreaColumn.VEGETATION: Decimal("125.00"),
    }


def test_soma_sem_propriedades_e_none(test_db: duckdb.DuckDBPyConnection) -> None:
    store = DuckDBReportsStore(test_db)
    assert store.sum_live_property_areas([AreaColumn.TOTAL]) == {AreaColumn.TOTAL: None}
    assert store.sum_live_property_areas([]) == {}


def test_agrupa_por_estado(store: DuckDBReportsStore) -> None:
    assert sorted(store.count_live_properties_by_state()) == [("SP", 2)]


def test_agrupa_por_cultura_com_distinct(store: DuckDBReportsStore) -> None:
    # l2 repete a propriedade a; l3 removido; l4 aponta para propriedade removida
    assert store.count_live_properties_by_crop() == [("Soja", 1)]
