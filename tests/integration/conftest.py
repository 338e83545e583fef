# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator
from typing import Any

import duckdb
import pytest
from fastapi.testclient import TestClient

from api.infrastructure.duckdb_connection import apply_schema

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"

CPF_VALIDO = "529.982.247-25"
CPF_VALIDO_2 = "111.444.777-35"
CNPJ_VALIDO = "11.222.333/0001-81"


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo a cada teste, so com o schema."""
    conn = duckdb.connect(":memory:")
    apply_schema(conn)
    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com o DuckDB in-memory injetado."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def create_producer(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(document: str = CPF_VALIDO, name: str = "Joao da Silva") -> dict[str, Any]:
        response = client.post("/api/producers", json={"document": document, "name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_property(
    client: TestClient, create_producer: Callable[..., dict[str, Any]]
) -> Callable[..., dict[str, Any]]:
    def _create(producer_id: str | None = None, **overrides: Any) -> dict[str, Any]:
        if producer_id is None:
            producer_id = create_producer()["id"]
        body = {
            "producer_id": producer_id,
            "name": "Fazenda Boa Vista",
            "city": "Ribeirao Preto",
            "state": "SP",
            "total_area_ha": "100",
            "arable_area_ha": "60",
            "vegetation_area_ha": "40",
            **overrides,
        }
        response = client.post("/api/properties", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_harvest(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(label: str = "Safra 2024", year: int = 2024) -> dict[str, Any]:
        response = client.post(
            "/api/harvests",
            json={"label": label, "year": year, "start_date": f"{year}-01-01", "end_date": f"{year}-12-31"},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_crop(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(name: str = "Soja") -> dict[str, Any]:
        response = client.post("/api/crops", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def plant(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _plant(property_id: str, harvest_id: str, crop_id: str) -> dict[str, Any]:
        response = client.post(
            "/api/property-crops",
            json={"property_id": property_id, "harvest_id": harvest_id, "crop_id": crop_id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _plant
