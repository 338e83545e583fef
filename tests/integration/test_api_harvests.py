# tests/integration/test_api_harvests.py
from __future__ import annotations

from fastapi.testclient import TestClient


def _post(client: TestClient, start: object, end: object, label: str = "Safra 24/25", year: int = 2024):
    return client.post(
        "/api/harvests",
        json={"label": label, "year": year, "start_date": start, "end_date": end},
    )


def test_cria_safra_com_datas_iso(client: TestClient) -> None:
    response = _post(client, "2024-09-01", "2025-03-31")
    assert response.status_code == 201
    data = response.json()
    assert data["start_date"] == "2024-09-01"
    assert data["end_date"] == "2025-03-31"
    assert data["year"] == 2024


def test_aceita_formato_brasileiro(client: TestClient) -> None:
    response = _post(client, "01/01/2024", "31/12/2024")
    assert response.status_code == 201
    assert response.json()["start_date"] == "2024-01-01"
    assert response.json()["end_date"] == "2024-12-31"


def test_datas_parciais_completadas_pelo_campo(client: TestClient) -> None:
    response = _post(client, "2024-02", "2025")
    assert response.status_code == 201
    assert response.json()["start_date"] == "2024-02-01"
    assert response.json()["end_date"] == "2025-12-31"


def test_fim_antes_do_inicio_retorna_400(client: TestClient) -> None:
    response = _post(client, "2025-06-01", "2025-05-31")
    assert response.status_code == 400
    assert response.json()["detail"] == "End date must be on or after start date"


def test_mes_invalido_retorna_422_com_mensagem_detalhada(client: TestClient) -> None:
    response = _post(client, "2025-13-01", "2025-12-31")
    assert response.status_code == 422
    assert "start_date month must be between 01 and 12" in response.text


def test_29_de_fevereiro_em_ano_nao_bissexto(client: TestClient) -> None:
    response = _post(client, "2023-01-01", "29/02/2023")
    assert response.status_code == 422
    assert "end_date February 29 is invalid in 2023 (not a leap year)" in response.text


def test_formato_desconhecido_retorna_422(client: TestClient) -> None:
    response = _post(client, "ontem", "2025-12-31")
    assert response.status_code == 422
    assert "start_date must match YYYY-MM-DD" in response.text


def test_ano_fora_do_intervalo_retorna_422(client: TestClient) -> None:
    assert _post(client, "2024-01-01", "2024-12-31", year=1799).status_code == 422


def test_lista_ordenada_por_ano(client: TestClient) -> None:
    _post(client, "2022-01-01", "2022-12-31", label="Safra 2022", year=2022)
    _post(client, "2024-01-01", "2024-12-31", label="Safra 2024", year=2024)
    _post(client, "2023-01-01", "2023-12-31", label="Safra 2023", year=2023)

    data = client.get("/api/harvests").json()
    assert data["order_by"] == "year"
    assert [h["year"] for h in data["items"]] == [2024, 2023, 2022]

    asc = client.get("/api/harvests", params={"order": "asc"}).json()
    assert [h["year"] for h in asc["items"]] == [2022, 2023, 2024]


def test_busca_e_404(client: TestClient) -> None:
    criada = _post(client, "2024-01-01", "2024-12-31").json()
    assert client.get(f"/api/harvests/{criada['id']}").json() == criada
    response = client.get("/api/harvests/00000000-0000-4000-8000-000000000000")
    assert response.status_code == 404
    assert response.json()["detail"] == "Harvest not found"


def test_ano_zero_parcial_retorna_422(client: TestClient) -> None:
    response = _post(client, "0000", "2024-12-31")
    assert response.status_code == 422
    assert "start_date must be a valid calendar date (YYYY-MM-DD)" in response.text
