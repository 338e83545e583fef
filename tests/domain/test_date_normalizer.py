# tests/domain/test_date_normalizer.py
import pytest

from api.domain.harvest.dates import (
    DateRejection,
    describe_iso_date_error,
    explain_rejected_date,
    is_leap_year,
    last_day_of_month,
    normalize_date,
)


def test_data_iso_valida():
    assert normalize_date("2024-02-29") == "2024-02-29"


def test_29_de_fevereiro_fora_de_ano_bissexto():
    assert normalize_date("2023-02-29") is DateRejection.INVALID


@pytest.mark.parametrize(
    ("raw", "esperado"),
    [
        ("2024/05/10", "2024-05-10"),
        ("2024-05/10", "2024-05-10"),
        ("10/05/2024", "2024-05-10"),
        ("10-05-2024", "2024-05-10"),
        ("29/02/2024", "2024-02-29"),
        ("  2024-05-10  ", "2024-05-10"),
        ("2024-05", "2024-05-01"),
        ("2024/05", "2024-05-01"),
        ("2024", "2024-01-01"),
        ("31/12/1999", "1999-12-31"),
    ],
)
def test_formatos_aceitos_modo_start(raw, esperado):
    assert normalize_date(raw) == esperado


@pytest.mark.parametrize(
    ("raw", "esperado"),
    [
        ("2024-02", "2024-02-29"),
        ("2023-02", "2023-02-28"),
        ("2024-04", "2024-04-30"),
        ("2023-07", "2023-07-31"),
        ("2024", "2024-12-31"),
        ("2024-05-10", "2024-05-10"),
    ],
)
def test_modo_end_completa_com_ultimo_dia(raw, esperado):
    assert normalize_date(raw, "end") == esperado


@pytest.mark.parametrize(
    "raw",
    ["2024-13-01", "2024-04-31", "31/04/2024", "00/01/2024", "2024-13", "2024-00", "0000-01-01", "00/01/0000"],
)
def test_datas_inexistentes_sao_rejeitadas(raw):
    assert normalize_date(raw) is DateRejection.INVALID


@pytest.mark.parametrize("raw", ["hello", "2024/3/1", "24-01-01", "2024-01-01T00:00", ""])
def test_formato_desconhecido_volta_trimado(raw):
    assert normalize_date(f" {raw} ") == raw


@pytest.mark.parametrize("valor", [None, 20240101, 3.5, ["2024"]])
def test_nao_string_volta_inalterado(valor):
    assert normalize_date(valor) is valor


def test_idempotente_na_propria_saida():
    for raw in ("2024", "2024-02", "29/02/2024"):
        saida = normalize_date(raw, "end")
        assert normalize_date(saida, "end") == saida


def test_rejeicao_nunca_e_igual_a_string():
    assert DateRejection.INVALID.value == "__INVALID__"
    assert DateRejection.INVALID != "__INVALID__"


def test_regra_de_ano_bissexto():
    assert is_leap_year(2000)
    assert is_leap_year(2024)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)
    assert normalize_date("1900-02-29") is DateRejection.INVALID
    assert normalize_date("2000-02-29") == "2000-02-29"
    assert last_day_of_month(2024, 2) == 29


def test_describe_data_valida():
    assert describe_iso_date_error("2024-01-15") is None


@pytest.mark.parametrize(
    ("raw", "mensagem"),
    [
        ("20240101", "start_date must match YYYY-MM-DD"),
        ("2024-13-01", "start_date month must be between 01 and 12"),
        ("2024-01-00", "start_date day must be greater than or equal to 01"),
        ("2023-02-29", "start_date February 29 is invalid in 2023 (not a leap year)"),
        ("2024-02-30", "start_date day must be between 01 and 29 for 02/2024"),
        ("2024-04-31", "start_date day must be between 01 and 30 for 04/2024"),
    ],
)
def test_describe_mensagens_detalhadas(raw, mensagem):
    assert describe_iso_date_error(raw, "start_date") == mensagem


def test_describe_nao_string():
    assert describe_iso_date_error(None) == "date must match YYYY-MM-DD"


def test_explain_data_brasileira_rejeitada():
    assert explain_rejected_date("31/04/2024", "end_date") == (
        "end_date day must be between 01 and 30 for 04/2024"
    )


def test_explain_mes_invalido():
    assert explain_rejected_date("2024-13", "start_date") == (
        "start_date month must be between 01 and 12"
    )


@pytest.mark.parametrize(
    ("raw", "modo", "esperado"),
    [
        ("0000-07", "start", "0000-07-01"),
        ("0000-07", "end", "0000-07-31"),
        ("0000", "start", "0000-01-01"),
        ("0000", "end", "0000-12-31"),
    ],
)
def test_datas_parciais_so_validam_o_mes(raw, modo, esperado):
    assert normalize_date(raw, modo) == esperado


def test_ano_zero_completado_e_barrado_no_describe():
    assert describe_iso_date_error(normalize_date("0000"), "start_date") == (
        "start_date must be a valid calendar date (YYYY-MM-DD)"
    )
