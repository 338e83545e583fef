# api/domain/harvest/dates.py
#
# Normalizacao de datas de safra digitadas pelo usuario.
#
# Aceita, nesta ordem: YYYY-MM-DD, DD-MM-YYYY, YYYY-MM e YYYY (separador "-"
# ou "/"). Datas parciais sao completadas pelo modo: "start" = primeiro dia,
# "end" = ultimo dia. Entrada que nao casa com nenhum formato volta trimada e
# sem alteracao, para o validador de formato rejeitar depois.
#
# Datas completas exigem ano >= 1; YYYY-MM e YYYY so validam o mes, entao o
# ano 0000 passa e fica para describe_iso_date_error rejeitar.
#
# Invariante: a saida e sempre YYYY-MM-DD,
# DateRejection.INVALID, ou a propria entrada (trimada) quando nao reconhecida.
from __future__ import annotations

import re
from enum import Enum
from typing import Literal

CompletionMode = Literal["start", "end"]

_DIAS_POR_MES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_ANO_MES_DIA = re.compile(r"(\d{4})[-/](\d{2})[-/](\d{2})", re.ASCII)
_DIA_MES_ANO = re.compile(r"(\d{2})[-/](\d{2})[-/](\d{4})", re.ASCII)
_ANO_MES = re.compile(r"(\d{4})[-/](\d{2})", re.ASCII)
_ANO = re.compile(r"(\d{4})", re.ASCII)
_ISO = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class DateRejection(Enum):
    """Entrada reconhecida como data, mas inexistente no calendario.

    Nunca e igual a nenhuma str; .value preserva o marcador legado.
    """

    INVALID = "__INVALID__"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DIAS_POR_MES[month - 1]


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    if year < 1 or not 1 <= month <= 12 or day < 1:
        return False
    return day <= last_day_of_month(year, month)


def _iso(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def _data_completa(year: int, month: int, day: int) -> str | DateRejection:
    if not is_valid_ymd(year, month, day):
        return DateRejection.INVALID
    return _iso(year, month, day)


def normalize_date(value: object, mode: CompletionMode = "start") -> object:
    """Converte value para YYYY-MM-DD quando reconhecido como data.

    Valores que nao sao str voltam inalterados. Nunca levanta excecao.
    """
    if not isinstance(value, str):
        return value
    v = value.strip()

    match = _ANO_MES_DIA.fullmatch(v)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _data_completa(year, month, day)

    match = _DIA_MES_ANO.fullmatch(v)
    if match:
        day, month, year = (int(g) for g in match.groups())
        return _data_completa(year, month, day)

    match = _ANO_MES.fullmatch(v)
    if match:
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            return DateRejection.INVALID
        day = last_day_of_month(year, month) if mode == "end" else 1
        return _iso(year, month, day)

    match = _ANO.fullmatch(v)
    if match:
        year = int(match.group(1))
        return _iso(year, 12, 31) if mode == "end" else _iso(year, 1, 1)

    return v


def describe_iso_date_error(value: object, field: str = "date") -> str | None:
    """Mensagem detalhada de por que value nao e uma data YYYY-MM-DD valida.

    None quando a data e valida.
    """
    match = _ISO.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return f"{field} must match YYYY-MM-DD"

    year, month, day = (int(g) for g in match.groups())
    if not 1 <= month <= 12:
        return f"{field} month must be between 01 and 12"
    if day < 1:
        return f"{field} day must be greater than or equal to 01"
    if year < 1:
        return f"{field} must be a valid calendar date (YYYY-MM-DD)"

    last = last_day_of_month(year, month)
    if month == 2 and day == 29 and not is_leap_year(year):
        return f"{field} February 29 is invalid in {year} (not a leap year)"
    if day > last:
        return f"{field} day must be between 01 and {last:02d} for {month:02d}/{year}"
    return None


def explain_rejected_date(value: str, field: str = "date") -> str:
    """Mensagem para uma entrada que normalize_date rejeitou."""
    v = value.strip()
    partes: tuple[str, str, str] | None = None

    match = _ANO_MES_DIA.fullmatch(v)
    if match:
        partes = (match.group(1), match.group(2), match.group(3))
    match = _DIA_MES_ANO.fullmatch(v)
    if match:
        partes = (match.group(3), match.group(2), match.group(1))
    match = _ANO_MES.fullmatch(v)
    if match:
        partes = (match.group(1), match.group(2), "01")

    candidato = "-".join(partes) if partes else v
    return (
        describe_iso_date_error(candidato, field)
        or f"{field} must be a valid calendar date (YYYY-MM-DD)"
    )
