# api/domain/property/areas.py
from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from api.domain.errors import DomainValidationError

INVALID_AREAS_MESSAGE = "Areas must be valid non-negative numbers"
AREAS_EXCEED_TOTAL_MESSAGE = (
    "The sum of arable area and vegetation area cannot exceed the total area"
)

# Prefixo numerico mais longo: "10,5" -> 10, "12ha" -> 12, "abc" -> NaN.
_PREFIXO_NUMERICO = re.compile(
    r"[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def parse_leading_float(raw: str) -> float:
    """Converte o prefixo numerico de raw em float; NaN se nao houver prefixo."""
    match = _PREFIXO_NUMERICO.match(raw.lstrip())
    if match is None:
        return math.nan
    return float(match.group())


def validate_areas(total: str, arable: str, vegetation: str) -> None:
    """Garante areas numericas, nao-negativas e arable + vegetation <= total.

    Raises:
        DomainValidationError: na primeira regra violada.
    """
    valores = [parse_leading_float(v) for v in (total, arable, vegetation)]
    if any(math.isnan(v) or v < 0 for v in valores):
        raise DomainValidationError(INVALID_AREAS_MESSAGE)

    total_n, arable_n, vegetation_n = valores
    if arable_n + vegetation_n > total_n:
        raise DomainValidationError(AREAS_EXCEED_TOTAL_MESSAGE)


def to_area_decimal(raw: str) -> Decimal:
    """Conversao estrita para persistencia (validate_areas aceita prefixos como "10,5")."""
    # Decimal() aceita digitos Unicode ("١٠٠"); so ASCII chega ao banco
    if not raw.isascii():
        raise DomainValidationError(INVALID_AREAS_MESSAGE)
    try:
        valor = Decimal(raw.strip())
    except InvalidOperation as err:
        raise DomainValidationError(INVALID_AREAS_MESSAGE) from err
    if not valor.is_finite() or valor < 0:
        raise DomainValidationError(INVALID_AREAS_MESSAGE)
    return valor
