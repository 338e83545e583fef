# api/domain/errors.py
from __future__ import annotations


class DomainValidationError(ValueError):
    """Regra de negocio ou formato violado. Mapeado para HTTP 400."""


class NotFoundError(LookupError):
    """Registro inexistente ou soft-deleted. Mapeado para HTTP 404."""


class ConflictError(ValueError):
    """Violacao de unicidade. Mapeado para HTTP 409."""
