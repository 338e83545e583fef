# api/interfaces/api/pagination.py
from __future__ import annotations

from enum import StrEnum

from fastapi import HTTPException

from api.domain.pagination import PageRequest, SortOrder


def page_request(page: int, limit: int, order: str, order_by: StrEnum) -> PageRequest:
    """order aceita asc/desc em qualquer caixa."""
    try:
        sort_order = SortOrder(order.strip().upper())
    except ValueError as err:
        raise HTTPException(status_code=422, detail="order must be ASC or DESC") from err
    return PageRequest(page=page, limit=limit, order=sort_order, order_by=order_by.value)
