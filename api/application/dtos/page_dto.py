# api/application/dtos/page_dto.py
from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel

from api.domain.pagination import Page

T = TypeVar("T")
D = TypeVar("D", bound=BaseModel)


class PageDTO(BaseModel, Generic[D]):
    items: list[D]
    total: int
    total_pages: int
    page: int
    limit: int
    order_by: str
    order: str


def to_page_dto(page: Page[T], converter: Callable[[T], D]) -> PageDTO[D]:
    return PageDTO[D](
        items=[converter(item) for item in page.items],
        total=page.total,
        total_pages=page.total_pages,
        page=page.page,
        limit=page.limit,
        order_by=page.order_by,
        order=page.order.value,
    )
