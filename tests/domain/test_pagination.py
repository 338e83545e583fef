# tests/domain/test_pagination.py
import pytest

from api.domain.pagination import Page, PageRequest, SortOrder


def test_page_request_padrao():
    req = PageRequest()
    assert req.page == 1
    assert req.limit == 10
    assert req.order is SortOrder.DESC
    assert req.order_by == "created_at"
    assert req.offset == 0


def test_offset():
    assert PageRequest(page=3, limit=20).offset == 40


@pytest.mark.parametrize(("page", "limit"), [(0, 10), (-1, 10), (1, 0), (1, 101)])
def test_page_request_invalido(page, limit):
    with pytest.raises(ValueError):
        PageRequest(page=page, limit=limit)


def test_total_pages_arredonda_para_cima():
    page = Page.of(["a", "b"], 25, PageRequest(limit=10))
    assert page.total_pages == 3


def test_total_pages_zero_sem_itens():
    page = Page.of([], 0, PageRequest())
    assert page.total_pages == 0


def test_page_copia_ordenacao_do_request():
    req = PageRequest(page=2, limit=5, order=SortOrder.ASC, order_by="name")
    page = Page.of(["x"], 6, req)
    assert (page.page, page.limit, page.order_by, page.order) == (2, 5, "name", SortOrder.ASC)
