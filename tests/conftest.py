"""Shared test fixtures for bookshelf."""

import pytest
from fastapi.testclient import TestClient

from bookshelf.catalog import Catalog
from bookshelf.catalog import router as catalog_router
from bookshelf.config import _reset_settings
from bookshelf.models import Book


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    _reset_settings()
    yield
    _reset_settings()


@pytest.fixture
def catalog():
    """An empty catalogue with the default cap and case policy."""
    return Catalog(result_limit=10, case_sensitive=True)


@pytest.fixture
def scenario_books():
    """The four books used by the end-to-end lookup scenario."""
    return [
        Book(id="4", name="Name1", author="Lex3"),
        Book(id="3", name="Name3", author="Lex2"),
        Book(id="2", name="Name2", author="Lex2"),
        Book(id="1", name="Name1", author="Lex1"),
    ]


@pytest.fixture
def client():
    """HTTP client bound to a fresh shared catalogue."""
    from bookshelf.main import app

    catalog_router.reset_catalog()
    with TestClient(app) as c:
        yield c
    catalog_router.reset_catalog()
