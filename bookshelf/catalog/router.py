"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- POST   /books              : add a book (409 if the id is taken)
- GET    /books/by-name      : labels of books whose name contains ``q``
- GET    /books/by-author    : names of books whose author contains ``q``
- GET    /books/{book_id}    : get one book
- DELETE /books/{book_id}    : delete one book (404 if absent)

This router is an optional embedding application for remote callers. It
is not part of the catalogue contract: ``Catalog`` is used in-process and
the HTTP status codes here are only a translation of its boolean results.
"""

from __future__ import annotations

import logging
import threading

from fastapi import APIRouter, HTTPException, Query

from .schemas import Book, SearchResult, StatusResponse
from .store import Catalog


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])

# ---------------------------------------------------------------------------
# Shared catalogue
#
# FastAPI runs these sync endpoints in a thread pool, while ``Catalog``
# assumes exclusive access per call. Every endpoint therefore holds
# ``_catalog_lock`` for the duration of its catalogue call.

catalog = Catalog()
_catalog_lock = threading.Lock()


def reset_catalog() -> Catalog:
    """Replace the shared catalogue with an empty one and return it."""
    global catalog
    with _catalog_lock:
        catalog = Catalog()
    return catalog


@router.post("/books", response_model=Book, status_code=201)
def add_book(book: Book) -> Book:
    with _catalog_lock:
        added = catalog.add_new_book(book)
    if not added:
        raise HTTPException(status_code=409, detail="Book id already exists")
    return book


@router.get("/books/by-name", response_model=SearchResult)
def list_books_by_name(
    q: str = Query(default="", description="Substring of the book name"),
) -> SearchResult:
    with _catalog_lock:
        labels = catalog.list_books_by_name(q)
    return SearchResult(query=q, items=sorted(labels))


@router.get("/books/by-author", response_model=SearchResult)
def list_books_by_author(
    q: str = Query(default="", description="Substring of the author"),
) -> SearchResult:
    with _catalog_lock:
        names = catalog.list_books_by_author(q)
    return SearchResult(query=q, items=names)


@router.get("/books/{book_id}", response_model=Book)
def get_book(book_id: str) -> Book:
    with _catalog_lock:
        book = catalog.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.delete("/books/{book_id}", response_model=StatusResponse)
def delete_book(book_id: str) -> StatusResponse:
    with _catalog_lock:
        deleted = catalog.delete_book(book_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Book not found")
    return StatusResponse()
