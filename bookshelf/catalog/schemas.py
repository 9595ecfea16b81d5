"""
Pydantic schema definitions for the catalog HTTP surface.

``Book`` itself (from ``bookshelf.models``) is used for request and
response bodies of single-book endpoints. ``SearchResult`` wraps the
strings returned by the two lookup queries together with the query that
produced them.
"""

from typing import List

from pydantic import BaseModel, Field

from ..models import Book  # noqa: F401


class SearchResult(BaseModel):
    """Response body for ``/books/by-name`` and ``/books/by-author``.

    For name searches the ``items`` are labels whose order carries no
    meaning (they are sorted only so the body is stable). For author
    searches the ``items`` are book names ordered by author.
    """

    query: str
    items: List[str] = Field(default_factory=list)


class StatusResponse(BaseModel):
    status: str = "ok"
