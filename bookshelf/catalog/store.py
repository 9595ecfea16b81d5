"""
In-memory data store for the catalogue.

``Catalog`` keeps books in a dictionary keyed by id and answers two
substring lookups over it. Nothing here raises for well-typed input:
rejected inserts, missing ids and empty searches are reported through
booleans and empty collections.

The store is not thread-safe. Callers that share one ``Catalog`` between
threads (the HTTP router, for instance) must serialise access themselves.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Optional, Set

from ..config import get_settings
from ..models import Book
from .base import Library


logger = logging.getLogger(__name__)


def _contains(haystack: str, needle: str, case_sensitive: bool) -> bool:
    """Substring test used by both lookup queries.

    An empty ``needle`` matches every string. When ``case_sensitive`` is
    false both sides are casefolded before comparing.
    """
    if case_sensitive:
        return needle in haystack
    return needle.casefold() in haystack.casefold()


def _label(book: Book, duplicated: bool) -> str:
    if duplicated:
        return f"{book.author} - {book.name}"
    return book.name


class Catalog(Library):
    """In-memory ``Library`` implementation.

    Parameters
    ----------
    result_limit : Optional[int]
        Maximum number of books a lookup returns. Defaults to the
        ``result_limit`` setting (10).
    case_sensitive : Optional[bool]
        Containment policy for both lookups. Defaults to the
        ``case_sensitive`` setting (True).

    Raises
    ------
    ValueError
        If ``result_limit`` is given and is less than 1.
    """

    def __init__(
        self,
        result_limit: Optional[int] = None,
        case_sensitive: Optional[bool] = None,
    ) -> None:
        if result_limit is not None and result_limit < 1:
            raise ValueError(f"result_limit must be at least 1, got {result_limit}")
        settings = get_settings()
        self.result_limit = settings.result_limit if result_limit is None else result_limit
        self.case_sensitive = settings.case_sensitive if case_sensitive is None else case_sensitive
        self._books: Dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def get(self, book_id: str) -> Optional[Book]:
        return self._books.get(book_id)

    def add_new_book(self, book: Book) -> bool:
        if book.id in self._books:
            logger.info("Rejected book %r: id already in catalogue", book.id)
            return False
        self._books[book.id] = book
        logger.debug("Added book %r (%d in catalogue)", book.id, len(self._books))
        return True

    def delete_book(self, book_id: str) -> bool:
        if self._books.pop(book_id, None) is None:
            logger.debug("Nothing to delete for id %r", book_id)
            return False
        logger.debug("Deleted book %r (%d in catalogue)", book_id, len(self._books))
        return True

    def list_books_by_name(self, search_string: str) -> Set[str]:
        """Return labels for books whose name contains ``search_string``.

        At most ``result_limit`` books are selected first. A selected book
        is labelled ``"<author> - <name>"`` when another selected book has
        the same name, otherwise just ``"<name>"``. Identical labels
        collapse, so the set may hold fewer entries than books selected.
        """
        selected: List[Book] = []
        for book in self._books.values():
            if len(selected) >= self.result_limit:
                break
            if _contains(book.name, search_string, self.case_sensitive):
                selected.append(book)

        name_counts = Counter(book.name for book in selected)
        labels = {_label(book, name_counts[book.name] > 1) for book in selected}
        logger.debug("Name search %r selected %d books", search_string, len(selected))
        return labels

    def list_books_by_author(self, search_string: str) -> List[str]:
        """Return names of books whose author contains ``search_string``.

        Matches are sorted by author (a single stable sort, no secondary
        key) and cut to ``result_limit`` before the names are taken.
        """
        matches = [
            b for b in self._books.values()
            if _contains(b.author, search_string, self.case_sensitive)
        ]
        matches.sort(key=lambda b: b.author)
        names = [b.name for b in matches[: self.result_limit]]
        logger.debug("Author search %r matched %d books", search_string, len(matches))
        return names
