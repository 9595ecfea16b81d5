"""
Catalog package for the bookshelf.

``Catalog`` is the in-memory store of ``Book`` records with its four
operations: add, delete, lookup by name and lookup by author. ``router``
exposes the same operations over HTTP for embedding applications.
"""

from .base import Library  # noqa: F401
from .store import Catalog  # noqa: F401
