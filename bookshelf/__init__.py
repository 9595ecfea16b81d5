"""In-memory book catalogue with name and author lookups."""

from .catalog import Catalog, Library  # noqa: F401
from .models import Book  # noqa: F401
