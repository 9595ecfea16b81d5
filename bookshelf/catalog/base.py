from abc import ABC, abstractmethod
from typing import List, Set

from ..models import Book


class Library(ABC):
    """Abstract base class for book catalogues"""

    @abstractmethod
    def add_new_book(self, book: Book) -> bool:
        """Add a book; False if a book with the same id already exists"""
        pass

    @abstractmethod
    def delete_book(self, book_id: str) -> bool:
        """Delete a book by id; False if no such book existed"""
        pass

    @abstractmethod
    def list_books_by_name(self, search_string: str) -> Set[str]:
        """Labels of up to the result limit of books whose name contains the string"""
        pass

    @abstractmethod
    def list_books_by_author(self, search_string: str) -> List[str]:
        """Names of up to the result limit of books whose author contains the string, ordered by author"""
        pass
