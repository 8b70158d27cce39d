# catalog.py
#
# In-memory book catalog used by the Librarian Qt application.
# Holds Book records in insertion order and offers add / update / delete /
# search / list operations. Nothing here knows about Qt or any other UI.

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class Book:
    """A single book in the catalog. The ISBN is free text and need not be unique."""
    title: str
    author: str
    isbn: str
    available: bool = False

    def __str__(self):
        return (
            f"Title: {self.title}, Author: {self.author}, ISBN: {self.isbn}, "
            f"Available: {'Yes' if self.available else 'No'}"
        )


class Catalog:
    """
    Ordered, in-memory collection of Book records.

    Duplicate ISBNs are allowed. `update` acts on the first matching record
    only, while `delete` removes every matching record.
    """

    def __init__(self, books=None):
        self._books: List[Book] = list(books) if books else []

    def __len__(self):
        return len(self._books)

    def __iter__(self):
        return iter(list(self._books))

    def add(self, book):
        """Appends a book to the end of the catalog."""
        self._books.append(book)
        logger.debug("Added %r (catalog size %d)", book.isbn, len(self._books))

    def update(self, isbn, available):
        """
        Sets the availability flag of the first book whose ISBN equals `isbn`.

        Args:
            isbn (str): ISBN to look for (exact match).
            available (bool): New availability flag.

        Returns:
            bool: True if a book was updated, False if no book matched.
        """
        for book in self._books:
            if book.isbn == isbn:
                book.available = available
                logger.debug("Set availability of %r to %s", isbn, available)
                return True
        logger.debug("No book with ISBN %r to update", isbn)
        return False

    def delete(self, isbn):
        """
        Removes every book whose ISBN equals `isbn`.

        Returns:
            int: Number of books removed (0 if none matched).
        """
        before = len(self._books)
        self._books = [book for book in self._books if book.isbn != isbn]
        removed = before - len(self._books)
        logger.debug("Removed %d book(s) with ISBN %r", removed, isbn)
        return removed

    def search(self, query):
        """
        Case-insensitive substring search over title and author.

        An empty query matches every book; callers reject empty input first.

        Returns:
            list[Book]: Matching books in catalog order.
        """
        needle = query.lower()
        return [
            book for book in self._books
            if needle in book.title.lower() or needle in book.author.lower()
        ]

    def list(self):
        """Returns all books in insertion order, as a new list."""
        return list(self._books)
