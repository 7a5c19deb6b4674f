"""In-memory store for catalog records."""
from dataclasses import replace
from typing import Optional, List
import logging

from src.errors import CapacityExceeded, DuplicateId, InvalidFormat, NotFound
from src.models import Book, BookDetails
from src.validate import fold_case, is_valid_book_id, normalize_category

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class BookStore:
    """Ordered, capacity-bounded collection of books with unique IDs."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty store.

        Args:
            capacity: Maximum number of books held at once
        """
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        self._books: List[Book] = []
        logger.info(f"Book store created with capacity {capacity}")

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._books) >= self._capacity

    def __len__(self) -> int:
        return len(self._books)

    def add(self, book: Book) -> Book:
        """
        Append a book to the end of the store.

        Args:
            book: Fully populated candidate record

        Returns:
            The stored record, with its category in canonical form

        Raises:
            CapacityExceeded: if the store is full
            InvalidFormat: if the ID or category is malformed
            DuplicateId: if the ID is already taken
        """
        if self.is_full:
            logger.warning(f"Rejected book {book.id!r}: store is full")
            raise CapacityExceeded(self._capacity)

        if not is_valid_book_id(book.id):
            logger.warning(f"Rejected book {book.id!r}: malformed ID")
            raise InvalidFormat(
                "Invalid ID format! ID must contain only alphanumeric characters."
            )

        if self.find_by_id(book.id) is not None:
            logger.warning(f"Rejected book {book.id!r}: duplicate ID")
            raise DuplicateId(book.id)

        stored = book.with_details(self._normalized(book.details))
        self._books.append(stored)
        logger.info(f"Added book {stored.id!r} ({len(self._books)}/{self._capacity})")
        return stored

    def find_by_id(self, book_id: str) -> Optional[int]:
        """
        Find the position of a book.

        Args:
            book_id: ID to look up, any case

        Returns:
            Index of the matching book, or None
        """
        wanted = fold_case(book_id)
        for index, book in enumerate(self._books):
            if fold_case(book.id) == wanted:
                return index
        return None

    def get(self, book_id: str) -> Book:
        """Get a book by ID, raising NotFound if it is absent."""
        return self._books[self._index_of(book_id)]

    def edit(self, book_id: str, details: BookDetails) -> Book:
        """
        Replace every field of a book except its ID.

        Args:
            book_id: ID of the book to edit, any case
            details: New values for the remaining fields

        Returns:
            The updated record

        Raises:
            NotFound: if no book has this ID
            InvalidFormat: if the new category is not allowed
        """
        index = self._index_of(book_id)
        updated = self._books[index].with_details(self._normalized(details))
        self._books[index] = updated
        logger.info(f"Edited book {updated.id!r}")
        return updated

    def delete(self, book_id: str) -> Book:
        """
        Remove a book; later books move one position forward.

        Returns:
            The removed record

        Raises:
            NotFound: if no book has this ID
        """
        removed = self._books.pop(self._index_of(book_id))
        logger.info(f"Deleted book {removed.id!r} ({len(self._books)}/{self._capacity})")
        return removed

    def list_all(self) -> List[Book]:
        """Snapshot of every book in store order."""
        return list(self._books)

    def list_by_category(self, category: str) -> List[Book]:
        """
        Books in a category, in store order.

        Matching is case-insensitive. An unknown category simply
        yields an empty list.
        """
        wanted = fold_case(category)
        return [book for book in self._books if fold_case(book.category) == wanted]

    def category_exists(self, category: str) -> bool:
        """Whether at least one stored book is in the category."""
        wanted = fold_case(category)
        return any(fold_case(book.category) == wanted for book in self._books)

    def _index_of(self, book_id: str) -> int:
        index = self.find_by_id(book_id)
        if index is None:
            logger.warning(f"Book {book_id!r} not found")
            raise NotFound(book_id)
        return index

    @staticmethod
    def _normalized(details: BookDetails) -> BookDetails:
        return replace(details, category=normalize_category(details.category))
