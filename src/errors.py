"""Errors raised by the catalog and surfaced to the operator."""


class CatalogError(Exception):
    """Base class for every recoverable catalog error."""


class CapacityExceeded(CatalogError):
    """The store already holds its maximum number of books."""
    
    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Library is full. Cannot add more books (capacity {capacity}).")


class DuplicateId(CatalogError):
    """Another book already uses this ID (compared case-insensitively)."""
    
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Duplicate ID! A book with ID '{book_id}' already exists.")


class NotFound(CatalogError):
    """No book matches the requested ID."""
    
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book not found! No book with ID '{book_id}'.")


class InvalidFormat(CatalogError):
    """A field value breaks its format rule."""


class InvalidMenuSelection(CatalogError):
    """Menu input that is not a number in the allowed range."""
