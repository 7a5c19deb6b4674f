"""Tests for book models."""
import dataclasses

import pytest

from src.models import Book, BookDetails


def make_book(book_id="B1"):
    return Book(book_id, "978-0", "Dune", "Frank Herbert", "1st", "Chilton", "FICTION")


def test_details_excludes_id():
    """Details carry every field except the ID."""
    book = make_book()
    
    details = book.details
    
    assert details == BookDetails("978-0", "Dune", "Frank Herbert", "1st", "Chilton", "FICTION")
    assert not hasattr(details, "id")


def test_with_details_keeps_id():
    """Replacing details returns a new book with the same ID."""
    book = make_book()
    details = BookDetails("111", "Emma", "Jane Austen", "2nd", "Murray", "FICTION")
    
    updated = book.with_details(details)
    
    assert updated.id == "B1"
    assert updated.title == "Emma"
    assert book.title == "Dune"


def test_book_is_immutable():
    """Stored records cannot be changed behind the store's back."""
    book = make_book()
    
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.title = "Other"
