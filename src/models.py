"""Data models for catalog records."""
from dataclasses import dataclass, asdict, replace

FICTION = "FICTION"
NON_FICTION = "NON-FICTION"
CATEGORIES = (FICTION, NON_FICTION)


@dataclass(frozen=True)
class BookDetails:
    """Every field of a book except its ID."""
    isbn: str
    title: str
    author: str
    edition: str
    publication: str
    category: str


@dataclass(frozen=True)
class Book:
    """A single catalog record."""
    id: str
    isbn: str
    title: str
    author: str
    edition: str
    publication: str
    category: str
    
    @property
    def details(self) -> BookDetails:
        """Fields that an edit may replace."""
        return BookDetails(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            edition=self.edition,
            publication=self.publication,
            category=self.category
        )
    
    def with_details(self, details: BookDetails) -> "Book":
        """Copy of this book with every field but the ID replaced."""
        return replace(self, **asdict(details))
