"""Interactive console menu for the book catalog."""
from typing import Callable, List, Optional
import logging

from tabulate import tabulate

from src.errors import CatalogError, InvalidFormat, InvalidMenuSelection
from src.models import Book, BookDetails
from src.store import BookStore
from src.validate import fold_case, is_alphanumeric, normalize_category, parse_menu_option

logger = logging.getLogger(__name__)

# (header, attribute, width)
BOOK_COLUMNS = [
    ("ID", "id", 10),
    ("ISBN", "isbn", 20),
    ("Title", "title", 30),
    ("Author", "author", 20),
    ("Edition", "edition", 10),
    ("Publication", "publication", 20),
]
CATEGORY_COLUMN = ("Category", "category", 15)

MENU_ITEMS = [
    "Add Book",
    "Edit Book",
    "Search Book",
    "Delete Book",
    "View Books by Category",
    "View All Books",
    "Exit",
]
EXIT_OPTION = len(MENU_ITEMS)


def truncate(text: str, width: int) -> str:
    """Cut text to fit a fixed-width column."""
    return text[:width - 3] + "..." if len(text) > width else text


def render_books(books: List[Book], with_category: bool = False, table_format: str = "simple") -> str:
    """
    Render books as a fixed-width table.

    Args:
        books: Books to show, in display order
        with_category: Add the Category column
        table_format: Any tabulate table format

    Returns:
        The table as a single string
    """
    columns = BOOK_COLUMNS + [CATEGORY_COLUMN] if with_category else BOOK_COLUMNS
    headers = [header for header, _, _ in columns]
    rows = [
        [truncate(getattr(book, attribute), width) for _, attribute, width in columns]
        for book in books
    ]
    return tabulate(rows, headers=headers, tablefmt=table_format, disable_numparse=True)


def format_details(book: Book) -> str:
    """One 'Label: value' line per field."""
    return "\n".join([
        f"ID: {book.id}",
        f"ISBN: {book.isbn}",
        f"Title: {book.title}",
        f"Author: {book.author}",
        f"Edition: {book.edition}",
        f"Publication: {book.publication}",
        f"Category: {book.category}",
    ])


class CatalogMenu:
    """Numbered menu loop driving a BookStore."""

    def __init__(
        self,
        store: BookStore,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        pause: bool = True,
        table_format: str = "simple"
    ):
        """
        Initialize the menu.

        Args:
            store: Store owned by this session
            input_fn: Reads one line after showing a prompt (default: input)
            output_fn: Writes one block of text (default: print)
            pause: Wait for Enter after each action
            table_format: tabulate format for book lists
        """
        self.store = store
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.pause = pause
        self.table_format = table_format

        self._actions = {
            1: self.add_book,
            2: self.edit_book,
            3: self.search_book,
            4: self.delete_book,
            5: self.view_books_by_category,
            6: self.view_all_books,
        }

    def run(self):
        """Show the menu until the operator exits or input runs out."""
        try:
            while self.run_once():
                pass
        except EOFError:
            logger.info("Input closed, leaving menu")
            self.output_fn("Exiting program. Goodbye!")

    def run_once(self) -> bool:
        """
        Show the menu and handle one selection.

        Returns:
            False once the operator chose Exit
        """
        self.show_menu()
        choice = self.input_fn("Enter your choice: ")

        try:
            option = parse_menu_option(choice, 1, EXIT_OPTION)
        except InvalidMenuSelection as e:
            self.output_fn(str(e))
            return True

        if option == EXIT_OPTION:
            self.output_fn("Exiting program. Goodbye!")
            return False

        logger.debug(f"Menu option {option}: {MENU_ITEMS[option - 1]}")
        self._actions[option]()
        return True

    def show_menu(self):
        lines = [
            "",
            "=" * 32,
            "    LIBRARY MANAGEMENT SYSTEM    ",
            "=" * 32,
        ]
        lines.extend(f"[{number}] {label}" for number, label in enumerate(MENU_ITEMS, 1))
        lines.append("=" * 32)
        self.output_fn("\n".join(lines))

    def wait_for_key_press(self):
        if self.pause:
            self.input_fn("Press Enter to continue...")

    # Prompts

    def get_input(self, prompt: str) -> str:
        """Prompt until a non-empty line is entered."""
        while True:
            value = self.input_fn(prompt)
            if value:
                return value
            self.output_fn("Input cannot be empty. Please try again.")

    def get_book_id(self) -> str:
        """Prompt for an ID that is alphanumeric and not yet in the store."""
        while True:
            book_id = self.get_input("Enter Book ID (alphanumeric): ")

            if not is_alphanumeric(book_id):
                self.output_fn("Invalid ID format! ID must contain only alphanumeric characters.")
            elif self.store.find_by_id(book_id) is not None:
                self.output_fn("Duplicate ID! Please enter a unique ID.")
            else:
                return book_id

    def get_category(self) -> str:
        while True:
            category = self.get_input("Enter Category (Fiction or Non-fiction): ")
            try:
                return normalize_category(category)
            except InvalidFormat as e:
                self.output_fn(str(e))

    def _get_field(self, label: str) -> str:
        return self.get_input(f"Enter {label}: ")

    # Actions

    def add_book(self):
        if self.store.is_full:
            self.output_fn("Library is full. Cannot add more books.")
            self.wait_for_key_press()
            return

        category = self.get_category()
        book_id = self.get_book_id()
        book = Book(
            id=book_id,
            isbn=self._get_field("ISBN"),
            title=self._get_field("Title"),
            author=self._get_field("Author"),
            edition=self._get_field("Edition"),
            publication=self._get_field("Publication"),
            category=category
        )

        try:
            self.store.add(book)
        except CatalogError as e:
            self.output_fn(str(e))
        else:
            self.output_fn("Book added successfully!")
        self.wait_for_key_press()

    def edit_book(self):
        book_id = self.get_input("Enter Book ID to edit: ")

        try:
            book = self.store.get(book_id)
        except CatalogError as e:
            self.output_fn(str(e))
            self.wait_for_key_press()
            return

        self.output_fn("Book found. Please enter new details (except ID):")
        details = BookDetails(
            isbn=self._get_field("ISBN"),
            title=self._get_field("Title"),
            author=self._get_field("Author"),
            edition=self._get_field("Edition"),
            publication=self._get_field("Publication"),
            category=self.get_category()
        )

        try:
            self.store.edit(book.id, details)
        except CatalogError as e:
            self.output_fn(str(e))
        else:
            self.output_fn("Book edited successfully!")
        self.wait_for_key_press()

    def search_book(self):
        book_id = self.get_input("Enter Book ID to search: ")

        try:
            book = self.store.get(book_id)
        except CatalogError as e:
            self.output_fn(str(e))
        else:
            self.output_fn("Book found:")
            self.output_fn(format_details(book))
        self.wait_for_key_press()

    def delete_book(self):
        book_id = self.get_input("Enter Book ID to delete: ")

        try:
            book = self.store.get(book_id)
        except CatalogError as e:
            self.output_fn(str(e))
            self.wait_for_key_press()
            return

        self.output_fn("Book found. Details:")
        self.output_fn(format_details(book))

        response = self.get_input("Do you want to delete this book? (y/n): ")
        if response[0] in ("y", "Y"):
            self.store.delete(book.id)
            self.output_fn("Book Deleted successfully!")
        else:
            self.output_fn("Deletion cancelled.")
        self.wait_for_key_press()

    def view_books_by_category(self):
        category = fold_case(self.get_input("Enter Category to view (Fiction or Non-fiction): "))

        if not self.store.category_exists(category):
            self.output_fn("Category not found!")
            self.wait_for_key_press()
            return

        self.output_fn(f"\n----- Books in Category: {category} -----")
        self.output_fn(render_books(
            self.store.list_by_category(category),
            table_format=self.table_format
        ))
        self.wait_for_key_press()

    def view_all_books(self):
        if not len(self.store):
            self.output_fn("No books to display.")
            self.wait_for_key_press()
            return

        self.output_fn("\n----- All Books in Library -----")
        self.output_fn(render_books(
            self.store.list_all(),
            with_category=True,
            table_format=self.table_format
        ))
        self.wait_for_key_press()
