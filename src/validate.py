"""Validate and normalize operator input."""
import string

from src.errors import InvalidFormat, InvalidMenuSelection
from src.models import CATEGORIES

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_DIGITS = frozenset(string.digits)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def fold_case(text: str) -> str:
    """Uppercase ASCII letters only; every other character is kept as is."""
    return text.translate(_ASCII_UPPER)


def is_alphanumeric(text: str) -> bool:
    """
    Check that every character is an ASCII letter or digit.
    
    The empty string passes. Callers that need a value must check
    for emptiness themselves (see is_valid_book_id).
    """
    return all(char in _ALPHANUMERIC for char in text)


def is_valid_book_id(book_id: str) -> bool:
    """Non-empty and alphanumeric."""
    return bool(book_id) and is_alphanumeric(book_id)


def normalize_category(category: str) -> str:
    """
    Return the canonical form of a category.
    
    Args:
        category: Category as typed, any case
        
    Returns:
        "FICTION" or "NON-FICTION"
        
    Raises:
        InvalidFormat: for anything else
    """
    upper = fold_case(category)
    if upper not in CATEGORIES:
        raise InvalidFormat(
            "Invalid category. Please enter either 'fiction' or 'non-fiction'."
        )
    return upper


def is_valid_menu_option(text: str, minimum: int, maximum: int) -> bool:
    """
    Check a menu selection.
    
    Args:
        text: Raw input line
        minimum: Lowest option number
        maximum: Highest option number
        
    Returns:
        True if text is only decimal digits and names an option in range
    """
    if not text or any(char.isspace() for char in text):
        return False
    
    if not all(char in _DIGITS for char in text):
        return False
    
    return minimum <= int(text) <= maximum


def parse_menu_option(text: str, minimum: int, maximum: int) -> int:
    """Return the selected option number or raise InvalidMenuSelection."""
    if not is_valid_menu_option(text, minimum, maximum):
        raise InvalidMenuSelection(
            f"Invalid choice. Please enter a number between {minimum} and {maximum}."
        )
    return int(text)
