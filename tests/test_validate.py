"""Tests for input validators."""
import pytest

from src.errors import InvalidFormat, InvalidMenuSelection
from src.validate import (
    fold_case,
    is_alphanumeric,
    is_valid_book_id,
    is_valid_menu_option,
    normalize_category,
    parse_menu_option,
)


def test_is_alphanumeric():
    """Letters and digits pass, spaces and punctuation do not."""
    assert is_alphanumeric("abc123")
    assert is_alphanumeric("B1")
    assert not is_alphanumeric("ab 12")
    assert not is_alphanumeric("ab-12")
    assert not is_alphanumeric("ab_12")


def test_is_alphanumeric_empty_string():
    """The empty string has no bad characters, so it passes."""
    assert is_alphanumeric("")


def test_is_valid_book_id_rejects_empty():
    """A book ID must be non-empty as well as alphanumeric."""
    assert is_valid_book_id("X9")
    assert not is_valid_book_id("")
    assert not is_valid_book_id("X 9")


def test_normalize_category():
    """Categories are accepted in any case and returned uppercased."""
    assert normalize_category("fiction") == "FICTION"
    assert normalize_category("Non-Fiction") == "NON-FICTION"
    assert normalize_category("NON-FICTION") == "NON-FICTION"


@pytest.mark.parametrize("category", ["sci-fi", "", "nonfiction", " fiction", "\ufb01ction", "non-\ufb01ction"])
def test_normalize_category_rejects_unknown(category):
    """Anything but the two categories is rejected."""
    with pytest.raises(InvalidFormat):
        normalize_category(category)


def test_is_valid_menu_option():
    """Only plain digit strings inside the range are accepted."""
    assert is_valid_menu_option("1", 1, 7)
    assert is_valid_menu_option("7", 1, 7)
    assert is_valid_menu_option("07", 1, 7)
    assert not is_valid_menu_option("0", 1, 7)
    assert not is_valid_menu_option("8", 1, 7)
    assert not is_valid_menu_option("", 1, 7)
    assert not is_valid_menu_option("1 2", 1, 7)
    assert not is_valid_menu_option(" 3", 1, 7)
    assert not is_valid_menu_option("-1", 1, 7)
    assert not is_valid_menu_option("3a", 1, 7)
    assert not is_valid_menu_option("99999999999999999999", 1, 7)


def test_parse_menu_option():
    """Valid input returns the number, invalid input raises."""
    assert parse_menu_option("4", 1, 7) == 4
    
    with pytest.raises(InvalidMenuSelection) as exc_info:
        parse_menu_option("abc", 1, 7)
    assert "between 1 and 7" in str(exc_info.value)


def test_fold_case_only_touches_ascii_letters():
    """Non-ASCII characters keep their form, so they never expand or merge."""
    assert fold_case("abc-12") == "ABC-12"
    assert fold_case("ß") == "ß"
    assert fold_case("ﬁction") == "ﬁCTION"
    assert fold_case("é") == "é"
