from .errors import (
    CleanupError,
    InvalidOperationError,
    InvalidURLError,
    ValidationError,
    ValidationErrorSet,
)
from .isbn import is_valid_isbn, is_valid_isbn10, is_valid_isbn13, normalize_isbn
from .numbers import has_max_2_decimals, is_valid_four_digit_year
from .book import normalize_create, normalize_update
from .url_cleanup import CleanupOperation, canonical, cleanup, cleanup_all, redirection

__all__ = [
    "CleanupError",
    "InvalidOperationError",
    "InvalidURLError",
    "ValidationError",
    "ValidationErrorSet",
    "is_valid_isbn",
    "is_valid_isbn10",
    "is_valid_isbn13",
    "normalize_isbn",
    "has_max_2_decimals",
    "is_valid_four_digit_year",
    "normalize_create",
    "normalize_update",
    "CleanupOperation",
    "canonical",
    "cleanup",
    "cleanup_all",
    "redirection",
]
