"""책 필드 검증/정규화 (생성 · 부분 수정)"""

from normalizer_logging import NormalizerLogger
from models.book import BookInput, BookPatch

from .errors import ValidationErrorSet
from .isbn import is_valid_isbn, normalize_isbn
from .numbers import MAX_PRICE, has_max_2_decimals, is_number, is_valid_four_digit_year

MAX_TITLE_LENGTH = 120
MAX_AUTHOR_LENGTH = 80

logger = NormalizerLogger("book")


def _check_text(
    errors: ValidationErrorSet, field: str, label: str, value: object, max_length: int
) -> str | None:
    """앞뒤 공백 제거 후 필수/길이 검증. 유효하면 정리된 값 반환"""
    if not isinstance(value, str):
        errors.add(field, f"{label} must be a string")
        return None
    text = value.strip()
    if not text:
        errors.add(field, f"{label} is required")
    elif len(text) > max_length:
        errors.add(field, f"{label} must be ≤ {max_length} characters")
    else:
        return text
    return None


def _check_isbn(errors: ValidationErrorSet, value: object) -> str | None:
    if not isinstance(value, str):
        errors.add("isbn", "ISBN must be a string")
        return None
    isbn = value.strip()
    if not isbn:
        errors.add("isbn", "ISBN is required")
    elif not is_valid_isbn(isbn):
        errors.add("isbn", "Invalid ISBN (must be ISBN-10 or ISBN-13)")
    else:
        return normalize_isbn(isbn)
    return None


def _check_year(errors: ValidationErrorSet, value: object, required: bool) -> int | None:
    """
    출판 연도 검증

    required=True(생성)이면 0을 '누락'으로 본다.
    정수값 float(2008.0)은 int로 변환.
    """
    if not is_number(value):
        errors.add("publication_year", "Publication year must be a number")
        return None
    if isinstance(value, float):
        if not value.is_integer():
            errors.add("publication_year", "Publication year must be a 4-digit number")
            return None
        value = int(value)
    if required and value == 0:
        errors.add("publication_year", "Publication year is required")
    elif not is_valid_four_digit_year(value):
        errors.add("publication_year", "Publication year must be a 4-digit number")
    else:
        return value
    return None


def _check_price(errors: ValidationErrorSet, value: object) -> float | None:
    if not is_number(value):
        errors.add("price", "Price must be a number")
        return None
    # NaN은 아래 두 비교를 모두 통과하고 소수점 검사에서 거부된다
    if value < 0:
        errors.add("price", "Price must be ≥ 0")
    elif value > MAX_PRICE:
        errors.add("price", "Price is too large")
    elif not has_max_2_decimals(value):
        errors.add("price", "Max 2 decimal places")
    else:
        return value
    return None


def normalize_create(book: BookInput) -> tuple[BookInput, ValidationErrorSet]:
    """
    생성 요청 검증 및 정규화

    첫 실패에서 멈추지 않고 모든 필드를 검사하여 전체 에러를 반환한다.
    유효한 필드는 정리된 값으로, 실패한 필드는 입력값 그대로 돌려준다.

    Args:
        book: 디코딩된 생성 입력

    Returns:
        (정규화된 BookInput, ValidationErrorSet) - 에러 집합이 비어 있으면 성공
    """
    errors = ValidationErrorSet()

    title = _check_text(errors, "title", "Title", book.title, MAX_TITLE_LENGTH)
    author = _check_text(errors, "author", "Author", book.author, MAX_AUTHOR_LENGTH)
    isbn = _check_isbn(errors, book.isbn)
    year = _check_year(errors, book.publication_year, required=True)
    price = _check_price(errors, book.price)

    normalized = BookInput(
        title=book.title if title is None else title,
        author=book.author if author is None else author,
        isbn=book.isbn if isbn is None else isbn,
        publication_year=book.publication_year if year is None else year,
        price=book.price if price is None else price,
    )
    logger.book_validated("create", ok=errors.ok, error_fields=list(errors.fields))
    return normalized, errors


def normalize_update(patch: BookPatch) -> tuple[BookPatch, ValidationErrorSet]:
    """
    부분 수정 요청 검증 및 정규화

    ABSENT 필드는 그대로 두고 에러도 기록하지 않는다.
    present 필드는 생성과 같은 규칙으로 검증하며, 통과하면 정리된 값으로 교체한다.
    빈 문자열은 '필드 비우기'가 아니라 검증 실패("... is required")다.
    """
    errors = ValidationErrorSet()
    normalized = patch

    checks = {
        "title": lambda v: _check_text(errors, "title", "Title", v, MAX_TITLE_LENGTH),
        "author": lambda v: _check_text(errors, "author", "Author", v, MAX_AUTHOR_LENGTH),
        "isbn": lambda v: _check_isbn(errors, v),
        "publication_year": lambda v: _check_year(errors, v, required=False),
        "price": lambda v: _check_price(errors, v),
    }
    for name in patch.present_fields():
        value = checks[name](getattr(patch, name))
        if value is not None:
            normalized = normalized.with_value(name, value)

    logger.book_validated("update", ok=errors.ok, error_fields=list(errors.fields))
    return normalized, errors
