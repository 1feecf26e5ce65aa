"""ValidationErrorSet / 에러 타입 테스트"""

import pytest

from normalizers.errors import (
    CleanupError,
    InvalidOperationError,
    InvalidURLError,
    ValidationError,
    ValidationErrorSet,
)


class TestValidationErrorSet:
    """ValidationErrorSet 테스트"""

    def test_empty_means_ok(self):
        errors = ValidationErrorSet()

        assert errors.ok is True
        assert not errors
        assert len(errors) == 0
        assert errors.to_payload() == {"error": "validation error", "fields": {}}

    def test_first_message_wins(self):
        """같은 필드의 두 번째 메시지는 무시"""
        errors = ValidationErrorSet()
        errors.add("title", "bad")
        errors.add("title", "should-be-ignored")
        errors.add("price", "too many decimals")

        assert errors["title"] == "bad"
        assert errors["price"] == "too many decimals"
        assert len(errors) == 2
        assert "title" in errors
        assert errors.ok is False

    def test_fields_view_is_read_only(self):
        errors = ValidationErrorSet()
        errors.add("isbn", "Invalid ISBN")

        with pytest.raises(TypeError):
            errors.fields["isbn"] = "overwritten"
        assert errors["isbn"] == "Invalid ISBN"

    def test_str(self):
        errors = ValidationErrorSet()
        errors.add("title", "bad")
        errors.add("price", "too many decimals")

        text = str(errors)
        assert "title: bad" in text
        assert "price: too many decimals" in text

    def test_to_payload(self):
        errors = ValidationErrorSet()
        errors.add("isbn", "ISBN is required")

        assert errors.to_payload() == {
            "error": "validation error",
            "fields": {"isbn": "ISBN is required"},
        }

    def test_raise_if_any(self):
        errors = ValidationErrorSet()
        errors.raise_if_any()  # 에러 없으면 통과

        errors.add("author", "Author is required")
        with pytest.raises(ValidationError) as exc_info:
            errors.raise_if_any()

        assert str(exc_info.value) == "validation error"
        assert exc_info.value.fields == {"author": "Author is required"}


class TestCleanupErrors:
    """URL 정리 에러 메시지 테스트"""

    def test_messages(self):
        assert str(InvalidURLError()) == "invalid url"
        assert str(InvalidOperationError()) == "invalid operation (use: redirection|canonical|all)"

    def test_hierarchy(self):
        assert issubclass(InvalidURLError, CleanupError)
        assert issubclass(InvalidOperationError, CleanupError)
        assert issubclass(CleanupError, ValueError)
