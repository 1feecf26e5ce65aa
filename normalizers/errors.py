"""정규화 엔진 공통 에러 타입"""

from types import MappingProxyType
from typing import Mapping

VALIDATION_ERROR = "validation error"


class ValidationErrorSet:
    """
    필드별 검증 에러 누적기

    필드당 최초 메시지만 기록한다 (이후 add는 무시).
    비어 있으면 검증 성공.

    Usage:
        errors = ValidationErrorSet()
        errors.add("title", "Title is required")
        errors.add("title", "무시됨")
        errors.fields  # {"title": "Title is required"}
    """

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}

    def add(self, field: str, message: str) -> None:
        if field not in self._fields:
            self._fields[field] = message

    @property
    def ok(self) -> bool:
        return not self._fields

    @property
    def fields(self) -> Mapping[str, str]:
        """읽기 전용 뷰"""
        return MappingProxyType(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __getitem__(self, field: str) -> str:
        return self._fields[field]

    def __repr__(self) -> str:
        return f"ValidationErrorSet({self._fields!r})"

    def __str__(self) -> str:
        return "; ".join(f"{k}: {m}" for k, m in self._fields.items())

    def to_payload(self) -> dict:
        """API 응답 형식 ({"error": ..., "fields": {...}})"""
        return {"error": VALIDATION_ERROR, "fields": dict(self._fields)}

    def raise_if_any(self) -> None:
        if self._fields:
            raise ValidationError(self)


class ValidationError(ValueError):
    """필드 검증 실패 (전체 에러 집합을 담음)"""

    def __init__(self, errors: ValidationErrorSet):
        super().__init__(VALIDATION_ERROR)
        self.errors = errors

    @property
    def fields(self) -> Mapping[str, str]:
        return self.errors.fields


class CleanupError(ValueError):
    """URL 정리 입력 오류 (단일 메시지)"""


class InvalidURLError(CleanupError):
    def __init__(self, message: str = "invalid url"):
        super().__init__(message)


class InvalidOperationError(CleanupError):
    def __init__(self, message: str = "invalid operation (use: redirection|canonical|all)"):
        super().__init__(message)
