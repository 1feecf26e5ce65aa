from dataclasses import dataclass, field, fields, replace
from typing import Any


class _Absent:
    """BookPatch에서 '요청에 포함되지 않은 필드'를 나타내는 센티넬

    None이나 빈 문자열과 구분된다. 빈 값은 '변경 의도가 있는 잘못된 값'이다.
    """

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict) -> "_Absent":
        return self


ABSENT = _Absent()

BOOK_FIELDS = ("title", "author", "isbn", "publication_year", "price")


@dataclass(frozen=True)
class BookInput:
    """생성 요청용 책 입력 (모든 필드 필수)"""

    title: str
    author: str
    isbn: str
    publication_year: int
    price: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookInput":
        """디코딩된 요청 데이터에서 생성

        누락된 키와 JSON null은 빈 값(0, "")으로 채운다. 연도 0은 '누락'으로 검증된다.
        """

        def _get(name: str, zero: Any) -> Any:
            value = data.get(name)
            return zero if value is None else value

        return cls(
            title=_get("title", ""),
            author=_get("author", ""),
            isbn=_get("isbn", ""),
            publication_year=_get("publication_year", 0),
            price=_get("price", 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "publication_year": self.publication_year,
            "price": self.price,
        }


@dataclass(frozen=True)
class BookPatch:
    """부분 수정 요청용 책 입력

    각 필드는 값 또는 ABSENT. ABSENT는 '변경하지 않음'을 뜻한다.
    """

    title: str | _Absent = field(default=ABSENT)
    author: str | _Absent = field(default=ABSENT)
    isbn: str | _Absent = field(default=ABSENT)
    publication_year: int | _Absent = field(default=ABSENT)
    price: float | _Absent = field(default=ABSENT)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookPatch":
        """디코딩된 요청 데이터에서 생성

        키가 있으면 present. JSON null(None)은 키가 없는 것과 동일하게 취급.
        알 수 없는 키는 무시.
        """
        values = {
            name: data[name]
            for name in BOOK_FIELDS
            if name in data and data[name] is not None
        }
        return cls(**values)

    def is_present(self, name: str) -> bool:
        return getattr(self, name) is not ABSENT

    def present_fields(self) -> list[str]:
        return [f.name for f in fields(self) if self.is_present(f.name)]

    def with_value(self, name: str, value: Any) -> "BookPatch":
        return replace(self, **{name: value})

    def to_dict(self) -> dict[str, Any]:
        """present 필드만 포함한 딕셔너리 (기존 레코드에 그대로 병합 가능)"""
        return {name: getattr(self, name) for name in self.present_fields()}
