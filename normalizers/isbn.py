"""ISBN 정규화 및 체크섬 검증"""

import re

_ISBN10_RE = re.compile(r"^\d{9}[\dX]$")
_ISBN13_RE = re.compile(r"^\d{13}$")


def normalize_isbn(isbn: str) -> str:
    """공백/하이픈 제거 후 대문자화 (예: 0-8044-2957-x → 080442957X)"""
    return isbn.replace(" ", "").replace("-", "").upper()


def is_valid_isbn10(isbn: str) -> bool:
    """
    ISBN-10 체크섬 검증

    가중치 10..2로 앞 9자리를 합산하고 마지막 자리(X=10)를 더해
    11로 나누어 떨어지면 유효.
    """
    if not _ISBN10_RE.match(isbn):
        return False
    total = sum((10 - i) * int(ch) for i, ch in enumerate(isbn[:9]))
    total += 10 if isbn[9] == "X" else int(isbn[9])
    return total % 11 == 0


def is_valid_isbn13(isbn: str) -> bool:
    """
    ISBN-13 체크섬 검증

    가중치 1,3을 번갈아 12자리를 합산, (10 - 합 % 10) % 10이 마지막 자리와 같으면 유효.
    """
    if not _ISBN13_RE.match(isbn):
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(isbn[:12]))
    return (10 - total % 10) % 10 == int(isbn[12])


def is_valid_isbn(isbn: str) -> bool:
    """정규화 후 길이에 맞는 체크섬으로 검증"""
    clean = normalize_isbn(isbn)
    if len(clean) == 10:
        return is_valid_isbn10(clean)
    if len(clean) == 13:
        return is_valid_isbn13(clean)
    return False
