"""공통 테스트 fixtures"""

import pytest
import httpx

from models.book import BookInput


@pytest.fixture
def valid_book_data():
    """정규화 전 유효한 책 데이터 (Clean Code)"""
    return {
        "title": "  Clean Code  ",
        "author": " Robert C. Martin ",
        "isbn": "978-0-13-235088-4",
        "publication_year": 2008,
        "price": 33.50,
    }


@pytest.fixture
def valid_book(valid_book_data):
    return BookInput.from_dict(valid_book_data)


@pytest.fixture
def api_client():
    """ASGI 앱에 직접 연결된 httpx 비동기 클라이언트 팩토리"""
    from api.app import app

    def _create() -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://testserver",
        )
    return _create
