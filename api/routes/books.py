"""책 검증 API 라우트"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from models.book import BookInput, BookPatch
from normalizers import normalize_create, normalize_update

router = APIRouter(prefix="/books", tags=["books"])


class CreateBookRequest(BaseModel):
    # 누락된 키는 빈 값으로 디코딩 → 필드 검증에서 'required'로 보고
    title: str = ""
    author: str = ""
    isbn: str = ""
    price: float = 0.0
    publication_year: int = 0


class UpdateBookRequest(BaseModel):
    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    price: float | None = None
    publication_year: int | None = None


@router.post("/validate")
async def validate_create(req: CreateBookRequest):
    """
    생성 요청 검증

    성공 시 정규화된 책을 반환하고, 실패 시 422와 함께 필드별 에러 전체를 반환.
    """
    book, errors = normalize_create(BookInput.from_dict(req.model_dump()))
    if errors:
        return JSONResponse(status_code=422, content=errors.to_payload())
    return {"book": book.to_dict()}


@router.put("/validate")
async def validate_update(req: UpdateBookRequest):
    """
    부분 수정 요청 검증

    본문에 포함된 필드만 검증/정규화하여 반환 (호출 측에서 기존 레코드에 병합).
    """
    patch, errors = normalize_update(BookPatch.from_dict(req.model_dump(exclude_unset=True)))
    if errors:
        return JSONResponse(status_code=422, content=errors.to_payload())
    return {"book": patch.to_dict()}
