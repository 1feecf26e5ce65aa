"""URL 정리 API 라우트"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from normalizers import CleanupError, cleanup

router = APIRouter(prefix="/url", tags=["tools"])


class CleanupRequest(BaseModel):
    url: str = ""
    operation: str = ""  # "redirection" | "canonical" | "all"


class CleanupResponse(BaseModel):
    processed_url: str


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup_url(req: CleanupRequest):
    """URL 정리. 잘못된 URL/operation은 400"""
    try:
        processed = cleanup(req.url, req.operation)
    except CleanupError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return CleanupResponse(processed_url=processed)
