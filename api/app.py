"""FastAPI 앱 진입점"""

import os
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from normalizer_logging import NormalizerLogger

# 로깅 설정 (콘솔 + 선택적 JSON Lines 파일)
NormalizerLogger.configure(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    log_file=os.environ.get("LOG_FILE") or None,
    console=True,
)

logger = NormalizerLogger("api")

app = FastAPI(
    title="Book Normalizer API",
    description="책 필드 검증/정규화 및 URL 정리 API",
    version="0.1.0",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.api_request(request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """디코딩/타입 오류는 필드 검증(422)이 아닌 입력 형식 오류(400)"""
    logger.debug("요청 본문 디코딩 실패", path=request.url.path, detail=str(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "invalid JSON body"})


# 라우터 등록
from api.routes.books import router as books_router
from api.routes.url import router as url_router

app.include_router(books_router)
app.include_router(url_router)


@app.get("/")
async def root():
    return {"status": "ok", "service": "book-normalizer-api"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
