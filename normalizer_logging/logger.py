"""정규화 엔진 전용 로거"""

import logging
import sys
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter

ROOT_LOGGER_NAME = "normalizer"


class NormalizerLogger:
    """
    정규화 엔진 전용 구조화 로거

    - 콘솔: 사람이 읽기 쉬운 컬러 포맷
    - 파일: JSON Lines 포맷 (기계 분석용)

    Usage:
        logger = NormalizerLogger("book")
        logger.book_validated("create", ok=False, error_fields=["isbn"])
        logger.url_cleanup("canonical", raw, processed)
    """

    _root_logger: logging.Logger | None = None
    _file_handler: logging.FileHandler | None = None
    _console_handler: logging.StreamHandler | None = None

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_file: str | Path | None = None,
        console: bool = True,
    ) -> None:
        """
        전역 로깅 설정

        Args:
            level: 로깅 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_file: JSON Lines 로그 파일 경로
            console: 콘솔(stderr) 출력 여부
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(getattr(logging, level.upper()))

        # 기존 핸들러 제거
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        cls._console_handler = None
        cls._file_handler = None

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ConsoleFormatter())
            root.addHandler(console_handler)
            cls._console_handler = console_handler

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)
            cls._file_handler = file_handler

        cls._root_logger = root

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        """구조화된 로그 출력"""
        extra = {
            "component": self.name,
            "event": event,
            **kwargs,
        }
        self.logger.log(level, "", extra=extra)

    # === 책 검증 ===

    def book_validated(self, mode: str, ok: bool, error_fields: list[str]) -> None:
        """
        책 검증 결과 로깅

        Args:
            mode: create 또는 update
            ok: 에러 없음 여부
            error_fields: 에러가 기록된 필드 목록
        """
        self._log(
            logging.DEBUG,
            "book_validated",
            mode=mode,
            ok=ok,
            error_fields=error_fields,
        )

    # === URL 정리 ===

    def url_cleanup(self, operation: str, url: str, processed_url: str) -> None:
        self._log(
            logging.DEBUG,
            "url_cleanup",
            operation=operation,
            url=url,
            processed_url=processed_url,
        )

    def url_cleanup_failed(self, operation: str, url: str, error: str) -> None:
        self._log(
            logging.WARNING,
            "url_cleanup_failed",
            operation=operation,
            url=url,
            error=error,
        )

    # === 외부 인터페이스 ===

    def api_request(self, method: str, path: str, status: int, elapsed_ms: float) -> None:
        """API 요청 처리 결과 (4xx는 WARNING)"""
        level = logging.WARNING if status >= 400 else logging.INFO
        self._log(
            level,
            "api_request",
            method=method,
            path=path,
            status=status,
            elapsed_ms=round(elapsed_ms, 1),
        )

    def batch_complete(self, source: str, total: int, invalid: int, elapsed_ms: float) -> None:
        """파일 일괄 정규화 요약"""
        self._log(
            logging.INFO,
            "batch_complete",
            source=source,
            total=total,
            invalid=invalid,
            elapsed_ms=round(elapsed_ms, 1),
        )

    # === 에러/디버그 ===

    def error(self, event: str, error: str, context: dict[str, Any] | None = None) -> None:
        self._log(
            logging.ERROR,
            event,
            error=error,
            **(context or {}),
        )

    def debug(self, debug_msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, "debug", debug_msg=debug_msg, **kwargs)
