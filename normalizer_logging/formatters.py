"""로그 포매터"""

import json
import logging
from datetime import datetime, timezone
from typing import Any


class ConsoleFormatter(logging.Formatter):
    """
    콘솔용 사람이 읽기 쉬운 포맷

    출력 예시:
    2024-01-15 10:30:45 [DEBUG] [book] 검증 실패 (create): isbn, price
    2024-01-15 10:30:45 [DEBUG] [url] canonical: https://a.com/x/?q=1 → https://a.com/x
    """

    # ANSI 색상 코드
    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",   # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # 콘솔에서 URL 최대 길이
    MAX_URL_LENGTH = 80

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        level_color = self.COLORS.get(record.levelno, "")
        component = getattr(record, "component", "")
        event = getattr(record, "event", "")

        prefix = f"{self.DIM}{timestamp}{self.RESET} [{level_color}{record.levelname}{self.RESET}]"
        if component:
            prefix += f" [{self.BOLD}{component}{self.RESET}]"

        return f"{prefix} {self._format_event(record, event)}"

    def _format_event(self, record: logging.LogRecord, event: str) -> str:
        """이벤트 타입별 메시지 포맷팅"""

        if event == "book_validated":
            mode = getattr(record, "mode", "")
            if getattr(record, "ok", False):
                return f"검증 통과 ({mode})"
            error_fields = getattr(record, "error_fields", [])
            return f"검증 실패 ({mode}): {', '.join(error_fields)}"

        elif event == "url_cleanup":
            operation = getattr(record, "operation", "")
            url = self._shorten(getattr(record, "url", ""))
            processed = self._shorten(getattr(record, "processed_url", ""))
            return f"{operation}: {url} → {processed}"

        elif event == "url_cleanup_failed":
            operation = getattr(record, "operation", "")
            url = self._shorten(getattr(record, "url", ""))
            error = getattr(record, "error", "")
            return f"{operation} 실패: {url}\n  → {error}"

        elif event == "api_request":
            method = getattr(record, "method", "")
            path = getattr(record, "path", "")
            status = getattr(record, "status", 0)
            elapsed_ms = getattr(record, "elapsed_ms", 0)
            return f"{method} {path} → {status} ({elapsed_ms:.0f}ms)"

        elif event == "batch_complete":
            source = getattr(record, "source", "")
            total = getattr(record, "total", 0)
            invalid = getattr(record, "invalid", 0)
            return f"일괄 정규화 완료: {source} ({total}건, 실패 {invalid}건)"

        elif event == "debug":
            return getattr(record, "debug_msg", "")

        else:
            error = getattr(record, "error", "")
            if error:
                return f"{event}: {error}"
            return event or record.getMessage()

    def _shorten(self, url: str) -> str:
        if len(url) > self.MAX_URL_LENGTH:
            return url[: self.MAX_URL_LENGTH - 3] + "..."
        return url


class JsonFormatter(logging.Formatter):
    """
    JSON Lines 포맷 (기계 분석용)

    출력 예시:
    {"ts":"2024-01-15T10:30:45.123+00:00","level":"DEBUG","component":"url","event":"url_cleanup",...}
    """

    # LogRecord 내부 속성 (extra가 아닌 것)
    SKIP_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
        }

        for key, value in record.__dict__.items():
            if key in self.SKIP_ATTRS or key.startswith("_"):
                continue
            # JSON 직렬화 가능한 값만 그대로, 나머지는 문자열로
            if isinstance(value, (str, int, float, bool, type(None), list, dict)):
                log_entry[key] = value
            else:
                log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False)
