"""URL 정리 (canonical / redirection / all)"""

from enum import Enum
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from normalizer_logging import NormalizerLogger

from .errors import InvalidOperationError, InvalidURLError

logger = NormalizerLogger("url")


class CleanupOperation(str, Enum):
    """URL 정리 방식"""

    CANONICAL = "canonical"
    REDIRECTION = "redirection"
    ALL = "all"

    @classmethod
    def parse(cls, name: "str | CleanupOperation") -> "CleanupOperation":
        """앞뒤 공백 제거 + 소문자화 후 매칭. 알 수 없는 값은 InvalidOperationError"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidOperationError()
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidOperationError() from None


def _parse(raw: str) -> SplitResult:
    """scheme과 host가 모두 있는 절대 URL만 허용"""
    if not isinstance(raw, str):
        raise InvalidURLError()
    try:
        parts = urlsplit(raw)
        # 포트 형식/범위 검사 (urlsplit은 접근 시점에만 검사)
        parts.port
    except ValueError:
        raise InvalidURLError() from None
    if not parts.scheme or not parts.hostname:
        raise InvalidURLError()
    return parts


def _split_netloc(netloc: str) -> tuple[str, str, str]:
    """netloc → (userinfo@, host, :port)"""
    userinfo, sep, hostport = netloc.rpartition("@")
    userinfo = userinfo + sep
    if hostport.startswith("["):
        # IPv6 리터럴: 포트는 ']' 뒤
        end = hostport.find("]") + 1
        return userinfo, hostport[:end], hostport[end:]
    host, sep, port = hostport.partition(":")
    return userinfo, host, sep + port


def _needs_www(host: str) -> bool:
    """루트 도메인(점 1개)에만 www. 추가. api.example.com 같은 서브도메인은 제외"""
    if host.startswith("www."):
        return False
    return host.count(".") == 1


def _strip_trailing_slash(value: str) -> str:
    return value[:-1] if value.endswith("/") else value


def _canonical(parts: SplitResult) -> str:
    # host/path 대소문자는 유지
    path = _strip_trailing_slash(parts.path)
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def _redirection(parts: SplitResult) -> str:
    userinfo, host, port = _split_netloc(parts.netloc)
    host = host.lower()
    if _needs_www(host):
        host = "www." + host

    path = _strip_trailing_slash(parts.path.lower())

    # 파라미터 순서 유지, 값의 끝 슬래시 1개만 제거 (키는 그대로)
    # UTF-8이 아닌 퍼센트 인코딩 바이트는 surrogateescape로 원래 바이트 보존
    params = [
        (key, _strip_trailing_slash(value))
        for key, value in parse_qsl(parts.query, keep_blank_values=True, errors="surrogateescape")
    ]
    query = urlencode(params, errors="surrogateescape")

    return urlunsplit((parts.scheme, f"{userinfo}{host}{port}", path, query, ""))


def _all(parts: SplitResult) -> str:
    redirected = urlsplit(_redirection(parts))
    return urlunsplit((redirected.scheme, redirected.netloc, redirected.path, "", ""))


_HANDLERS = {
    CleanupOperation.CANONICAL: _canonical,
    CleanupOperation.REDIRECTION: _redirection,
    CleanupOperation.ALL: _all,
}


def cleanup(raw: str, operation: "CleanupOperation | str") -> str:
    """
    URL을 지정한 방식으로 정리

    Args:
        raw: 원본 URL (scheme, host 필수)
        operation: CleanupOperation 또는 "canonical" | "redirection" | "all"

    Returns:
        정리된 URL

    Raises:
        InvalidURLError: 파싱 불가 또는 scheme/host 없음 (operation보다 먼저 검사)
        InvalidOperationError: 알 수 없는 operation
    """
    op_name = operation.value if isinstance(operation, CleanupOperation) else str(operation)
    try:
        parts = _parse(raw)
        op = CleanupOperation.parse(operation)
        processed = _HANDLERS[op](parts)
    except (InvalidOperationError, InvalidURLError) as e:
        logger.url_cleanup_failed(op_name, str(raw), str(e))
        raise

    logger.url_cleanup(op.value, raw, processed)
    return processed


def canonical(raw: str) -> str:
    """query/fragment 제거, 끝 슬래시 1개 제거"""
    return cleanup(raw, CleanupOperation.CANONICAL)


def redirection(raw: str) -> str:
    """host 소문자화 + www. 추가, path 소문자화, query 값 정리, fragment 제거"""
    return cleanup(raw, CleanupOperation.REDIRECTION)


def cleanup_all(raw: str) -> str:
    """redirection 후 query/fragment 제거"""
    return cleanup(raw, CleanupOperation.ALL)
