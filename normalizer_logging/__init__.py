"""정규화 엔진 로깅 모듈"""

from .logger import NormalizerLogger
from .formatters import ConsoleFormatter, JsonFormatter

__all__ = [
    "NormalizerLogger",
    "ConsoleFormatter",
    "JsonFormatter",
]
