"""
로깅 설정.

모듈별 로거는 logging.getLogger(__name__) 사용.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int) -> int:
    """레벨 이름(INFO 등) 또는 숫자를 logging 레벨로. 알 수 없으면 INFO."""
    if isinstance(level, int):
        return level

    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | int = "INFO") -> None:
    """
    루트 로거 설정.

    이미 핸들러가 있으면(uvicorn, pytest 등) 레벨만 조정.
    """
    resolved = resolve_level(level)
    root = logging.getLogger()

    if root.handlers:
        root.setLevel(resolved)
        return

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
