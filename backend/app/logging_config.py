"""
백엔드 로깅 설정.
Logging configuration for the backend.
"""

import logging
from typing import Final


LOG_FORMAT: Final[str] = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# 외부 라이브러리 로거는 소음을 줄이기 위해 WARNING 으로 고정한다.
# Third-party loggers are pinned to WARNING to reduce noise.
_NOISY_LOGGERS: Final[tuple[str, ...]] = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
)


def configure_logging(level: str = "INFO") -> None:
    """
    루트 로거와 외부 라이브러리 로거 레벨을 설정한다.
    Configure the root logger and third-party logger levels.

    알 수 없는 레벨 이름은 INFO 로 처리한다.
    Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("app").setLevel(log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
