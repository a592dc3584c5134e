"""프로세스 로깅 설정 모듈.

Process logging configuration. Called once from the application lifespan;
modules log through ``logging.getLogger(__name__)``.
"""

import logging

_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """루트 로거를 설정합니다.

    Configure the root logger with a single stream handler.
    Repeated calls only adjust the level.

    Args:
        level: 로그 레벨 이름 (Log level name, e.g. "INFO", "DEBUG")
    """
    root: logging.Logger = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_openbank", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._openbank = True  # type: ignore[attr-defined]
        root.addHandler(handler)
