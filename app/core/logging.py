# app/core/logging.py

import logging
import sys

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "company-api"


def configure_logging(settings: Settings) -> logging.Handler:
    """
    루트 로거에 stdout 핸들러를 붙이고 레벨을 설정합니다.
    같은 이름의 핸들러가 이미 있으면 새로 붙이지 않고 그 핸들러를 반환합니다.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.DEBUG_MODE else settings.LOG_LEVEL.upper())

    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return handler
