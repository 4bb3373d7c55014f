import logging
import os
from logging.handlers import RotatingFileHandler

import seqlog

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIR = "logs"


def _resolve_level(level):
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def setup_logging_to_console(level=None, logger: logging.Logger | None = None):
    level = _resolve_level(level)
    target = logger or logging.getLogger()
    target.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(handler)

    if settings.SEQ_SERVER_URL:
        seqlog.log_to_seq(
            server_url=settings.SEQ_SERVER_URL,
            api_key=settings.SEQ_SERVER_API_KEY,
            level=level,
            batch_size=10,
            auto_flush_timeout=10,
            override_root_logger=False,
        )
    return handler


def setup_logging_to_file(
    app: str, level=None, logger: logging.Logger | None = None, log_dir: str = LOG_DIR
):
    level = _resolve_level(level)
    target = logger or logging.getLogger()
    target.setLevel(level)

    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(log_dir, f"{app}.log"), maxBytes=10 * 1024 * 1024, backupCount=5
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(handler)
    return handler
