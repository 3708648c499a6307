import logging
import os
import sys
import tempfile
from types import FrameType
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, TextIO, cast

from loguru import logger

from luckydraw.core.managers.file import file_mgr

if TYPE_CHECKING:
    from loguru import Record

LOGURU_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{thread.name}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
    "<cyan>{line}</cyan> - <level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {extra[lucky_draw]} | {message}"

# third-party loggers routed into loguru
INTERCEPTED_LOGGERS: Sequence[str] = ("aiohttp.client", "aiohttp.internal", "aiohttp.server", "asyncio")

ERROR_LOG_FILE = "luckydraw_error.log"
AUDIT_LOG_FILE = "luckydraw_reveal.log"


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name

        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = cast(FrameType, frame.f_back)
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def is_loggable_error(record: "Record") -> bool:
    return record["level"].name in ("ERROR", "CRITICAL") or record["exception"] is not None


def is_audit_record(record: "Record") -> bool:
    return bool(record["extra"].get("audit"))


def audit_logger(lucky_draw_id: int) -> Any:
    """Logger whose records also land in the reveal audit file."""
    return logger.bind(audit=True, lucky_draw=lucky_draw_id)


def intercept_stdlib(level: int, names: Sequence[str] = INTERCEPTED_LOGGERS) -> None:
    logging.getLogger().handlers = [InterceptHandler()]

    for name in names:
        stdlib_logger = logging.getLogger(name=name)
        stdlib_logger.propagate = False
        stdlib_logger.handlers = [InterceptHandler(level=level)]


def console_sink() -> TextIO | str:
    # windowed builds have neither stderr nor stdout
    stream = sys.stderr if sys.stderr is not None else sys.stdout
    if stream is not None:
        return stream

    with tempfile.NamedTemporaryFile(mode="w", suffix=".log", delete=False) as log_file:
        return log_file.name


def make_handlers(level: int, debug: bool, log_dir: str) -> list[Dict[str, Any]]:
    return [
        {
            "sink": console_sink(),
            "level": level,
            "format": LOGURU_FORMAT,
            "backtrace": True,
        },
        {
            "sink": os.path.join(log_dir, ERROR_LOG_FILE),
            "level": "ERROR",
            "format": LOGURU_FORMAT,
            "filter": is_loggable_error,
            "backtrace": True,
            "diagnose": debug,
            "rotation": "10 MB",
            "retention": "7 days",
            "compression": "zip",
        },
        {
            "sink": os.path.join(log_dir, AUDIT_LOG_FILE),
            "level": "INFO",
            "format": AUDIT_FORMAT,
            "filter": is_audit_record,
            "rotation": "1 week",
            "retention": "8 weeks",
        },
    ]


def init_logger(debug: Optional[bool] = False, log_dir: Optional[str] = None) -> None:
    level = logging.DEBUG if debug else logging.INFO

    intercept_stdlib(level=level)
    logger.configure(
        handlers=make_handlers(level=level, debug=bool(debug), log_dir=log_dir or file_mgr.get_configs_directory()),
        extra={"audit": False, "lucky_draw": "-"},
    )
