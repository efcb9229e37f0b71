"""structlog over stdlib logging, plus request-scoped log context.

``configure_logging()`` runs once at startup. Each request runs inside
``request_context()``, which binds the method and path; the auth guard adds
the caller with ``bind_user()``. Every log line emitted while the request is
handled carries those keys, and nothing leaks into the next request.
"""

import logging
import logging.handlers
import os
import sys
from contextlib import contextmanager
from pathlib import Path

import structlog

_DEFAULT_LEVELS = {"production": "INFO", "staging": "INFO", "development": "DEBUG", "test": "WARNING"}
_QUIET_LOGGERS = ("urllib3", "asyncio", "protean", "multipart")
_MAX_BYTES = 10 * 1024 * 1024


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """``LOG_LEVEL`` wins; otherwise the level follows the environment."""
    return os.getenv("LOG_LEVEL", _DEFAULT_LEVELS.get(get_environment(), "INFO")).upper()


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=_MAX_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(level)
    return handler


def _renderers(env: str) -> list:
    if env in ("production", "staging"):
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    # The console renderer formats exc_info itself
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
        )
    ]


def configure_logging(log_dir: str = "logs", log_file_prefix: str = "craftbazaar") -> None:
    """Route stdlib logging to stdout and rotating files, then configure structlog."""
    level = get_log_level()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating(log_path / f"{log_file_prefix}.log", level),
        _rotating(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_renderers(get_environment()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def request_context(**values):
    """Bind ``values`` to every log line emitted inside the block."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.clear_contextvars()


def bind_user(user_id: str, role: str) -> None:
    structlog.contextvars.bind_contextvars(user_id=user_id, role=role)
