"""Logging for Stockroom.

Standard library handlers own the destinations: stdout plus two rotating
files under ``logs/`` (everything, and errors only). structlog owns the
format: JSON lines in production and staging, the coloured console renderer
with rich tracebacks elsewhere.

Goods movements bind their identifiers with ``operation_context`` so every
line logged while a receipt or issue is in flight carries them.
"""

import logging
import logging.handlers
import os
import sys
from contextlib import contextmanager
from pathlib import Path

import structlog

_DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVIRONMENTS = ("production", "staging")

_MAX_BYTES = 10 * 1024 * 1024
_BACKUPS = 5

# Chatty third-party loggers kept at WARNING whatever the root level
_QUIET_LOGGERS = ("protean", "asyncio", "sqlalchemy.engine", "uvicorn.access")


def _environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """``LOG_LEVEL`` if set, otherwise the default for the running environment."""
    return os.getenv("LOG_LEVEL", _DEFAULT_LEVELS.get(_environment(), "INFO")).upper()


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "stockroom") -> None:
    log_level = level or get_log_level()
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [
        console,
        _rotating(log_path / f"{log_file_prefix}.log", log_level),
        _rotating(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer(environment: str):
    if environment in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def setup_structlog() -> None:
    environment = _environment()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "stockroom") -> None:
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def operation_context(**identifiers):
    """Bind ``identifiers`` to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(**{k: str(v) for k, v in identifiers.items() if v is not None}):
        yield
