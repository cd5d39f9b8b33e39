"""
Logging configuration — structlog поверх стандартного logging.

Уровень логирования определяется окружением:
- LOG_LEVEL задаёт уровень явно
- иначе уровень выбирается по ENVIRONMENT (production/staging/development/test)
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog


LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_log_level() -> str:
    """Уровень логирования по переменным окружения."""
    env = (os.getenv("ENVIRONMENT") or "development").lower()
    return os.getenv("LOG_LEVEL", LEVEL_BY_ENVIRONMENT.get(env, "INFO")).upper()


def setup_stdlib_logging() -> None:
    """Настройка стандартного logging: stdout и, опционально, ротируемый файл (LOG_FILE)."""
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)


def setup_structlog() -> None:
    """Настройка structlog: JSON в production/staging, консольный вывод иначе."""
    env = (os.getenv("ENVIRONMENT") or "development").lower()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if env in ["production", "staging"]:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Полная настройка логирования приложения."""
    setup_stdlib_logging()
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Логгер с указанным именем."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Контекстные переменные, добавляемые во все последующие записи лога."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Очистка контекстных переменных."""
    structlog.contextvars.clear_contextvars()
