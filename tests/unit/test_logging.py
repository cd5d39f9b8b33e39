"""Тесты конфигурации логирования (structlog)."""

import logging
from datetime import date

import pytest
import structlog
from structlog.testing import LogCapture

from src.core.domain import Auction
from src.core.logging import (
    add_context,
    clear_context,
    configure_logging,
    get_log_level,
    get_logger,
)
from src.payments import InMemoryAuctionRepository, InMemoryPaymentRepository, PaymentGenerator


def capture_configured_pipeline() -> LogCapture:
    """configure_logging() с LogCapture вместо финального renderer-а."""
    configure_logging()
    capture = LogCapture()
    processors = structlog.get_config()["processors"]
    structlog.configure(
        processors=[*processors[:-1], capture],
        cache_logger_on_first_use=False,
    )
    return capture


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    clear_context()
    structlog.reset_defaults()
    root.handlers, root.level = handlers, level


class TestLogLevel:
    """Уровень логирования по окружению."""

    def test_explicit_log_level_wins(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.parametrize(
        "env, expected",
        [
            ("production", "INFO"),
            ("staging", "INFO"),
            ("development", "DEBUG"),
            ("test", "WARNING"),
            ("unknown", "INFO"),
        ],
    )
    def test_level_by_environment(self, monkeypatch, env, expected):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("ENVIRONMENT", env)
        assert get_log_level() == expected


class TestConfigureLogging:
    """Настройка structlog и stdlib logging."""

    def test_configure_sets_root_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.delenv("LOG_FILE", raising=False)
        configure_logging()

        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()

    def test_log_file_handler(self, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "payments.log"
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("LOG_FILE", str(log_file))
        configure_logging()

        get_logger("test").info("payment_generated", amount=75000)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "payment_generated" in log_file.read_text(encoding="utf-8")

    def test_context_is_merged(self, monkeypatch):
        """Контекст add_context попадает в события через настроенный pipeline."""
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.delenv("LOG_FILE", raising=False)
        configured = capture_configured_pipeline()

        add_context(run_id="run-1")
        get_logger("test").info("payment_generation_started")
        clear_context()
        get_logger("test").info("payment_generation_finished")

        started, finished = configured.entries
        assert started["event"] == "payment_generation_started"
        assert started["run_id"] == "run-1"
        assert "run_id" not in finished

    def test_generate_binds_run_context(self, monkeypatch):
        """generate() привязывает run_id ко всем событиям запуска и очищает его после."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("LOG_FILE", raising=False)
        configured = capture_configured_pipeline()

        PaymentGenerator(
            InMemoryAuctionRepository(
                [Auction(description="Quadro", closing_date=date(2020, 6, 1))]
            ),
            InMemoryPaymentRepository(),
            evaluator_name="Tiago",
        ).generate()
        get_logger("test").info("after_run")

        *run_entries, after = configured.entries
        run_ids = {entry.get("run_id") for entry in run_entries}
        assert len(run_entries) >= 3
        assert len(run_ids) == 1 and None not in run_ids
        assert all(entry["evaluator"] == "Tiago" for entry in run_entries)
        assert "run_id" not in after
