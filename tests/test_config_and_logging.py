"""
Tests for settings and the diagnostics logging adapter.
"""

import logging
from unittest.mock import MagicMock

from errorshield.core.config import Settings
from errorshield.domain.errors.ports import DiagnosticEvent
from errorshield.infrastructure.diagnostics import LoggingDiagnosticLogger


class TestSettings:
    """Tests for the disclosure mode derived from settings."""

    def test_production_by_default(self, monkeypatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("EXPOSE_ERRORS", raising=False)
        assert Settings(_env_file=None).disclose_errors is False

    def test_development_discloses(self) -> None:
        assert Settings(_env_file=None, environment="Development").disclose_errors is True

    def test_explicit_override_wins(self) -> None:
        settings = Settings(_env_file=None, environment="development", expose_errors=False)
        assert settings.disclose_errors is False

    def test_read_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("EXPOSE_ERRORS", raising=False)
        assert Settings(_env_file=None).disclose_errors is True


class TestLoggingDiagnosticLogger:
    """Tests for the logging adapter of the diagnostics port."""

    def test_logs_event_with_stack(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        adapter = LoggingDiagnosticLogger(logger)

        adapter.log_diagnostic(
            DiagnosticEvent("unclassified_failure", "RuntimeError", "boom", "Traceback")
        )

        logger.error.assert_called_once()
        args = logger.error.call_args.args
        assert "RuntimeError" in args
        assert "Traceback" in args

    def test_logs_event_without_stack(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        LoggingDiagnosticLogger(logger).log_diagnostic(
            DiagnosticEvent("unhandled_persistence_code", "40P01", "deadlock")
        )
        logger.error.assert_called_once_with(
            "%s: %s: %s", "unhandled_persistence_code", "40P01", "deadlock"
        )

    def test_transport_failure_is_swallowed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        logger.error.side_effect = OSError("stdout closed")

        LoggingDiagnosticLogger(logger).log_diagnostic(
            DiagnosticEvent("unclassified_failure", "RuntimeError", "boom")
        )

        logger.error.assert_called_once()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_resolve_level(self) -> None:
        from errorshield.shared.logging import resolve_level

        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("nonsense") == logging.INFO

    def test_diagnostics_survive_quiet_level(self) -> None:
        from errorshield.shared.logging import DIAGNOSTICS_LOGGER, configure_logging

        configure_logging("CRITICAL")
        assert logging.getLogger(DIAGNOSTICS_LOGGER).isEnabledFor(logging.ERROR)
