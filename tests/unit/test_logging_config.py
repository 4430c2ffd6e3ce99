"""
Unit tests for sqlmask.utils.logging

Tests JSON formatting, console formatting, context logging, and
environment-based configuration.
"""

import json
import logging
import logging.handlers
import sys
from unittest.mock import patch

from sqlmask.utils.logging import (
    ConsoleFormatter,
    ContextLogger,
    JSONFormatter,
    configure_from_env,
    setup_logging,
    shutdown_logging,
)


def make_record(msg="Test message", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="/path/to/test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSONFormatter class"""

    def test_init_with_defaults(self):
        """Test initialization with default parameters"""
        formatter = JSONFormatter()

        assert formatter.include_timestamp is True
        assert formatter.include_hostname is True
        assert formatter.app_name == "sqlmask"
        assert formatter.hostname is not None

    def test_format_basic_log_record(self):
        """Test formatting a basic log record"""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test_logger"
        assert data["message"] == "Test message"
        assert data["app"] == "sqlmask"
        assert "timestamp" in data
        assert data["source"]["file"] == "/path/to/test.py"
        assert data["source"]["line"] == 42
        assert "context" not in data

    def test_format_without_timestamp_and_hostname(self):
        """Test optional fields can be disabled"""
        formatter = JSONFormatter(include_timestamp=False, include_hostname=False)
        data = json.loads(formatter.format(make_record()))

        assert "timestamp" not in data
        assert "hostname" not in data

    def test_format_with_extra_context(self):
        """Test extra fields are grouped under context"""
        data = json.loads(JSONFormatter().format(make_record(function="mask_email", prefix="")))

        assert data["context"] == {"function": "mask_email", "prefix": ""}

    def test_format_with_exception(self):
        """Test exception details are included"""
        try:
            raise ValueError("bad input")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad input"


class TestConsoleFormatter:
    """Test ConsoleFormatter class"""

    def test_no_colors_when_not_a_tty(self):
        """Test colors are disabled when stderr is not a terminal"""
        with patch.object(sys.stderr, "isatty", return_value=False):
            formatter = ConsoleFormatter(use_colors=True)
        assert formatter.use_colors is False

    def test_format_with_extra_context(self):
        """Test extra context is appended"""
        formatter = ConsoleFormatter(use_colors=False)
        result = formatter.format(make_record(component="udf"))

        assert "[INFO] test_logger: Test message" in result
        assert result.endswith(" [component=udf]")

    def test_colors_do_not_leak_into_record(self):
        """Test the record level name is restored after coloring"""
        formatter = ConsoleFormatter(use_colors=False)
        formatter.use_colors = True
        record = make_record(level=logging.WARNING)

        result = formatter.format(record)

        assert ConsoleFormatter.COLORS["WARNING"] in result
        assert record.levelname == "WARNING"


class TestContextLogger:
    """Test ContextLogger class"""

    def test_context_added_to_records(self, caplog):
        """Test fixed context and call kwargs are attached"""
        caplog.set_level(logging.INFO, logger="ctx_test")
        logger = ContextLogger("ctx_test", component="udf")

        logger.info("Registered function", function="mask_email")

        record = caplog.records[-1]
        assert record.component == "udf"
        assert record.function == "mask_email"

    def test_update_context(self):
        """Test context can be extended"""
        logger = ContextLogger("ctx_test", component="udf")
        logger.update_context(prefix="pii_")

        assert logger.get_context() == {"component": "udf", "prefix": "pii_"}

    def test_get_context_returns_copy(self):
        """Test returned context cannot modify the logger"""
        logger = ContextLogger("ctx_test", component="udf")
        logger.get_context()["component"] = "other"

        assert logger.get_context()["component"] == "udf"


class TestSetupLogging:
    """Test setup_logging and related functions"""

    def test_sets_level(self):
        """Test the root level is set"""
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self):
        """Test an invalid level falls back to INFO"""
        setup_logging(level="LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_replaces_handlers(self):
        """Test repeated setup does not stack handlers"""
        setup_logging(level="INFO")
        setup_logging(level="INFO")

        assert len(logging.getLogger().handlers) == 1

    def test_json_console_handler(self):
        """Test JSON formatter on the console handler"""
        setup_logging(json_format=True)

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)

    def test_file_handler(self, tmp_path):
        """Test rotating file handler writes to the log file"""
        log_file = tmp_path / "logs" / "sqlmask.log"
        setup_logging(level="INFO", log_file=str(log_file), console_output=False)

        logging.getLogger("sqlmask.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_file_handler_type(self, tmp_path):
        """Test the file handler rotates"""
        setup_logging(log_file=str(tmp_path / "app.log"), console_output=False)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.handlers.RotatingFileHandler)


class TestConfigureFromEnv:
    """Test configure_from_env function"""

    @patch("sqlmask.utils.logging.config.setup_logging")
    def test_defaults(self, mock_setup, monkeypatch):
        """Test defaults when no variables are set"""
        for name in ("LOG_LEVEL", "LOG_FILE", "LOG_JSON", "LOG_CONSOLE"):
            monkeypatch.delenv(name, raising=False)

        configure_from_env()

        mock_setup.assert_called_once_with(
            level="INFO",
            log_file=None,
            console_output=True,
            json_format=False,
        )

    @patch("sqlmask.utils.logging.config.setup_logging")
    def test_from_variables(self, mock_setup, monkeypatch):
        """Test values are read from the environment"""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FILE", "/tmp/sqlmask.log")
        monkeypatch.setenv("LOG_JSON", "yes")
        monkeypatch.setenv("LOG_CONSOLE", "false")

        configure_from_env()

        mock_setup.assert_called_once_with(
            level="DEBUG",
            log_file="/tmp/sqlmask.log",
            console_output=False,
            json_format=True,
        )


class TestShutdownLogging:
    """Test shutdown_logging function"""

    def test_closes_root_handlers(self, tmp_path):
        """Test all root handlers are detached"""
        setup_logging(log_file=str(tmp_path / "app.log"))

        with patch("logging.shutdown") as mock_shutdown:
            shutdown_logging()

        assert logging.getLogger().handlers == []
        mock_shutdown.assert_called_once()
