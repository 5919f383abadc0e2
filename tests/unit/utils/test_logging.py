"""Tests for logging utility."""

import logging
from io import StringIO


class TestLoggerConfiguration:
    """Test that logger configures correctly from settings."""

    def test_configure_logging_creates_logger(self):
        """configure_logging should return a configured logger."""
        from src.utils.logging import configure_logging

        logger = configure_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "career_engine"

    def test_configure_logging_respects_level(self):
        """Logger should respect the configured log level."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="DEBUG")
        assert logger.level == logging.DEBUG

        logger = configure_logging(level="WARNING")
        assert logger.level == logging.WARNING

    def test_configure_logging_default_level_is_info(self):
        """Default log level should be INFO."""
        from src.utils.logging import configure_logging

        logger = configure_logging()
        assert logger.level == logging.INFO

    def test_configure_logging_routes_engine_modules(self):
        """Module loggers under src.* should share the application handler and level."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="DEBUG")
        engine_logger = logging.getLogger("src")

        assert engine_logger.level == logging.DEBUG
        assert engine_logger.handlers == logger.handlers
        assert logging.getLogger("src.matching.service").getEffectiveLevel() == logging.DEBUG

    def test_reset_logging_clears_handlers(self):
        """reset_logging should leave both loggers unconfigured."""
        from src.utils.logging import configure_logging, reset_logging

        configure_logging()
        reset_logging()

        assert logging.getLogger("career_engine").handlers == []
        assert logging.getLogger("src").handlers == []
        assert logging.getLogger("src").propagate is True


class TestLogOutput:
    """Test that log output format is correct."""

    def test_log_message_includes_level(self):
        """Log messages should include the log level."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="INFO")

        buffer = StringIO()
        handler = logging.StreamHandler(buffer)
        handler.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(handler)

        logger.info("Test message")

        output = buffer.getvalue()
        assert "INFO" in output
        assert "Test message" in output

    def test_log_message_includes_logger_name(self):
        """Log messages should include the logger name."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="INFO")

        buffer = StringIO()
        handler = logging.StreamHandler(buffer)
        handler.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(handler)

        logger.warning("Careful")

        assert "career_engine" in buffer.getvalue()


class TestGetLogger:
    """Test the get_logger convenience function."""

    def test_get_logger_returns_child_logger(self):
        """get_logger should return a child of the main logger."""
        from src.utils.logging import configure_logging, get_logger

        configure_logging()

        logger = get_logger("my_module")
        assert logger.name == "career_engine.my_module"

    def test_get_logger_inherits_level(self):
        """Child logger should inherit parent's level."""
        from src.utils.logging import configure_logging, get_logger

        configure_logging(level="DEBUG")

        logger = get_logger("test_module")
        assert logger.getEffectiveLevel() == logging.DEBUG
