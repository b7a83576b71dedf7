"""Tests for logging configuration"""
import tempfile
import os
import logging
from pathlib import Path
from unittest.mock import patch

from config import Settings
from environment.properties import HostProperties
from environment.snapshot import init_environment_snapshot
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_snapshot_captured,
    log_server_startup,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self):
        """Test structured logging setup"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "logs" / "test.log"
            settings = Settings(log_file=log_file, log_level="DEBUG")

            setup_structured_logging(settings)

            assert log_file.parent.exists()
            logger = logging.getLogger("test")
            assert logger.isEnabledFor(logging.DEBUG)

    def test_setup_without_log_file(self):
        """Test console-only logging setup"""
        settings = Settings(log_level="WARNING")

        setup_structured_logging(settings)

        assert not logging.getLogger("test").isEnabledFor(logging.INFO)

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')
        assert hasattr(logger, 'warning')

    def test_log_snapshot_captured(self):
        """Test structured snapshot logging"""
        logger = get_logger("test")
        host = HostProperties(overrides={"os.name": "Linux"}, readers={})
        snapshot = init_environment_snapshot(host=host)

        # This should not raise an exception
        log_snapshot_captured(logger, snapshot)

    def test_log_server_startup(self):
        """Test structured server startup logging"""
        logger = get_logger("test")
        settings = Settings(overrides="os.name=Linux", denied="user.name")

        # This should not raise an exception
        log_server_startup(logger, settings)

    def test_log_error(self):
        """Test structured error logging"""
        logger = get_logger("test")
        error = ValueError("Test error")
        context = {"component": "test", "property": "user.home"}

        # This should not raise an exception
        log_error(logger, error, context)
        log_error(logger, error)  # Without context

    def test_development_vs_production_logging(self):
        """Test different logging configurations for development vs production"""
        settings = Settings()

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(settings)
            get_logger("test").info("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(settings)
            get_logger("test").info("Test production log")

    def test_logger_context_binding(self):
        """Test logger context binding"""
        logger = get_logger("test")

        bound_logger = logger.bind(property="os.name")
        bound_logger.info("Test message with context")

        more_bound = bound_logger.bind(operation="capture")
        more_bound.info("Test message with more context")
