"""
Tests for logging configuration
"""
import pytest
import structlog

from config.settings import settings
from src.realestate_directory.utils.logger import add_environment, get_logger, setup_logging


@pytest.fixture
def configured_logging():
    setup_logging()
    yield
    structlog.reset_defaults()


class TestLogger:
    def test_environment_added(self):
        event = add_environment(None, "info", {"event": "api_started"})
        assert event["environment"] == settings.environment

    def test_setup_configures_structlog(self, configured_logging):
        assert structlog.is_configured()
        get_logger(__name__).info("logger_configured", check=True)
