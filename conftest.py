"""Pytest configuration for test logging."""
from config.config import LOGGING_CONFIG
from main import configure_logging

configure_logging(LOGGING_CONFIG["level"])
