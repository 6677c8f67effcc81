"""Utility functions and helpers"""

from .logger import setup_logging, logger, ClientLogger, JSONFormatter

__all__ = ["setup_logging", "logger", "ClientLogger", "JSONFormatter"]
