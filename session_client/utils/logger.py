"""Structured JSON logging"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional
import uuid


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ClientLogger:
    """Logger for client request events"""

    def __init__(self, name: str = "session_client"):
        """
        Initialize logger

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)

    @staticmethod
    def generate_request_id() -> str:
        """Generate new request ID"""
        return str(uuid.uuid4())

    def _log(self, level: int, message: str, **kwargs):
        """Internal log method with extra fields"""
        self.logger.log(level, message, extra={"extra": kwargs})

    def info(self, message: str, **kwargs):
        """Log info message"""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self._log(logging.WARNING, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message"""
        self._log(logging.DEBUG, message, **kwargs)

    def log_request(
        self,
        request_id: str,
        method: str,
        url: str,
        **kwargs
    ):
        """
        Log an outgoing request attempt

        Args:
            request_id: Per-call identifier
            method: HTTP method
            url: Full request URL
            **kwargs: Additional fields
        """
        self.debug(
            "Request sent",
            event_type="request",
            request_id=request_id,
            method=method,
            url=url,
            **kwargs
        )

    def log_response(
        self,
        request_id: str,
        method: str,
        url: str,
        status_code: int,
        elapsed_ms: Optional[float] = None,
        **kwargs
    ):
        """
        Log a received response

        Args:
            request_id: Per-call identifier
            method: HTTP method
            url: Full request URL
            status_code: HTTP status code
            elapsed_ms: Time between send and response
            **kwargs: Additional fields
        """
        self.debug(
            "Response received",
            event_type="response",
            request_id=request_id,
            method=method,
            url=url,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            **kwargs
        )

    def log_retry(
        self,
        attempt: int,
        max_attempts: int,
        delay: float,
        error_type: str,
        error_message: str,
        **kwargs
    ):
        """
        Log a failed attempt that is about to be repeated

        Args:
            attempt: Number of the attempt that failed (1-based)
            max_attempts: Total attempts allowed
            delay: Seconds until the next attempt
            error_type: Exception class name
            error_message: Exception message
            **kwargs: Additional fields
        """
        self.warning(
            "Request attempt failed, retrying",
            event_type="retry",
            attempt=attempt,
            max_attempts=max_attempts,
            delay=delay,
            error_type=error_type,
            error_message=error_message,
            **kwargs
        )


def setup_logging(log_level: str = "INFO"):
    """
    Set up logging configuration

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Create root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler with JSON formatter
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # Set level for third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# Global logger instance
logger = ClientLogger()
