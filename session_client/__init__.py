"""Async client for the session/message REST API"""

from .api import SessionApiClient, create_client
from .core import (
    AppError,
    RequestTimeoutError,
    RequestExecutor,
    RetryPolicy,
    NoRetryPolicy,
    BackoffRetryPolicy,
    load_config,
)
from .models import ClientConfig, RetryConfig, LoggingConfig

__version__ = "0.1.0"

__all__ = [
    "SessionApiClient",
    "create_client",
    "AppError",
    "RequestTimeoutError",
    "RequestExecutor",
    "RetryPolicy",
    "NoRetryPolicy",
    "BackoffRetryPolicy",
    "load_config",
    "ClientConfig",
    "RetryConfig",
    "LoggingConfig",
]
