"""Core request machinery"""

from .config_loader import ConfigLoader, load_config
from .errors import AppError, RequestTimeoutError, create_app_error
from .retry import RetryPolicy, NoRetryPolicy, BackoffRetryPolicy
from .executor import RequestExecutor, DEFAULT_HEADERS

__all__ = [
    "ConfigLoader",
    "load_config",
    "AppError",
    "RequestTimeoutError",
    "create_app_error",
    "RetryPolicy",
    "NoRetryPolicy",
    "BackoffRetryPolicy",
    "RequestExecutor",
    "DEFAULT_HEADERS",
]
