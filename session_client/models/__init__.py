"""Data models for the client"""

from .session import (
    Session,
    CreateSessionRequest,
    SendMessageRequest,
    Message,
    ProvidersResponse,
)

from .config import (
    RetryConfig,
    LoggingConfig,
    ClientConfig,
)

__all__ = [
    # Session models
    "Session",
    "CreateSessionRequest",
    "SendMessageRequest",
    "Message",
    "ProvidersResponse",
    # Config models
    "RetryConfig",
    "LoggingConfig",
    "ClientConfig",
]
