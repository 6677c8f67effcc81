"""Endpoint functions for the session/message API"""

from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from ..core.config_loader import load_config
from ..core.executor import RequestExecutor
from ..core.retry import RetryPolicy
from ..models.config import ClientConfig
from ..models.session import CreateSessionRequest, SendMessageRequest

CreateSessionOptions = Union[CreateSessionRequest, Mapping[str, Any]]
SendMessagePayload = Union[SendMessageRequest, Mapping[str, Any]]


class SessionApiClient:
    """Typed wrappers around the backend REST endpoints"""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        retry_policy: Optional[RetryPolicy] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.config = config or ClientConfig()
        self.executor = RequestExecutor(
            self.config,
            retry_policy=retry_policy,
            http_client=http_client
        )

    async def close(self):
        await self.executor.close()

    async def __aenter__(self) -> "SessionApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # Sessions

    async def create_session(self, options: Optional[CreateSessionOptions] = None) -> Dict[str, Any]:
        """Create a session, optionally titled and/or nested under a parent"""
        if options is None:
            body: Dict[str, Any] = {}
        elif isinstance(options, CreateSessionRequest):
            body = options.to_payload()
        else:
            # Remove None values, same as the model form
            body = {k: v for k, v in options.items() if v is not None}
        return await self.executor.request("/session", method="POST", body=body)

    async def list_sessions(self) -> List[Dict[str, Any]]:
        return await self.executor.request("/session")

    async def delete_session(self, session_id: str) -> bool:
        return await self.executor.request(f"/session/{session_id}", method="DELETE")

    # Providers

    async def get_providers(self) -> Dict[str, Any]:
        return await self.executor.request("/config/providers")

    # Messages

    async def send_message(self, session_id: str, request: SendMessagePayload) -> Dict[str, Any]:
        """Post a message to a session and return the backend's reply"""
        if isinstance(request, SendMessageRequest):
            body = request.to_payload()
        else:
            body = dict(request)
        return await self.executor.request(
            f"/session/{session_id}/message",
            method="POST",
            body=body
        )

    # App

    async def get_app_info(self) -> Dict[str, Any]:
        return await self.executor.request("/app")

    async def initialize_app(self) -> bool:
        return await self.executor.request("/app/init", method="POST")

    async def get_config(self) -> Dict[str, Any]:
        return await self.executor.request("/config")


def create_client(
    config: Optional[ClientConfig] = None,
    retry_policy: Optional[RetryPolicy] = None
) -> SessionApiClient:
    """
    Build a client from explicit or loaded configuration

    Args:
        config: Client configuration (defaults to load_config())
        retry_policy: Optional policy replacing the configured backoff

    Returns:
        SessionApiClient
    """
    if config is None:
        config = load_config()
    return SessionApiClient(config, retry_policy=retry_policy)
