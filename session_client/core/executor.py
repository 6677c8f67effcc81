"""Request execution with timeout, retry and error normalization"""

import asyncio
import time
from typing import Any, Dict, Optional

import httpx

from ..models.config import ClientConfig
from ..utils import logger
from .errors import RequestTimeoutError, create_app_error
from .retry import BackoffRetryPolicy, RetryPolicy

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class RequestExecutor:
    """Perform JSON requests against the backend"""

    def __init__(
        self,
        config: ClientConfig,
        retry_policy: Optional[RetryPolicy] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize request executor

        Args:
            config: Client configuration
            retry_policy: Policy wrapped around every attempt
                (defaults to BackoffRetryPolicy(config.retry))
            http_client: Shared httpx client; the executor closes only
                clients it created itself
        """
        self.config = config
        self.retry_policy = retry_policy or BackoffRetryPolicy(config.retry)
        self.http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True
            )
            self._owns_client = True
        return self.http_client

    async def close(self):
        """Close HTTP client"""
        if self.http_client and self._owns_client:
            await self.http_client.aclose()
        self.http_client = None

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def build_url(self, endpoint: str) -> str:
        """Prefix an endpoint path with the configured base URL"""
        return f"{self.config.base_url}{endpoint}"

    def build_headers(self, headers: Optional[Dict[str, str]] = None) -> httpx.Headers:
        """Merge default, configured and per-call headers (later wins, names case-insensitive)"""
        merged = httpx.Headers(DEFAULT_HEADERS)
        merged.update(self.config.headers)
        merged.update(headers or {})
        return merged

    async def _send(
        self,
        method: str,
        url: str,
        headers: httpx.Headers,
        body: Any,
        request_id: str
    ) -> Any:
        """Issue one HTTP request and decode the outcome"""
        client = await self._get_http_client()
        logger.log_request(request_id, method, url)
        started = time.monotonic()

        try:
            response = await client.request(
                method,
                url,
                headers=headers,
                json=body
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(url, self.config.timeout) from e

        logger.log_response(
            request_id,
            method,
            url,
            response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 2)
        )

        if not response.is_success:
            raise create_app_error(response)

        return response.json()

    async def _attempt(
        self,
        method: str,
        url: str,
        headers: httpx.Headers,
        body: Any,
        request_id: str
    ) -> Any:
        """Run one request bounded by the configured timeout"""
        try:
            return await asyncio.wait_for(
                self._send(method, url, headers, body, request_id),
                timeout=self.config.timeout
            )
        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(url, self.config.timeout) from e

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Perform a request and return the decoded JSON body

        Args:
            endpoint: Path appended to the base URL (e.g. "/session")
            method: HTTP method
            body: JSON-serializable request body, or None for no body
            headers: Per-call headers, overriding defaults on conflict

        Returns:
            Decoded JSON response body

        Raises:
            AppError: If the backend answered with a non-2xx status
            RequestTimeoutError: If no response arrived in time
            httpx.RequestError: If the transport failed
            ValueError: If a successful response body is not valid JSON
        """
        url = self.build_url(endpoint)
        merged_headers = self.build_headers(headers)
        request_id = logger.generate_request_id()

        async def operation() -> Any:
            return await self._attempt(method, url, merged_headers, body, request_id)

        return await self.retry_policy(operation)
