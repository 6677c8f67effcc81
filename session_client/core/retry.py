"""Retry policies applied around each timeout-bounded request attempt"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..models.config import RetryConfig
from ..utils import logger
from .errors import AppError, RequestTimeoutError

T = TypeVar("T")


class RetryPolicy(Protocol):
    """Anything that runs an async operation and decides how to reattempt it"""

    async def __call__(self, operation: Callable[[], Awaitable[T]]) -> T:
        ...


class NoRetryPolicy:
    """Run the operation exactly once"""

    async def __call__(self, operation: Callable[[], Awaitable[T]]) -> T:
        return await operation()


class BackoffRetryPolicy:
    """Exponential backoff retries driven by RetryConfig"""

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    ):
        """
        Initialize retry policy

        Args:
            config: Retry configuration (defaults to RetryConfig())
            sleep: Coroutine used to wait between attempts
        """
        self.config = config or RetryConfig()
        self._sleep = sleep

    def is_retryable(self, error: BaseException) -> bool:
        """
        Decide whether a failed attempt should be repeated

        Args:
            error: Exception raised by the attempt

        Returns:
            True if another attempt is allowed for this failure
        """
        if isinstance(error, AppError):
            return error.status_code in self.config.retry_on_status
        if isinstance(error, RequestTimeoutError):
            return self.config.retry_on_timeout
        if isinstance(error, httpx.TransportError):
            return self.config.retry_on_transport_error
        return False

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.log_retry(
            attempt=retry_state.attempt_number,
            max_attempts=self.config.max_retries + 1,
            delay=retry_state.next_action.sleep if retry_state.next_action else 0.0,
            error_type=type(error).__name__,
            error_message=str(error)
        )

    async def __call__(self, operation: Callable[[], Awaitable[T]]) -> T:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential(
                multiplier=self.config.initial_delay,
                exp_base=self.config.multiplier,
                max=self.config.max_delay
            ),
            retry=retry_if_exception(self.is_retryable),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True
        )
        return await retrying(operation)
