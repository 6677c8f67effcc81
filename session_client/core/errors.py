"""Error types surfaced to callers and the error response normalizer"""

from typing import Any, Optional

import httpx


class AppError(Exception):
    """Normalized failure of a backend request"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        data: Any = None
    ):
        """
        Initialize application error

        Args:
            message: Human-readable message
            status_code: HTTP status code of the failed response
            code: Application error code reported by the backend
            data: Parsed response body, or the fallback object
        """
        super().__init__(message)
        self._message = message
        self._status_code = status_code
        self._code = code
        self._data = data

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    @property
    def code(self) -> Optional[str]:
        return self._code

    @property
    def data(self) -> Any:
        return self._data

    def __repr__(self) -> str:
        return (
            f"AppError(message={self._message!r}, status_code={self._status_code!r}, "
            f"code={self._code!r})"
        )


class RequestTimeoutError(Exception):
    """Raised when no response arrived within the configured timeout"""

    def __init__(self, url: str, timeout: float):
        super().__init__(f"Request to {url} timed out after {timeout:g}s")
        self.url = url
        self.timeout = timeout


def create_app_error(response: httpx.Response) -> AppError:
    """
    Build an AppError from a non-successful response

    The body is parsed as JSON when possible; otherwise a single-field
    object holding the status text stands in for it.

    Args:
        response: Failed HTTP response (already read)

    Returns:
        AppError carrying message, status code, optional code and body
    """
    try:
        error_data = response.json()
    except ValueError:
        error_data = {"message": response.reason_phrase}

    fields = error_data if isinstance(error_data, dict) else {}

    message = fields.get("message")
    if not isinstance(message, str):
        message = f"HTTP {response.status_code}"

    code = fields.get("code")
    if not isinstance(code, str):
        code = None

    return AppError(
        message,
        status_code=response.status_code,
        code=code,
        data=error_data
    )
