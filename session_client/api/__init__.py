"""REST endpoint wrappers"""

from .client import SessionApiClient, create_client

__all__ = ["SessionApiClient", "create_client"]
