"""Platform REST API client library.

Architecture:
- client.py: HTTP client with bearer authentication and error mapping
- exceptions.py: Typed exceptions, including the "not found" condition
  lifecycle callbacks use to report a vanished resource

Usage:
    from tfprovider.core.platform import PlatformClient, NotFoundError

    client = PlatformClient("https://example.cloud.databricks.com", token="dapi...")
    try:
        client.get("/api/2.0/groups/get", params={"group_id": "123"})
    except NotFoundError:
        ...
"""
from .client import PlatformClient, REQUEST_TIMEOUT
from .exceptions import PlatformError, APIError, NotFoundError, is_not_found

__all__ = [
    "PlatformClient",
    "REQUEST_TIMEOUT",
    "PlatformError",
    "APIError",
    "NotFoundError",
    "is_not_found",
]
