"""Wildberries Supplies API client and MCP server."""

from .api import HTTPTransport, RequestsTransport, SuppliesAPIClient
from .exceptions import InvalidArgumentError, RateLimitError, WBAPIError

__all__ = [
    "HTTPTransport",
    "InvalidArgumentError",
    "RateLimitError",
    "RequestsTransport",
    "SuppliesAPIClient",
    "WBAPIError",
]
