"""Wildberries Supplies API client modules."""

from .base import HTTPTransport, RequestsTransport
from .supplies import SuppliesAPIClient

__all__ = ["HTTPTransport", "RequestsTransport", "SuppliesAPIClient"]
