"""Utility modules for Supplies API operations."""

from .decorators import handle_wb_api_errors
from .responses import format_error_response, format_success_response
from .validators import (
    parse_retry_after,
    validate_max_items,
    validate_max_value,
    validate_positive_integer,
    validate_supply_items,
)

__all__ = [
    "format_error_response",
    "format_success_response",
    "handle_wb_api_errors",
    "parse_retry_after",
    "validate_max_items",
    "validate_max_value",
    "validate_positive_integer",
    "validate_supply_items",
]
