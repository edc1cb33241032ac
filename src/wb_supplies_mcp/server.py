#!/usr/bin/env python3
"""MCP Server for the Wildberries Supplies API using FastMCP.

This server provides authentication and tools for planning FBW supplies
through the Wildberries Supplies API: warehouse lookup, acceptance
coefficients, acceptance options, and the supply list with details.
"""

import json
import os
import secrets
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from .api.base import RequestsTransport
from .api.supplies import SuppliesAPIClient
from .constants import (
    DEFAULT_SUPPLIES_LIMIT,
    DEFAULT_SUPPLY_STATUS_IDS,
    DEFAULT_TIMEOUT,
    SUPPLIES_API_URL,
    SUPPLY_STATUSES,
)
from .utils.decorators import handle_wb_api_errors
from .utils.responses import format_error_response, format_success_response
from .utils.validators import validate_positive_integer, validate_supply_items

# Load environment variables from .env file
load_dotenv()

mcp: FastMCP = FastMCP(
    "wb-supplies-mcp",
    instructions=(
        "Tools for the Wildberries Supplies API: warehouses, acceptance coefficients, "
        "acceptance options, supplies and supply details. Call get_auth_token() first."
    ),
)

# Auth token storage - stores valid authentication tokens
auth_tokens: set[str] = set()

AUTH_TOKEN_DESCRIPTION = "Authentication token obtained from get_auth_token(). Required for this function to work."


def validate_auth_token(token: str) -> bool:
    """Validate if the provided auth token is valid."""
    return token in auth_tokens


def get_wb_api_token() -> str:
    """Read the Wildberries API token from the environment."""
    api_token = os.getenv("WB_API_TOKEN")
    if not api_token:
        raise ValueError("Missing required Wildberries credentials. Please set the WB_API_TOKEN environment variable.")
    return api_token


def create_supplies_client() -> SuppliesAPIClient:
    """Build a Supplies API client from environment configuration.

    Environment variables:
    - WB_API_TOKEN: Wildberries API token (required)
    - WB_SUPPLIES_API_URL: Supplies API base URL (optional)
    - WB_API_TIMEOUT: Request timeout in seconds (optional)
    """
    transport = RequestsTransport(
        get_wb_api_token(),
        endpoint=os.getenv("WB_SUPPLIES_API_URL", SUPPLIES_API_URL),
        timeout=float(os.getenv("WB_API_TIMEOUT", DEFAULT_TIMEOUT)),
    )
    return SuppliesAPIClient(transport)


def _auth_error() -> str:
    return json.dumps(
        format_error_response(
            "auth_failed",
            "Invalid or missing auth token. Please call get_auth_token() first to obtain a valid token.",
        ),
        indent=2,
    )


def _success(data: Any, **metadata: Any) -> str:
    if isinstance(data, list):
        metadata["items_returned"] = len(data)
    return json.dumps(format_success_response(data, metadata=metadata), indent=2, ensure_ascii=False)


@mcp.tool()
def get_auth_token() -> str:
    """Generate and return a new authentication token (session ID) that must be used for all other function calls.

    This is the FIRST function you must call before using any other functions in this MCP server.
    Store the returned token and pass it as the 'auth_token' parameter in all subsequent calls.

    Returns:
        str: A secure, randomly generated authentication token
    """
    token = secrets.token_hex(32)
    auth_tokens.add(token)
    return f"Authentication successful. Your auth token is: {token}"


@mcp.tool()
@handle_wb_api_errors
def get_acceptance_coefficients(
    auth_token: Annotated[str, AUTH_TOKEN_DESCRIPTION],
    warehouse_ids: Annotated[
        Optional[list[int]], "Warehouse IDs. Leave empty to get coefficients for all warehouses."
    ] = None,
) -> str:
    """Get acceptance coefficients for warehouses for the next 14 days.

    Acceptance is available only when coefficient is 0 or 1 and allowUnload is true.

    REQUIRES AUTHENTICATION: You must provide a valid auth_token obtained from get_auth_token().
    """
    if not validate_auth_token(auth_token):
        return _auth_error()

    client = create_supplies_client()
    result = client.acceptance_coefficients(warehouse_ids or [])
    return _success(result, warehouse_ids=warehouse_ids or "all")


@mcp.tool()
@handle_wb_api_errors
def get_acceptance_options(
    auth_token: Annotated[str, AUTH_TOKEN_DESCRIPTION],
    items: Annotated[
        list[dict[str, Any]],
        'Goods planned for the supply, e.g. [{"barcode": "2000000000012", "quantity": 10}]. At most 5000 items.',
    ],
    warehouse_id: Annotated[Optional[int], "Warehouse ID. Leave empty to check all warehouses."] = None,
) -> str:
    """Get the warehouses and packaging types available for the given goods.

    REQUIRES AUTHENTICATION: You must provide a valid auth_token obtained from get_auth_token().
    """
    if not validate_auth_token(auth_token):
        return _auth_error()

    is_valid, errors = validate_supply_items(items)
    if not is_valid:
        return json.dumps(
            format_error_response("invalid_input", "Input validation failed", details=errors),
            indent=2,
        )

    client = create_supplies_client()
    result = client.acceptance_options(items, warehouse_id)
    return _success(result, items_requested=len(items), warehouse_id=warehouse_id)


@mcp.tool()
@handle_wb_api_errors
def get_warehouses(
    auth_token: Annotated[str, AUTH_TOKEN_DESCRIPTION],
) -> str:
    """Get the list of Wildberries warehouses.

    REQUIRES AUTHENTICATION: You must provide a valid auth_token obtained from get_auth_token().
    """
    if not validate_auth_token(auth_token):
        return _auth_error()

    client = create_supplies_client()
    return _success(client.list_warehouses())


@mcp.tool()
@handle_wb_api_errors
def get_supplies(
    auth_token: Annotated[str, AUTH_TOKEN_DESCRIPTION],
    dates: Annotated[
        Optional[list[dict[str, Any]]],
        'Date filters, e.g. [{"from": "2025-01-01", "till": "2025-01-31", "type": "createDate"}]',
    ] = None,
    limit: Annotated[int, "Number of supplies to return (max 1000)"] = DEFAULT_SUPPLIES_LIMIT,
    offset: Annotated[int, "Number of supplies to skip"] = 0,
    status_ids: Annotated[
        Optional[list[int]], "Supply status IDs: 1-Not planned ... 6-Unloaded at the gate. Default: all"
    ] = None,
) -> str:
    """Get the list of supplies.

    REQUIRES AUTHENTICATION: You must provide a valid auth_token obtained from get_auth_token().
    """
    if not validate_auth_token(auth_token):
        return _auth_error()

    if not validate_positive_integer(offset, min_value=0):
        return json.dumps(
            format_error_response("invalid_input", "offset must be a non-negative integer"),
            indent=2,
        )

    invalid_statuses = [status_id for status_id in status_ids or [] if status_id not in SUPPLY_STATUSES]
    if invalid_statuses:
        return json.dumps(
            format_error_response(
                "invalid_input",
                f"Invalid status_ids: {invalid_statuses}. Must be one of: {list(SUPPLY_STATUSES)}",
            ),
            indent=2,
        )

    client = create_supplies_client()
    result = client.list_supplies(
        dates=dates or [],
        limit=limit,
        offset=offset,
        status_ids=status_ids or DEFAULT_SUPPLY_STATUS_IDS,
    )
    return _success(result, limit=limit, offset=offset)


@mcp.tool()
@handle_wb_api_errors
def get_supply_detail(
    auth_token: Annotated[str, AUTH_TOKEN_DESCRIPTION],
    supply_id: Annotated[int, "Supply ID"],
) -> str:
    """Get details of a single supply.

    REQUIRES AUTHENTICATION: You must provide a valid auth_token obtained from get_auth_token().
    """
    if not validate_auth_token(auth_token):
        return _auth_error()

    if not validate_positive_integer(supply_id):
        return json.dumps(
            format_error_response("invalid_input", f"Invalid supply_id: {supply_id}"),
            indent=2,
        )

    client = create_supplies_client()
    return _success(client.get_supply_detail(supply_id), supply_id=supply_id)


def main() -> None:
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
