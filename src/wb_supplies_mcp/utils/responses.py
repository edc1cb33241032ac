"""Response envelopes returned by the MCP tools."""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional


def format_success_response(
    data: Any, metadata: Optional[Dict[str, Any]] = None, request_id: Optional[str] = None
) -> Dict[str, Any]:
    """Format a successful response.

    Args:
        data: The response data
        metadata: Optional metadata to include
        request_id: Request ID, generated when not given

    Returns:
        Formatted success response
    """
    response = {
        "success": True,
        "data": data,
        "metadata": {
            "timestamp": datetime.now().isoformat() + "Z",
            "request_id": request_id or str(uuid.uuid4()),
        },
    }

    if metadata:
        response["metadata"].update(metadata)

    return response


def format_error_response(
    error_code: str,
    message: str,
    details: Optional[list] = None,
    retry_after: Optional[int] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Format an error response.

    Args:
        error_code: Standard error code (auth_failed, rate_limit_exceeded, etc.)
        message: Human-readable error message
        details: Optional error details
        retry_after: For rate limit errors, seconds to wait
        request_id: Request ID, generated when not given

    Returns:
        Formatted error response
    """
    response = {
        "success": False,
        "error": error_code,
        "message": message,
        "metadata": {
            "timestamp": datetime.now().isoformat() + "Z",
            "request_id": request_id or str(uuid.uuid4()),
        },
    }

    if details:
        response["details"] = details
    if retry_after is not None:
        response["retry_after"] = retry_after

    return response
