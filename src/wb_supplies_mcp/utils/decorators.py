"""Decorators for Supplies API error handling."""

import functools
import json
import logging
import uuid
from datetime import datetime
from typing import Any, Callable

import requests

from ..exceptions import RateLimitError, WBAPIError
from .responses import format_error_response
from .validators import parse_retry_after

logger = logging.getLogger(__name__)


def _http_error_details(error: requests.HTTPError) -> list:
    if error.response is None:
        return []
    try:
        body = error.response.json()
    except ValueError:
        return [{"raw_response": error.response.text}]
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("errorText") or body.get("title")
        return [detail] if detail else [body]
    return [body]


def handle_wb_api_errors(func: Callable[..., str]) -> Callable[..., str]:
    """Decorator to handle Supplies API errors consistently.

    Exceptions raised by the wrapped tool are turned into a JSON error
    response so the MCP client always receives a structured result.

    Args:
        func: The function to decorate

    Returns:
        Decorated function that handles errors consistently
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        try:
            logger.info(f"Request {request_id}: Starting {func.__name__}")
            result = func(*args, **kwargs)

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.info(f"Request {request_id}: Completed {func.__name__} in {duration_ms}ms")

            return result

        except RateLimitError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.warning(f"Request {request_id}: Rate limit exceeded in {duration_ms}ms")

            return json.dumps(
                format_error_response(
                    "rate_limit_exceeded",
                    "Rate limit exceeded. Please wait before making another request.",
                    retry_after=e.retry_after,
                    request_id=request_id,
                ),
                indent=2,
            )

        except requests.HTTPError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            status_code = e.response.status_code if e.response is not None else None
            logger.exception(f"Request {request_id}: HTTP error {status_code} in {duration_ms}ms")

            retry_after = None
            if status_code == 401:
                error_code = "auth_failed"
                message = "Authentication failed. Check your WB_API_TOKEN."
            elif status_code == 403:
                error_code = "auth_failed"
                message = "Access forbidden. Check that the token has the Supplies category."
            elif status_code == 429:
                error_code = "rate_limit_exceeded"
                message = "Rate limit exceeded."
                retry_after = parse_retry_after(e.response.headers.get("X-Ratelimit-Retry"))
            else:
                error_code = "api_error"
                message = "Supplies API request failed"

            return json.dumps(
                format_error_response(
                    error_code,
                    message,
                    details=_http_error_details(e),
                    retry_after=retry_after,
                    request_id=request_id,
                ),
                indent=2,
            )

        except WBAPIError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.exception(f"Request {request_id}: API error in {duration_ms}ms: {e}")

            return json.dumps(
                format_error_response(
                    "api_error",
                    str(e),
                    details=[e.details] if e.details else None,
                    request_id=request_id,
                ),
                indent=2,
            )

        except ValueError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.exception(f"Request {request_id}: Validation error in {duration_ms}ms: {e}")

            return json.dumps(
                format_error_response("invalid_input", str(e), request_id=request_id),
                indent=2,
            )

        except Exception as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.exception(f"Request {request_id}: Unexpected error in {duration_ms}ms: {e}")

            return json.dumps(
                format_error_response(
                    "unexpected_error",
                    f"An unexpected error occurred: {e!s}",
                    request_id=request_id,
                ),
                indent=2,
            )

    return wrapper
