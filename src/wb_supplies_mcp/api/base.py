"""HTTP transport for Wildberries Supplies API interactions."""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

import requests

from ..constants import DEFAULT_TIMEOUT, SUPPLIES_API_URL
from ..exceptions import RateLimitError, WBAPIError
from ..utils.validators import parse_retry_after

logger = logging.getLogger(__name__)


class HTTPTransport(ABC):
    """Transport used by the API clients to reach the remote service."""

    @abstractmethod
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send a GET request and return the decoded response."""

    @abstractmethod
    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Send a POST request with a JSON body and return the decoded response."""


class RequestsTransport(HTTPTransport):
    """Token-authenticated transport built on requests."""

    def __init__(
        self,
        api_token: str,
        endpoint: str = SUPPLIES_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            api_token: Wildberries API token with access to the Supplies category
            endpoint: Supplies API base URL
            timeout: Request timeout in seconds
        """
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout

        # Common headers
        self.headers = {
            "Authorization": api_token,
            "user-agent": "WBSuppliesMCP/1.0 (Language=Python)",
            "content-type": "application/json",
        }

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._make_request("GET", path, params=params)

    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        return self._make_request("POST", path, params=params, data=json)

    def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Any = None,
    ) -> Any:
        """Make authenticated request with error handling.

        Args:
            method: HTTP method (GET, POST)
            path: API path (without base URL)
            params: Query parameters
            data: Request body data

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            RateLimitError: When rate limit is exceeded
            WBAPIError: When the response body is not valid JSON
            requests.HTTPError: For HTTP errors
        """
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        logger.info(f"Request {request_id}: Starting {method} {path}")

        url = f"{self.endpoint}{path}"

        try:
            response = requests.request(
                method=method,
                url=url,
                params=params,
                json=data,
                headers=self.headers,
                timeout=self.timeout,
            )

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)

            # Handle rate limiting
            if response.status_code == 429:
                retry_after = parse_retry_after(response.headers.get("X-Ratelimit-Retry"))
                logger.warning(f"Request {request_id}: Rate limit exceeded, retry after {retry_after}s")
                raise RateLimitError("Rate limit exceeded", retry_after)

            response.raise_for_status()

            logger.info(
                f"Request {request_id}: Success in {duration_ms}ms, "
                f"status={response.status_code}"
            )

            if not response.content:
                return None

            try:
                return response.json()
            except ValueError as e:
                raise WBAPIError(
                    "Supplies API returned a malformed response",
                    error_code="invalid_response",
                    details={"raw_response": response.text[:500]},
                ) from e

        except requests.HTTPError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.error(
                f"Request {request_id}: HTTP error in {duration_ms}ms, "
                f"status={e.response.status_code if e.response is not None else 'unknown'}"
            )
            raise
        except (RateLimitError, WBAPIError):
            raise
        except Exception as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.error(f"Request {request_id}: Unexpected error in {duration_ms}ms: {e}")
            raise
