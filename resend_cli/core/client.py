"""
Core HTTP client for the Resend API.

Handles authentication, request/response, pagination, and error handling.
Every operation goes through ``APIClient.request`` (decoded result) or
``APIClient.request_void`` (status only).
"""

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from resend_cli.core.types import PaginationOptions

# Configuration
DEFAULT_BASE_URL = "https://api.resend.com"

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Base error class for CLI errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class TransportError(CLIError):
    """The request could not be sent or no response was received."""


class APIError(CLIError):
    """Non-2xx response. Carries the status code and the raw body text."""

    def __init__(self, status: int, body: str):
        super().__init__(f"API Error ({status}): {body}")
        self.status = status
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["status"] = self.status
        return result


class DecodeError(CLIError):
    """2xx response whose body does not parse into the expected type."""

    def __init__(self, cause: Exception, body: str):
        super().__init__(f"Failed to parse response: {cause!r}. Body: {body}")
        self.cause = cause
        self.body = body


class ValidationError(CLIError):
    """Validation error for local input/data issues (not API errors)."""


class ConfigError(CLIError):
    """Missing or unreadable configuration."""


class LocalIOError(CLIError):
    """Failure reading or writing a local file (batch, draft, body)."""


class APIClient:
    """
    Low-level HTTP client for the Resend API.

    Handles:
    - Bearer authentication
    - HTTP methods (GET, POST, PATCH, DELETE)
    - Error handling and response decoding
    - Cursor pagination query parameters

    The client holds only the credential and base URL and never mutates them,
    so one instance can be shared freely.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: Resend API key
            base_url: API base URL
            timeout: Socket timeout in seconds; None leaves the urllib default

        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_url(self, path: str, pagination: PaginationOptions | None = None) -> str:
        """Build full URL from path and optional pagination."""
        url = f"{self._base_url}{path}"
        if pagination is not None:
            params = pagination.to_params()
            if params:
                url = f"{url}?{urllib.parse.urlencode(params)}"
        return url

    def _send(
        self,
        method: str,
        path: str,
        data: Any = None,
        pagination: PaginationOptions | None = None,
    ) -> tuple[int, bytes]:
        """
        Send one HTTP request.

        Args:
            method: HTTP method
            path: API path (e.g., /domains/{id})
            data: JSON-serializable request body
            pagination: Query modifiers for list endpoints

        Returns:
            (status code, raw body bytes)

        Raises:
            TransportError: When no response was received

        """
        url = self._build_url(path, pagination)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = json.dumps(data).encode("utf-8") if data is not None else None
        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        logger.debug("%s %s", method, url)
        req = urllib.request.Request(url, data=body, headers=headers, method=method)
        try:
            with urllib.request.urlopen(req, **kwargs) as response:
                status = response.status
                raw = response.read()
        except urllib.error.HTTPError as e:
            status = e.code
            try:
                raw = e.read()
            except (http.client.HTTPException, OSError) as read_error:
                raise TransportError(f"Connection error: {read_error!r}") from read_error
        except urllib.error.URLError as e:
            raise TransportError(f"Connection error: {e.reason}") from e
        except http.client.HTTPException as e:
            raise TransportError(f"Connection error: {e!r}") from e
        except OSError as e:
            raise TransportError(f"Connection error: {e}") from e

        logger.debug("%s %s -> %d", method, url, status)
        return status, raw

    @staticmethod
    def _check_status(status: int, raw: bytes) -> None:
        if not 200 <= status < 300:
            raise APIError(status, raw.decode("utf-8", errors="replace"))

    @staticmethod
    def _decode(raw: bytes, parser: Callable[[Any], T] | None) -> T:
        """Decode a success body; an empty body decodes as ``{}``."""
        try:
            text = raw.decode("utf-8")
            payload = json.loads(text) if text else {}
            return parser(payload) if parser else payload
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # UnicodeDecodeError is a ValueError
            raise DecodeError(e, raw.decode("utf-8", errors="replace")) from e

    def request(
        self,
        method: str,
        path: str,
        parser: Callable[[Any], T] | None = None,
        data: Any = None,
        pagination: PaginationOptions | None = None,
    ) -> T:
        """
        Make a request and decode the response.

        Args:
            method: HTTP method
            path: API path
            parser: Builds the response type from decoded JSON; None returns the raw JSON
            data: Request body
            pagination: Query modifiers for list endpoints

        Returns:
            Parsed response

        Raises:
            TransportError: On network failure
            APIError: On non-2xx status
            DecodeError: On a 2xx body that does not match the expected type

        """
        status, raw = self._send(method, path, data, pagination)
        self._check_status(status, raw)
        return self._decode(raw, parser)

    def request_void(self, method: str, path: str, data: Any = None) -> None:
        """Make a request judged by status code only."""
        status, raw = self._send(method, path, data)
        self._check_status(status, raw)

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    def get(
        self,
        path: str,
        parser: Callable[[Any], T] | None = None,
        pagination: PaginationOptions | None = None,
    ) -> T:
        """Make a GET request."""
        return self.request("GET", path, parser, pagination=pagination)

    def post(self, path: str, parser: Callable[[Any], T] | None = None, data: Any = None) -> T:
        """Make a POST request."""
        return self.request("POST", path, parser, data=data)

    def patch(self, path: str, parser: Callable[[Any], T] | None = None, data: Any = None) -> T:
        """Make a PATCH request."""
        return self.request("PATCH", path, parser, data=data)

    def delete(self, path: str) -> None:
        """Make a DELETE request."""
        self.request_void("DELETE", path)
