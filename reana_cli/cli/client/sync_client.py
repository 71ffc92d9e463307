"""Synchronous HTTP client for the REANA server.

SyncCLIClient wraps httpx.Client. It attaches the access token to every
request, performs no retries, and turns transport failures into client
errors.
"""

from typing import Any, Optional

import httpx

from reana_cli.cli.client.core import (
    ClientConfig,
    build_params,
    build_transport,
    parse_response,
)
from reana_cli.cli.client.errors import ConnectionError, TimeoutError
from reana_cli.logging import get_logger

logger = get_logger(__name__)


class SyncCLIClient:
    """Synchronous HTTP client for REANA commands.

    Usage:
        with SyncCLIClient("https://reana.cern.ch", token) as client:
            result = client.get("/api/you")

    Attributes:
        config: Immutable client configuration
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        verify: bool = True,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the sync client.

        Args:
            base_url: Server URL
            access_token: Access token of the current user
            verify: Verify TLS certificates of the server
            timeout: Request timeout in seconds
        """
        self.config = ClientConfig(
            base_url=base_url.rstrip("/"),
            access_token=access_token,
            verify=verify,
            timeout=timeout,
        )
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> "SyncCLIClient":
        self._client = httpx.Client(
            transport=build_transport(self.config.verify),
            timeout=self.config.timeout,
        )
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _send(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one HTTP request and return the raw response.

        Raises:
            ConnectionError: Cannot reach the server
            TimeoutError: Request exceeded timeout
        """
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'with SyncCLIClient(...) as client:'"
            )

        url = f"{self.config.base_url}{endpoint}"
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(
                method=method,
                url=url,
                json=json,
                content=content,
                headers=headers,
                params=build_params(self.config.access_token, params),
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message=f"Request timed out after {self.config.timeout}s",
                details={"url": url, "timeout": self.config.timeout},
            ) from e
        except httpx.TransportError as e:
            raise ConnectionError(
                message=f"Could not connect to {self.config.base_url}",
                details={"url": url, "error": str(e)},
            ) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _make_request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make one HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint path (appended to base_url)
            json: JSON request body
            params: Query parameters; None values are left out

        Returns:
            Parsed JSON response

        Raises:
            ConnectionError: Cannot reach the server
            TimeoutError: Request exceeded timeout
            APIError: Server returned error response
        """
        response = self._send(method, endpoint, json=json, params=params)
        return parse_response(response)

    def upload(
        self,
        endpoint: str,
        content: bytes,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """POST raw bytes as an octet stream; returns the parsed JSON answer."""
        response = self._send(
            "POST",
            endpoint,
            params=params,
            content=content,
            headers={"Content-Type": "application/octet-stream"},
        )
        return parse_response(response)

    def download(
        self, endpoint: str, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """GET a binary resource.

        Returns:
            The successful response, body untouched

        Raises:
            APIError: Server returned error response
        """
        response = self._send("GET", endpoint, params=params)
        if not 200 <= response.status_code < 300:
            parse_response(response)
        return response

    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._make_request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        return self._make_request("POST", endpoint, json=json, params=params)

    def put(
        self,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        return self._make_request("PUT", endpoint, json=json, params=params)

    def delete(
        self,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        return self._make_request("DELETE", endpoint, json=json, params=params)
