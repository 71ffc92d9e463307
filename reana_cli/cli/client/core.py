"""Core shared logic for the REANA API client.

Holds the immutable client configuration, the transport factory and the
response parser used by SyncCLIClient.
"""

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from reana_cli.cli.client.errors import APIError


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for client instances.

    Attributes:
        base_url: Server URL (e.g., https://reana.cern.ch)
        access_token: Token attached to every request
        verify: Whether TLS certificates are verified
        timeout: Request timeout in seconds
    """

    base_url: str
    access_token: str
    verify: bool = True
    timeout: float = 30.0


def build_transport(verify: bool = True) -> httpx.BaseTransport:
    """Create the HTTP transport used by the client.

    Args:
        verify: Verify TLS certificates; False accepts self-signed servers

    Returns:
        An httpx transport
    """
    return httpx.HTTPTransport(verify=verify)


def build_params(access_token: str, params: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Merge the access token into the query parameters, dropping unset ones."""
    merged: dict[str, Any] = {"access_token": access_token}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        merged[key] = value
    return merged


def parse_response(response: httpx.Response) -> Any:
    """Parse HTTP response, extracting JSON and handling errors.

    Successful responses (2xx) have their JSON body extracted and returned;
    an empty body yields an empty dict. Error responses (4xx, 5xx) raise
    APIError carrying the decoded body as payload.

    Args:
        response: httpx Response object

    Returns:
        Parsed JSON response (dict or list)

    Raises:
        APIError: For non-2xx responses or JSON parsing failures
    """
    if 200 <= response.status_code < 300:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                message="Invalid JSON response from the REANA server",
                status_code=response.status_code,
                details={
                    "error": str(e),
                    "response_text": response.text[:500],
                },
            ) from e

    try:
        payload = response.json()
    except ValueError:
        payload = {"message": response.text} if response.text else None

    if isinstance(payload, dict):
        error_message = payload.get("message") or payload.get("detail")
    elif payload:
        error_message = str(payload)
    else:
        error_message = None
    if not error_message:
        error_message = f"server returned status {response.status_code}"

    raise APIError(
        message=str(error_message),
        status_code=response.status_code,
        payload=payload,
    )
