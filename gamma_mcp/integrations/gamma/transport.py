"""HTTP transport for the Gamma API.

The client depends on the Transport protocol only; HttpxTransport is the
production implementation. One httpx.AsyncClient per transport provides the
shared connection pool.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from gamma_mcp.core.errors import TransportError

MAX_CONTENT_LENGTH = 10_000_000  # 10MB


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and decoded JSON body of one exchange."""

    status_code: Optional[int]
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class Transport(Protocol):
    """Capability: send one request, get a response or a TransportError."""

    async def send(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None,
    ) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout_ms: int = 30000,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize transport.

        Args:
            base_url: Service root URL
            default_headers: Headers sent with every request (credential, UA)
            timeout_ms: Default per-call deadline
            client: Optional preconfigured AsyncClient (e.g. with MockTransport)
        """
        self.timeout_ms = timeout_ms
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers=dict(default_headers or {}),
            timeout=timeout_ms / 1000,
        )

    async def send(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None,
    ) -> TransportResponse:
        """Send one request.

        Raises:
            TransportError: If no response was received (timed_out set for deadlines)
        """
        timeout = (timeout_ms or self.timeout_ms) / 1000
        try:
            response = await self._client.request(
                method,
                path,
                headers=dict(headers or {}),
                json=json_body,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}", timed_out=True) from e
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if len(response.content) > MAX_CONTENT_LENGTH:
            raise TransportError(f"Response body exceeds {MAX_CONTENT_LENGTH} bytes")

        return TransportResponse(
            status_code=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=self._decode_body(response),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return {"message": response.text[:500]}
