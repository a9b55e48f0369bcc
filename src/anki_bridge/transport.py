"""HTTP transports: send one request body, return the response body or fail."""

from typing import Protocol

import httpx

from anki_bridge.errors import TransportError

DEFAULT_URL = "http://127.0.0.1:8765"
DEFAULT_TIMEOUT = 10.0

_HEADERS = {"Content-Type": "application/json"}


class Transport(Protocol):
    """Blocking transport."""

    def send(self, body: bytes) -> bytes:
        """Send a request body and return the raw response body.

        Raises:
            TransportError: The round trip failed.

        """
        ...


class AsyncTransport(Protocol):
    """Cooperative transport, suspends at the network boundary."""

    async def send(self, body: bytes) -> bytes:
        """Send a request body and return the raw response body.

        Raises:
            TransportError: The round trip failed.

        """
        ...


class HttpTransport:
    """Blocking HTTP POST via httpx. A connection is opened and closed per call."""

    def __init__(self, url: str = DEFAULT_URL, *, timeout: float = DEFAULT_TIMEOUT, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize the transport.

        Args:
            url: AnkiConnect endpoint.
            timeout: Timeout in seconds for the whole request.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).

        """
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def send(self, body: bytes) -> bytes:
        """POST the body and return the response content."""
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.post(self._url, content=body, headers=_HEADERS)
                resp.raise_for_status()
                return resp.content
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self._url} failed: {_describe(e)}") from e


class AsyncHttpTransport:
    """Non-blocking HTTP POST via httpx. A connection is opened and closed per call."""

    def __init__(
        self, url: str = DEFAULT_URL, *, timeout: float = DEFAULT_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize the transport.

        Args:
            url: AnkiConnect endpoint.
            timeout: Timeout in seconds for the whole request.
            transport: Optional httpx async transport (e.g. ``httpx.MockTransport`` in tests).

        """
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def send(self, body: bytes) -> bytes:
        """POST the body and return the response content."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(self._url, content=body, headers=_HEADERS)
                resp.raise_for_status()
                return resp.content
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self._url} failed: {_describe(e)}") from e


def _describe(e: httpx.HTTPError) -> str:
    """Short description of an httpx error; some (e.g. timeouts) carry an empty message."""
    return str(e) or type(e).__name__
