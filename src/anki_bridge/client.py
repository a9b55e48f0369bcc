"""Dispatcher and clients: one typed request/response cycle per action."""

import logging
from typing import TypeVar

from anki_bridge.action import AnkiAction
from anki_bridge.config import Config
from anki_bridge.errors import AnkiError
from anki_bridge.protocol import ResponseEnvelope, build_request, decode_response, encode_request
from anki_bridge.transport import AsyncHttpTransport, AsyncTransport, HttpTransport, Transport

logger = logging.getLogger(__name__)

R = TypeVar("R")


def dispatch(action: AnkiAction[R], transport: Transport, *, api_key: str | None = None) -> R:
    """Send one action and return its typed result, blocking until the response arrives.

    Args:
        action: Action value; its fields are the request params.
        transport: Blocking transport that performs the HTTP round trip.
        api_key: Optional AnkiConnect API key.

    Raises:
        TransportError: The round trip failed.
        DecodeError: The response or its result could not be decoded.
        AnkiError: AnkiConnect returned an error string.

    """
    body = encode_request(build_request(action, api_key))
    logger.debug("Request: %s", action.action_name())
    return resolve(action, decode_response(transport.send(body)))


async def adispatch(action: AnkiAction[R], transport: AsyncTransport, *, api_key: str | None = None) -> R:
    """Send one action and return its typed result, yielding while the request is in flight.

    Same contract and errors as :func:`dispatch`.
    """
    body = encode_request(build_request(action, api_key))
    logger.debug("Request: %s", action.action_name())
    return resolve(action, decode_response(await transport.send(body)))


def resolve(action: AnkiAction[R], resp: ResponseEnvelope) -> R:
    """Map a response envelope onto the action's result.

    ``error`` wins even if ``result`` is also set; a missing result yields the
    result shape's default.

    Raises:
        AnkiError: ``error`` is not null.
        DecodeError: ``result`` does not match the result shape.

    """
    if resp.error is not None:
        raise AnkiError(resp.error)
    if resp.result is not None:
        return action.decode_result(resp.result)
    return action.default_result()


class AnkiClient:
    """Blocking client for AnkiConnect. Holds configuration only, no per-call state."""

    def __init__(self, cfg: Config, transport: Transport | None = None) -> None:
        """Initialize client with configuration.

        Args:
            cfg: Client configuration (endpoint, timeout, API key).
            transport: Override the HTTP transport, e.g. with a stub in tests.

        """
        self._cfg = cfg
        self._transport = transport or HttpTransport(cfg.url, timeout=cfg.timeout)

    def invoke(self, action: AnkiAction[R]) -> R:
        """Send an action and return its typed result."""
        return dispatch(action, self._transport, api_key=self._cfg.api_key)


class AsyncAnkiClient:
    """Asyncio client for AnkiConnect. Safe to use from concurrent tasks."""

    def __init__(self, cfg: Config, transport: AsyncTransport | None = None) -> None:
        """Initialize client with configuration.

        Args:
            cfg: Client configuration (endpoint, timeout, API key).
            transport: Override the HTTP transport, e.g. with a stub in tests.

        """
        self._cfg = cfg
        self._transport = transport or AsyncHttpTransport(cfg.url, timeout=cfg.timeout)

    async def invoke(self, action: AnkiAction[R]) -> R:
        """Send an action and return its typed result."""
        return await adispatch(action, self._transport, api_key=self._cfg.api_key)
