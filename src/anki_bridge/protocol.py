"""Request/Response envelopes of the AnkiConnect protocol.

JSON over HTTP POST, one envelope per request body.

Request:  {"action": "areDue", "version": 6, "params": {"cards": [1502098034045]}}
No params: {"action": "deckNames", "version": 6}
Response: {"result": [false], "error": null}
Error:    {"result": null, "error": "deck was not found"}
"""

import json
from dataclasses import dataclass
from typing import Any

from anki_bridge.action import AnkiAction
from anki_bridge.errors import DecodeError


@dataclass(frozen=True)
class RequestEnvelope:
    """Outgoing envelope: action name, protocol version, optional params and API key."""

    action: str
    version: int
    params: dict[str, Any] | None = None
    key: str | None = None


@dataclass(frozen=True)
class ResponseEnvelope:
    """Incoming envelope. Both fields may be set; the dispatcher decides precedence."""

    result: Any = None
    error: str | None = None


def build_request(action: AnkiAction[Any], api_key: str | None = None) -> RequestEnvelope:
    """Build the request envelope for an action value.

    Parameterless actions get no ``params`` at all, not an empty object.
    """
    params = action.params() if action.has_params() else None
    return RequestEnvelope(action=action.action_name(), version=action.VERSION, params=params, key=api_key)


def encode_request(req: RequestEnvelope) -> bytes:
    """Serialize a RequestEnvelope to UTF-8 JSON bytes, omitting unset optional keys."""
    payload: dict[str, Any] = {"action": req.action, "version": req.version}
    if req.params is not None:
        payload["params"] = req.params
    if req.key is not None:
        payload["key"] = req.key
    return json.dumps(payload).encode()


def decode_response(data: bytes) -> ResponseEnvelope:
    """Deserialize JSON bytes into a ResponseEnvelope. Missing keys read as null.

    Raises:
        DecodeError: Body is not JSON (code: ``invalid_json``) or not an envelope
            object (code: ``invalid_envelope``).

    """
    try:
        obj = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError("invalid_json", f"Response is not valid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise DecodeError("invalid_envelope", f"Response is not a JSON object: {type(obj).__name__}")
    error = obj.get("error")
    if error is not None and not isinstance(error, str):
        raise DecodeError("invalid_envelope", f"Response 'error' is not a string: {error!r}")
    return ResponseEnvelope(result=obj.get("result"), error=error)
