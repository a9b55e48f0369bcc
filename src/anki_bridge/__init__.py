"""Typed client for the AnkiConnect JSON-over-HTTP protocol."""

from anki_bridge.action import AnkiAction as AnkiAction
from anki_bridge.client import AnkiClient as AnkiClient
from anki_bridge.client import AsyncAnkiClient as AsyncAnkiClient
from anki_bridge.client import adispatch as adispatch
from anki_bridge.client import dispatch as dispatch
from anki_bridge.config import Config as Config
from anki_bridge.errors import AnkiBridgeError as AnkiBridgeError
from anki_bridge.errors import AnkiError as AnkiError
from anki_bridge.errors import DecodeError as DecodeError
from anki_bridge.errors import TransportError as TransportError
