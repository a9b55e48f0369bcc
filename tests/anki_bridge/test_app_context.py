"""Tests for AppContext.invoke_or_exit, the CLI's error boundary."""

import json

import pytest
import typer

from anki_bridge.actions.decks import DeckNames
from anki_bridge.app_context import AppContext
from anki_bridge.client import AnkiClient
from anki_bridge.config import Config
from anki_bridge.errors import TransportError
from anki_bridge.output import Output


class CannedTransport:
    def __init__(self, body: dict[str, object]) -> None:
        self._body = json.dumps(body).encode()

    def send(self, body: bytes) -> bytes:
        return self._body


class DownTransport:
    def send(self, body: bytes) -> bytes:
        raise TransportError("Request to http://127.0.0.1:8765 failed: Connection refused")


def make_context(transport: CannedTransport | DownTransport) -> AppContext:
    cfg = Config()
    return AppContext(out=Output(json_mode=True), client=AnkiClient(cfg, transport=transport), cfg=cfg)


class TestInvokeOrExit:
    """Successful results pass through; bridge errors exit with code 1."""

    def test_result(self):
        """Typed result is returned."""
        app = make_context(CannedTransport({"result": ["Default"], "error": None}))
        assert app.invoke_or_exit(DeckNames()) == ["Default"]

    def test_anki_error(self, capsys: pytest.CaptureFixture[str]):
        """AnkiConnect errors are printed with code 'anki'."""
        app = make_context(CannedTransport({"result": None, "error": "collection is not available"}))
        with pytest.raises(typer.Exit):
            app.invoke_or_exit(DeckNames())
        assert json.loads(capsys.readouterr().out) == {"ok": False, "error": "anki", "message": "collection is not available"}

    def test_transport_error(self, capsys: pytest.CaptureFixture[str]):
        """Transport failures are printed with code 'transport'."""
        app = make_context(DownTransport())
        with pytest.raises(typer.Exit):
            app.invoke_or_exit(DeckNames())
        assert json.loads(capsys.readouterr().out)["error"] == "transport"
