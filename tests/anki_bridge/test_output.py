"""Tests for CLI output rendering."""

import json

import pytest
import typer

from anki_bridge.actions.decks import DeckStats
from anki_bridge.output import Output

STATS = DeckStats(deck_id=1651445861967, name="Japanese::JLPT N5", new_count=20, learn_count=0, review_count=0, total_in_deck=1501)


class TestJsonMode:
    """JSON envelopes on stdout."""

    def test_decks(self, capsys: pytest.CaptureFixture[str]):
        """Deck list is wrapped in an ok envelope."""
        Output(json_mode=True).print_decks(["Default", "Japanese"])
        assert json.loads(capsys.readouterr().out) == {"ok": True, "data": {"decks": ["Default", "Japanese"]}}

    def test_deck_stats(self, capsys: pytest.CaptureFixture[str]):
        """Deck stats keep their wire field names."""
        Output(json_mode=True).print_deck_stats([STATS])
        data = json.loads(capsys.readouterr().out)["data"]
        assert data["decks"][0]["total_in_deck"] == 1501

    def test_error(self, capsys: pytest.CaptureFixture[str]):
        """Errors print an error envelope and exit with code 1."""
        with pytest.raises(typer.Exit) as exc_info:
            Output(json_mode=True).print_error_and_exit("anki", "deck was not found")
        assert exc_info.value.exit_code == 1
        assert json.loads(capsys.readouterr().out) == {"ok": False, "error": "anki", "message": "deck was not found"}


class TestTextMode:
    """Human-readable text."""

    def test_cards(self, capsys: pytest.CaptureFixture[str]):
        """Card IDs are printed one per line."""
        Output(json_mode=False).print_cards([1, 2])
        assert capsys.readouterr().out == "1\n2\n"

    def test_deck_stats(self, capsys: pytest.CaptureFixture[str]):
        """Stats line names the deck and its counts."""
        Output(json_mode=False).print_deck_stats([STATS])
        assert capsys.readouterr().out == "Japanese::JLPT N5: new 20, learn 0, review 0, total 1501\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]):
        """Errors are printed to stderr."""
        with pytest.raises(typer.Exit):
            Output(json_mode=False).print_error_and_exit("transport", "Connection refused")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: Connection refused\n"
