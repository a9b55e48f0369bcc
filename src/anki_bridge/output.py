"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201  # print() is how the output layer writes to the terminal

import json
import sys
from typing import NoReturn

import typer

from anki_bridge.actions.decks import DeckStats


class Output:
    """Renders command results as JSON envelopes or human-readable text."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _emit(self, data: dict[str, object], lines: list[str]) -> None:
        """Print a success result as one JSON envelope or as text lines."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            for line in lines:
                print(line)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_version(self, version: int) -> None:
        """Print the AnkiConnect protocol version."""
        self._emit({"version": version}, [f"AnkiConnect protocol version {version}."])

    def print_decks(self, names: list[str]) -> None:
        """Print deck names, one per line."""
        self._emit({"decks": names}, names)

    def print_cards(self, card_ids: list[int]) -> None:
        """Print card IDs, one per line."""
        self._emit({"cards": card_ids}, [str(card_id) for card_id in card_ids])

    def print_deck_stats(self, stats: list[DeckStats]) -> None:
        """Print per-deck card counts."""
        self._emit(
            {"decks": [s.model_dump() for s in stats]},
            [f"{s.name}: new {s.new_count}, learn {s.learn_count}, review {s.review_count}, total {s.total_in_deck}" for s in stats],
        )

    def print_synced(self) -> None:
        """Print sync confirmation."""
        self._emit({}, ["Collection synced."])
