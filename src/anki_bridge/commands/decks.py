"""List deck names."""

import typer

from anki_bridge.actions.decks import DeckNames
from anki_bridge.app_context import use_context


def decks(ctx: typer.Context) -> None:
    """List all deck names."""
    app = use_context(ctx)
    app.out.print_decks(sorted(app.invoke_or_exit(DeckNames())))
