"""Show deck statistics."""

import typer

from anki_bridge.actions.decks import GetDeckStats
from anki_bridge.app_context import use_context


def stats(ctx: typer.Context, decks: list[str] = typer.Argument(help="Deck names")) -> None:
    """Show new/learn/review counts for the given decks."""
    app = use_context(ctx)
    result = app.invoke_or_exit(GetDeckStats(decks=decks))
    # Keyed by deck ID; print in the order the decks were requested
    order = {name: i for i, name in enumerate(decks)}
    app.out.print_deck_stats(sorted(result.values(), key=lambda s: order.get(s.name, len(order))))
