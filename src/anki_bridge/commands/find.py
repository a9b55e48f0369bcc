"""Search cards."""

import typer

from anki_bridge.actions.cards import FindCards
from anki_bridge.app_context import use_context


def find(ctx: typer.Context, query: str = typer.Argument(help='Anki search query, e.g. "deck:Default is:due"')) -> None:
    """Print IDs of cards matching a search query."""
    app = use_context(ctx)
    app.out.print_cards(app.invoke_or_exit(FindCards(query=query)))
