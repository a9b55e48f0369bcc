"""Sync the collection with AnkiWeb."""

import typer

from anki_bridge.actions.misc import Sync
from anki_bridge.app_context import use_context


def sync(ctx: typer.Context) -> None:
    """Synchronize the collection with AnkiWeb."""
    app = use_context(ctx)
    app.invoke_or_exit(Sync())
    app.out.print_synced()
