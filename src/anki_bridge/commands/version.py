"""Show the AnkiConnect protocol version."""

import typer

from anki_bridge.actions.misc import Version
from anki_bridge.app_context import use_context


def version(ctx: typer.Context) -> None:
    """Show the protocol version of the running AnkiConnect."""
    app = use_context(ctx)
    app.out.print_version(app.invoke_or_exit(Version()))
