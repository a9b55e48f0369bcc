"""Application context shared across CLI commands."""

from dataclasses import dataclass
from typing import TypeVar

import typer

from anki_bridge.action import AnkiAction
from anki_bridge.client import AnkiClient
from anki_bridge.config import Config
from anki_bridge.errors import AnkiBridgeError
from anki_bridge.output import Output

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared CLI state passed through Typer context."""

    out: Output
    client: AnkiClient
    cfg: Config

    def invoke_or_exit(self, action: AnkiAction[R]) -> R:
        """Invoke an action; on any bridge error print it and exit with code 1."""
        try:
            return self.client.invoke(action)
        except AnkiBridgeError as e:
            self.out.print_error_and_exit(e.code, e.message)


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
