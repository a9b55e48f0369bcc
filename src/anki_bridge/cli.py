"""CLI entry point for anki-bridge."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from anki_bridge.app_context import AppContext
from anki_bridge.client import AnkiClient
from anki_bridge.commands.decks import decks
from anki_bridge.commands.find import find
from anki_bridge.commands.stats import stats
from anki_bridge.commands.sync import sync
from anki_bridge.commands.version import version
from anki_bridge.config import Config
from anki_bridge.log import setup_logging
from anki_bridge.output import Output

app = TyperPlus(package_name="anki-bridge")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Directory with config.toml and the log file.")] = None,
    url: Annotated[str | None, typer.Option("--url", help="AnkiConnect endpoint.")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log every request to the log file.")] = False,
) -> None:
    """Talk to Anki through the AnkiConnect add-on."""
    cfg = Config.build(data_dir, url=url)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, debug=debug)
    ctx.obj = AppContext(out=Output(json_mode=json_output), client=AnkiClient(cfg), cfg=cfg)


app.command()(version)
app.command(aliases=["d"])(decks)
app.command(aliases=["f"])(find)
app.command()(stats)
app.command()(sync)
