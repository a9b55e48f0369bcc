"""Centralized client configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from anki_bridge.transport import DEFAULT_TIMEOUT, DEFAULT_URL

DEFAULT_DATA_DIR = Path.home() / ".local" / "anki-bridge"


class Config(BaseModel):
    """Client-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Base directory for config and log files")
    url: str = Field(default=DEFAULT_URL, min_length=1, description="AnkiConnect endpoint")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP request timeout in seconds")
    api_key: str | None = Field(default=None, description="AnkiConnect API key, sent as 'key' when set")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "anki-bridge.log"

    @staticmethod
    def build(data_dir: Path | None = None, url: str | None = None) -> "Config":
        """Build a Config from defaults, optional config.toml, and explicit overrides."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("url"), str):
                kwargs["url"] = toml_data["url"]
            timeout = toml_data.get("timeout")
            if isinstance(timeout, int | float) and not isinstance(timeout, bool):
                kwargs["timeout"] = timeout
            if isinstance(toml_data.get("api_key"), str):
                kwargs["api_key"] = toml_data["api_key"]
        if url is not None:
            kwargs["url"] = url

        return Config(**kwargs)
