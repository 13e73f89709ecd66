"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NOTICHAIN_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``notichain.toml`` or ``[tool.notichain]`` via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from notichain.config.discovery import find_config, read_config_table
from notichain.config.models import ChainConfig, EmojiConfig, PluginsConfig, TimestampConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from ``notichain.toml`` or ``[tool.notichain]``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_config_table(toml_path)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NotichainSettings(BaseSettings):
    """Frozen settings stored on the CLI context.

    Attributes:
        project_root: Directory holding ``notichain.toml`` (or CWD).
        config_path: Resolved config file, or None when none was found.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NOTICHAIN_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    timestamp: TimestampConfig = Field(default_factory=TimestampConfig)
    emoji: EmojiConfig = Field(default_factory=EmojiConfig)
    chain: ChainConfig = Field(default_factory=ChainConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def plugin_dir(self) -> Path:
        """Absolute local plugin directory."""
        return self.project_root / self.plugins.local_dir

    def decorator_defaults(self) -> dict[str, dict[str, Any]]:
        """Constructor defaults per built-in decorator name."""
        return {
            "timestamp": {"fmt": self.timestamp.format},
            "emoji": {"emoji": self.emoji.default},
        }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> NotichainSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that does not exist is an error; without
        one, ``notichain.toml`` is discovered by walking up from
        *project_root* (or CWD).
        """
        toml_path: Path | None = None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
