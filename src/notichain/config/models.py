"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notichain.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from notichain.domain.decorators import DEFAULT_EMOJI, DEFAULT_TIMESTAMP_FORMAT


class TimestampConfig(BaseModel):
    """[timestamp] section."""

    model_config = {"frozen": True}

    format: str = DEFAULT_TIMESTAMP_FORMAT


class EmojiConfig(BaseModel):
    """[emoji] section."""

    model_config = {"frozen": True}

    default: str = DEFAULT_EMOJI


class ChainConfig(BaseModel):
    """[chain] section.

    ``default`` lists decorator specs innermost first and is used when a
    command is given no ``-d`` options.
    """

    model_config = {"frozen": True}

    default: list[str] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".notichain/plugins"


class NotichainConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    timestamp: TimestampConfig = Field(default_factory=TimestampConfig)
    emoji: EmojiConfig = Field(default_factory=EmojiConfig)
    chain: ChainConfig = Field(default_factory=ChainConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
