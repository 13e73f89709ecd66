"""Locate and read notichain configuration.

Two file shapes are recognised while walking up from the start directory:

- ``notichain.toml`` — the whole file is the config.
- ``pyproject.toml`` with a ``[tool.notichain]`` table.

In each directory ``notichain.toml`` is checked first.  ``NOTICHAIN_CONFIG``
short-circuits the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from notichain.config.models import NotichainConfig

CONFIG_FILENAME = "notichain.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "NOTICHAIN_CONFIG"


def _pyproject_has_table(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("notichain"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file at or above *start* (default: cwd)."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the notichain settings it holds.

    Raises:
        tomllib.TOMLDecodeError: the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("notichain", {}))
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> NotichainConfig:
    """Load the config sections from *path*, or from the discovered file.

    Returns code defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return NotichainConfig()
    return NotichainConfig.model_validate(read_config_table(path))
