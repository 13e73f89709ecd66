"""Shared pytest fixtures and test helpers for notichain tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from notichain.config.settings import NotichainSettings
from notichain.domain.chain import DECORATOR_REGISTRY
from notichain.domain.notifier import SimpleNotifier

FIXED_NOW = datetime(2024, 1, 15, 10, 30, 0)
FIXED_STAMP = "01/15/2024, 10:30:00"


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def outbox() -> list[str]:
    """List that a terminal notifier appends delivered messages to."""
    return []


@pytest.fixture
def terminal(outbox: list[str]) -> SimpleNotifier:
    """Terminal notifier recording into ``outbox``."""
    return SimpleNotifier(outbox.append)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> NotichainSettings:
    """Settings rooted at an empty temp directory with no env overrides."""
    monkeypatch.delenv("NOTICHAIN_CONFIG", raising=False)
    return NotichainSettings.from_cli(project_root=tmp_path)


@pytest.fixture(autouse=True)
def _restore_registry() -> Iterator[None]:
    """Undo decorator registrations made by a test."""
    snapshot = dict(DECORATOR_REGISTRY)
    yield
    DECORATOR_REGISTRY.clear()
    DECORATOR_REGISTRY.update(snapshot)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The root CLI reconfigures logging; put the previous handlers back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("notichain").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("notichain").setLevel(pkg_level)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory so no real config is found."""
    monkeypatch.delenv("NOTICHAIN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
