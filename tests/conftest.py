"""Shared pytest fixtures and test helpers for vetted tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from vetted.config.settings import VettedSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ``VETTED_*`` variables inherited from the outer shell."""
    for key in list(os.environ):
        if key.startswith("VETTED_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> VettedSettings:
    """Settings with code-baked defaults (no TOML, no env)."""
    return VettedSettings()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray vetted.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes vetted.toml into the temp dir."""

    def _write(body: str) -> Path:
        path = tmp_path / "vetted.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
