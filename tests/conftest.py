"""Shared fixtures for the pkgver test-suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Never pick up the developer's own ~/.config/pkgver/config.toml."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("PKGVER_CONFIG", str(config_dir / "config.toml"))


@pytest.fixture
def project(tmp_path: Path) -> Callable[..., Path]:
    """Write manifest files into a fresh project directory.

    Usage: ``project(**{"Cargo.toml": "...", "package.json": "..."})``
    """

    def _make(**files: str | bytes) -> Path:
        for name, content in files.items():
            path = tmp_path / name
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
