"""
pkgver.core.models — Shared types for the manifest resolver and its
presentation layer.

The resolver itself only needs :class:`ManifestFormat` and
:class:`ManifestCandidate`.  :class:`ProbeReport` and :class:`PackageConfig`
belong to the diagnostic and display side (``pkgver probe`` / ``pkgver show``).
"""

from __future__ import annotations

import logging
import os
import sys
import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger("pkgver.core.models")

CONFIG_ENV_VAR = "PKGVER_CONFIG"


# ---------------------------------------------------------------------------
# Cross-platform directory helpers
# ---------------------------------------------------------------------------

def get_global_config_dir() -> Path:
    """
    Return the user-level config directory for pkgver.

    - Windows:  %LOCALAPPDATA%\\pkgver
    - macOS:    ~/Library/Application Support/pkgver
    - Linux:    $XDG_CONFIG_HOME/pkgver  (default ~/.config/pkgver)

    Not created here; pkgver only reads from it.
    """
    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "pkgver"


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_global_config_dir() / "config.toml"


# ---------------------------------------------------------------------------
# Manifest table entries
# ---------------------------------------------------------------------------

class ManifestFormat(StrEnum):
    """Manifest formats the resolver understands."""
    CARGO = "cargo"             # Rust
    NODE = "node"               # npm / yarn / pnpm
    POETRY = "poetry"           # Python (Poetry)
    COMPOSER = "composer"       # PHP
    GRADLE = "gradle"           # JVM (Groovy DSL)
    JULIA = "julia"             # Julia Pkg
    MIX = "mix"                 # Elixir


@dataclass(frozen=True)
class ManifestCandidate:
    """One well-known manifest file and the function that reads its version."""
    file_name: str
    format: ManifestFormat
    extractor: Callable[[str], str | None]


class ProbeReport(BaseModel):
    """What happened during one resolution of a project directory."""
    base_dir: Path
    selected: str | None = None             # File name of the manifest that was read
    format: ManifestFormat | None = None
    version: str | None = None
    skipped: list[str] = Field(default_factory=list)   # Unreadable, in probe order

    @property
    def found_manifest(self) -> bool:
        return self.selected is not None


# ---------------------------------------------------------------------------
# Segment configuration
# ---------------------------------------------------------------------------

class PackageConfig(BaseModel):
    """
    Appearance of the package segment.

    Loaded from the ``[package]`` table of ``config.toml``::

        [package]
        symbol = "pkg "
        style = "bold green"
        disabled = false
    """
    symbol: str = "📦 "
    style: str = "bold 208"
    prefix: str = "is "
    disabled: bool = False

    @field_validator("style")
    @classmethod
    def _check_style(cls, value: str) -> str:
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ValueError(f"invalid style {value!r}: {exc}") from exc
        return value

    @classmethod
    def load(cls, path: Path | None = None) -> "PackageConfig":
        """Load from disk, returning defaults if the file is missing or broken."""
        path = path or default_config_path()
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        except OSError as exc:
            logger.warning("Cannot read config %s: %s", path, exc)
            return cls()

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            logger.warning("Ignoring malformed config %s: %s", path, exc)
            return cls()

        section = data.get("package", {})
        if not isinstance(section, dict):
            logger.warning("Ignoring config %s: [package] must be a table", path)
            return cls()

        try:
            return cls(**section)
        except ValidationError as exc:
            logger.warning("Ignoring invalid [package] config in %s: %s", path, exc)
            return cls()
