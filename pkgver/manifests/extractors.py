"""
pkgver.manifests.extractors — One version parser per manifest format.

Every extractor takes the raw text of a manifest and returns the normalised
version string, or ``None`` when the file is malformed, has no usable
version field, or a suppression rule applies (private npm packages, the
literal string ``"null"``).  Extractors never raise.

    Cargo.toml      [package] version
    package.json    "version"       (suppressed when "private": true)
    pyproject.toml  [tool.poetry] version
    composer.json   "version"
    build.gradle    version '...'   (top-level statement only)
    Project.toml    version         (top-level key only)
    mix.exs         version: "..."
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from typing import Any

from pkgver.manifests.normalize import normalize_version

logger = logging.getLogger("pkgver.manifests.extractors")

# Anchored so that plugin declarations such as
#   id 'test.plugin' version '0.2.0'
# inside a plugins { } block never match.
GRADLE_VERSION_RE = re.compile(r"""^version ['"](?P<version>[^'"]+)['"]$""", re.MULTILINE)
MIX_VERSION_RE = re.compile(r'version: "(?P<version>[^"]+)"', re.MULTILINE)


# ---------------------------------------------------------------------------
# Parse helpers
# ---------------------------------------------------------------------------

def _load_toml(text: str, label: str) -> dict[str, Any] | None:
    try:
        return tomllib.loads(text)
    except (tomllib.TOMLDecodeError, RecursionError) as exc:
        logger.debug("%s: invalid TOML (%s)", label, exc)
        return None


def _load_json(text: str, label: str) -> dict[str, Any] | None:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        logger.debug("%s: invalid JSON (%s)", label, exc)
        return None
    if not isinstance(data, dict):
        logger.debug("%s: top-level JSON value is not an object", label)
        return None
    return data


def _lookup_str(tree: Any, *keys: str) -> str | None:
    """Walk nested tables by *keys*; return the leaf only if it is a string."""
    node = tree
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, str) else None


def _from_raw(raw: str | None) -> str | None:
    if raw is None:
        return None
    return normalize_version(raw)


# ---------------------------------------------------------------------------
# Structured formats
# ---------------------------------------------------------------------------

def extract_cargo_version(text: str) -> str | None:
    """``Cargo.toml`` — ``[package] version``."""
    data = _load_toml(text, "Cargo.toml")
    return _from_raw(_lookup_str(data, "package", "version"))


def extract_node_version(text: str) -> str | None:
    """``package.json`` — ``version``, hidden for private packages."""
    data = _load_json(text, "package.json")
    if data is None:
        return None

    if data.get("private") is True:
        logger.debug("package.json: private package, version suppressed")
        return None

    raw = _lookup_str(data, "version")
    if raw == "null":
        logger.debug("package.json: version is the string 'null'")
        return None
    return _from_raw(raw)


def extract_poetry_version(text: str) -> str | None:
    """``pyproject.toml`` — ``[tool.poetry] version``."""
    data = _load_toml(text, "pyproject.toml")
    return _from_raw(_lookup_str(data, "tool", "poetry", "version"))


def extract_composer_version(text: str) -> str | None:
    data = _load_json(text, "composer.json")
    raw = _lookup_str(data, "version")
    if raw == "null":
        logger.debug("composer.json: version is the string 'null'")
        return None
    return _from_raw(raw)


def extract_julia_version(text: str) -> str | None:
    """``Project.toml`` — top-level ``version`` key."""
    data = _load_toml(text, "Project.toml")
    return _from_raw(_lookup_str(data, "version"))


# ---------------------------------------------------------------------------
# Free-text formats
# ---------------------------------------------------------------------------

def extract_gradle_version(text: str) -> str | None:
    match = GRADLE_VERSION_RE.search(text)
    if match is None:
        return None
    return normalize_version(match.group("version"))


def extract_mix_version(text: str) -> str | None:
    match = MIX_VERSION_RE.search(text)
    if match is None:
        return None
    return normalize_version(match.group("version"))
