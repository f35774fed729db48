"""
pkgver.manifests — Version lookup across well-known package manifests.
"""

from __future__ import annotations

from pkgver.manifests.normalize import normalize_version
from pkgver.manifests.prober import MANIFEST_CANDIDATES, probe, read_text, resolve

__all__ = ["MANIFEST_CANDIDATES", "normalize_version", "probe", "read_text", "resolve"]
