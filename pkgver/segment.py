"""
pkgver.segment — Rich rendering of the package segment.

The segment reads ``is 📦 v1.2.3``: the prefix is plain, the symbol and
version carry the configured style.  Nothing is rendered when no version
was resolved or the segment is disabled.
"""

from __future__ import annotations

from pathlib import Path

from rich.text import Text

from pkgver.core.models import PackageConfig
from pkgver.manifests import resolve


def render_segment(version: str | None, config: PackageConfig | None = None) -> Text | None:
    """Build the segment for an already-resolved *version*."""
    config = config or PackageConfig()
    if version is None or config.disabled:
        return None

    segment = Text(config.prefix)
    segment.append(config.symbol, style=config.style)
    segment.append(version, style=config.style)
    return segment


def package_segment(base_dir: Path | str, config: PackageConfig | None = None) -> Text | None:
    """Resolve *base_dir* and render its segment in one step."""
    config = config or PackageConfig()
    if config.disabled:
        return None
    return render_segment(resolve(base_dir), config)
