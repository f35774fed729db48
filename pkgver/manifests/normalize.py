"""
pkgver.manifests.normalize — Canonical display form for version strings.
"""

from __future__ import annotations


def normalize_version(raw: str) -> str:
    """
    Strip quote characters and surrounding whitespace, then ensure a
    leading ``v``.

    >>> normalize_version(' 0.1.0 ')
    'v0.1.0'
    >>> normalize_version('"v0.1.0"')
    'v0.1.0'
    """
    cleaned = raw.replace('"', "").strip()
    if cleaned.startswith("v"):
        return cleaned
    return f"v{cleaned}"
