"""
pkgver.manifests.prober — Pick the manifest that decides a project's version.

Candidates are tried strictly in table order.  The first file that can be
read wins, whether or not it actually carries a version: a versionless
``Cargo.toml`` next to a perfectly good ``package.json`` resolves to
``None``.  Later candidates are never consulted once one has been read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pkgver.core.models import ManifestCandidate, ManifestFormat, ProbeReport
from pkgver.manifests.extractors import (
    extract_cargo_version,
    extract_composer_version,
    extract_gradle_version,
    extract_julia_version,
    extract_mix_version,
    extract_node_version,
    extract_poetry_version,
)

logger = logging.getLogger("pkgver.manifests.prober")

ReadText = Callable[[Path], str]

# Precedence order (highest first)
MANIFEST_CANDIDATES: tuple[ManifestCandidate, ...] = (
    ManifestCandidate("Cargo.toml", ManifestFormat.CARGO, extract_cargo_version),
    ManifestCandidate("package.json", ManifestFormat.NODE, extract_node_version),
    ManifestCandidate("pyproject.toml", ManifestFormat.POETRY, extract_poetry_version),
    ManifestCandidate("composer.json", ManifestFormat.COMPOSER, extract_composer_version),
    ManifestCandidate("build.gradle", ManifestFormat.GRADLE, extract_gradle_version),
    ManifestCandidate("Project.toml", ManifestFormat.JULIA, extract_julia_version),
    ManifestCandidate("mix.exs", ManifestFormat.MIX, extract_mix_version),
)


def read_text(path: Path) -> str:
    """Read *path* as UTF-8.  Raises ``OSError`` or ``UnicodeDecodeError``."""
    return path.read_text(encoding="utf-8")


def probe(base_dir: Path | str, read_text: ReadText = read_text) -> ProbeReport:
    """
    Resolve the version for *base_dir* and describe how it was found.

    *read_text* is the only filesystem access; it is called with
    ``base_dir / file_name`` for each candidate until one succeeds.
    """
    base = Path(base_dir)
    report = ProbeReport(base_dir=base)

    for candidate in MANIFEST_CANDIDATES:
        path = base / candidate.file_name
        try:
            text = read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping %s: %s", path, exc)
            report.skipped.append(candidate.file_name)
            continue

        report.selected = candidate.file_name
        report.format = candidate.format
        report.version = candidate.extractor(text)
        if report.version is None:
            logger.debug("%s has no usable version", path)
        else:
            logger.debug("%s -> %s", path, report.version)
        return report

    logger.debug("No manifest found in %s", base)
    return report


def resolve(base_dir: Path | str, read_text: ReadText = read_text) -> str | None:
    """Return the normalised package version for *base_dir*, or ``None``."""
    return probe(base_dir, read_text).version
