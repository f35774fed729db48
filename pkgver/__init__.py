"""
pkgver — Current package version from a project's manifest.

Probes Cargo.toml, package.json, pyproject.toml, composer.json,
build.gradle, Project.toml and mix.exs (in that order) and reports the
version of the first one that exists, normalised to ``v1.2.3``.
"""

from importlib.metadata import version, PackageNotFoundError

from pkgver.manifests import normalize_version, probe, resolve

try:
    __version__ = version("pkgver")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["normalize_version", "probe", "resolve", "__version__"]
