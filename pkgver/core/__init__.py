"""pkgver.core — Shared models and configuration."""
