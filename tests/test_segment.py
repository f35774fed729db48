"""Tests for the segment renderer and its configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pkgver.core.models import PackageConfig
from pkgver.segment import package_segment, render_segment


class TestRenderSegment:
    def test_default_segment(self) -> None:
        segment = render_segment("v0.1.0")

        assert segment is not None
        assert segment.plain == "is 📦 v0.1.0"

    def test_prefix_unstyled_symbol_and_version_styled(self) -> None:
        segment = render_segment("v0.1.0", PackageConfig(style="bold green"))

        assert segment is not None
        styled = {segment.plain[span.start:span.end] for span in segment.spans}
        assert styled == {"📦 ", "v0.1.0"}
        assert all(str(span.style) == "bold green" for span in segment.spans)

    def test_no_version_renders_nothing(self) -> None:
        assert render_segment(None) is None

    def test_disabled_renders_nothing(self) -> None:
        assert render_segment("v0.1.0", PackageConfig(disabled=True)) is None

    def test_custom_symbol_and_prefix(self) -> None:
        segment = render_segment("v2.0.0", PackageConfig(symbol="pkg ", prefix="at "))

        assert segment is not None
        assert segment.plain == "at pkg v2.0.0"

    def test_package_segment_resolves_directory(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text('[package]\nversion = "0.1.0"\n', encoding="utf-8")

        segment = package_segment(tmp_path)

        assert segment is not None
        assert segment.plain.endswith("v0.1.0")

    def test_package_segment_empty_directory(self, tmp_path: Path) -> None:
        assert package_segment(tmp_path) is None


class TestPackageConfig:
    def test_defaults(self) -> None:
        config = PackageConfig()

        assert config.symbol == "📦 "
        assert config.style == "bold 208"
        assert config.prefix == "is "
        assert config.disabled is False

    def test_invalid_style_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PackageConfig(style="bogus colour")

    def test_load_missing_file(self, tmp_path: Path) -> None:
        assert PackageConfig.load(tmp_path / "missing.toml") == PackageConfig()

    def test_load_package_table(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[package]\nsymbol = "pkg "\nstyle = "bold green"\n', encoding="utf-8")

        config = PackageConfig.load(path)

        assert config.symbol == "pkg "
        assert config.style == "bold green"
        assert config.prefix == "is "

    def test_load_malformed_toml(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[package\nsymbol = ", encoding="utf-8")

        assert PackageConfig.load(path) == PackageConfig()
        assert "malformed config" in caplog.text

    def test_load_invalid_values(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[package]\nstyle = "bogus colour"\n', encoding="utf-8")

        assert PackageConfig.load(path) == PackageConfig()
        assert "invalid [package] config" in caplog.text

    def test_load_package_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('package = "nope"\n', encoding="utf-8")

        assert PackageConfig.load(path) == PackageConfig()

    def test_load_uses_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "custom.toml"
        path.write_text("[package]\ndisabled = true\n", encoding="utf-8")
        monkeypatch.setenv("PKGVER_CONFIG", str(path))

        assert PackageConfig.load().disabled is True
