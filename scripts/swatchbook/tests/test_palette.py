"""
Tests for the palette pipeline and page rendering.

Tests cover:
- Query-string path extraction and default fallback
- build_palette with the static resolver
- HSL generation trigger for the source theme
- Rendered page structure
"""

from __future__ import annotations

from pathlib import Path

import pytest

from swatchbook.config import PaletteConfig
from swatchbook.errors import MissingPathError, ResourceNotFoundError
from swatchbook.palette import build_palette, get_css_path, resolve_theme
from swatchbook.templates import format_swatch, render_page
from swatchbook.swatches import Swatch


# =============================================================================
# Path selection
# =============================================================================


@pytest.mark.evergreen
class TestGetCssPath:
    """Tests for get_css_path."""

    def test_query_path(self) -> None:
        assert get_css_path("?css=themes/hsl.css", "themes/hex.css") == "themes/hsl.css"

    def test_default_when_no_query(self) -> None:
        assert get_css_path("", "themes/hex.css") == "themes/hex.css"
        assert get_css_path(None, "themes/hex.css") == "themes/hex.css"

    def test_default_when_query_has_other_keys(self) -> None:
        assert get_css_path("?theme=dark", "themes/hex.css") == "themes/hex.css"

    def test_empty_value_uses_default(self) -> None:
        assert get_css_path("?css=", "themes/hex.css") == "themes/hex.css"

    def test_missing_without_default(self) -> None:
        with pytest.raises(MissingPathError, match="No css path provided"):
            get_css_path("", None)

    def test_value_taken_verbatim(self) -> None:
        assert get_css_path("?css=a/b.css&x=1", None) == "a/b.css&x=1"


# =============================================================================
# Pipeline
# =============================================================================


@pytest.mark.evergreen
class TestBuildPalette:
    """Tests for build_palette with the static resolver."""

    def test_hex_theme(self, in_theme_dir: Path) -> None:
        result = build_palette("themes/hex.css")

        assert result.theme_name == "hex.css"
        assert result.stylesheet_href.endswith("/themes/hex.css")
        assert [s.property for s in result.swatches] == list(result.theme.names)
        assert len(result.swatches) == 6

    def test_hex_theme_generates_hsl(self, in_theme_dir: Path) -> None:
        result = build_palette("themes/hex.css")

        assert result.generated_css is not None
        assert "--dh-color-gray-hue: 0deg;" in result.generated_css
        assert "--dh-color-blue-hue:" in result.generated_css
        assert "accent" not in result.generated_css

    def test_other_theme_does_not_generate(self, in_theme_dir: Path) -> None:
        assert build_palette("themes/hsl.css").generated_css is None

    def test_generate_override(self, in_theme_dir: Path) -> None:
        assert build_palette("themes/hex.css", generate=False).generated_css is None
        assert build_palette("themes/hsl.css", generate=True).generated_css == ""

    def test_configured_source_theme(self, in_theme_dir: Path) -> None:
        config = PaletteConfig(hsl_source_theme="hsl.css")

        assert build_palette("themes/hsl.css", config=config).generated_css is not None
        assert build_palette("themes/hex.css", config=config).generated_css is None

    def test_hsl_values_unchanged(self, in_theme_dir: Path) -> None:
        result = build_palette("themes/hsl.css")
        by_name = {s.property: s for s in result.swatches}

        swatch = by_name["--dh-color-blue-100"]
        assert swatch.value == "hsl(210deg 100% 94%)"
        assert swatch.hsl == swatch.value
        assert by_name["--dh-color-blue-hue"].is_hue
        assert by_name["--dh-color-red-hue"].margin_top == "40px"
        assert by_name["--dh-color-red-500"].margin_top is None

    def test_tooltips(self, in_theme_dir: Path) -> None:
        result = build_palette("themes/hex.css", tooltips=True)
        by_name = {s.property: s for s in result.swatches}

        assert by_name["--dh-color-blue-700"].tooltip == "#155194ff"

    def test_missing_stylesheet(self, in_theme_dir: Path) -> None:
        with pytest.raises(ResourceNotFoundError, match="No style sheet found for: themes/nope.css"):
            build_palette("themes/nope.css")

    def test_builtin_theme(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = build_palette("themes/hex.css")

        assert len(result.swatches) > 20
        assert result.generated_css

    def test_extra_search_root(self, theme_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)

        config = PaletteConfig(search_roots=[theme_dir])
        result = build_palette("themes/hsl.css", config=config)

        assert result.theme.value("--dh-color-red-hue") == "4deg"

    def test_unknown_resolver(self, in_theme_dir: Path) -> None:
        with pytest.raises(ValueError, match="Unknown resolver"):
            resolve_theme("themes/hex.css", PaletteConfig(), resolver="firefox")


# =============================================================================
# Rendering
# =============================================================================


@pytest.mark.evergreen
class TestRender:
    """Tests for the palette page."""

    def test_page(self, in_theme_dir: Path) -> None:
        page = build_palette("themes/hsl.css").render()

        assert "<h1>hsl.css</h1>" in page
        assert '<link rel="stylesheet" href="file://' in page
        assert 'style="background-color: var(--dh-color-blue-100); color: var(--dh-color-gray-800)"' in page
        assert "margin-top: 40px" in page
        assert page.count('class="swatch"') == 5

    def test_hue_swatch_has_no_style(self) -> None:
        swatch = Swatch(
            property="--dh-color-blue-hue",
            value="210deg",
            hsl="210deg",
            label="--dh-color-blue-hue: 210deg",
            label_html="--dh-color-blue-hue: 210deg",
            is_hue=True,
        )
        assert format_swatch(swatch) == '<div class="swatch">--dh-color-blue-hue: 210deg</div>'

    def test_tooltip_attribute(self) -> None:
        swatch = Swatch(
            property="--a",
            value="#fff",
            hsl="hsl(0deg 0% 100%)",
            label="--a: #fff (hsl(0deg 0% 100%))",
            label_html="--a: #fff",
            background="var(--a)",
            foreground="var(--dh-color-gray-75)",
            tooltip="#ffffffff",
        )
        assert 'title="#ffffffff"' in format_swatch(swatch)

    def test_title_escaped(self) -> None:
        page = render_page("<x>.css", "file:///a.css", [])
        assert "<h1>&lt;x&gt;.css</h1>" in page
