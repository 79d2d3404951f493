"""
Palette pipeline: load, extract, resolve, format.

``build_palette`` runs the whole sequence for one stylesheet path and returns
a ``PaletteResult`` that can be rendered as a page or listed as text. The HSL
generator runs as a side branch for the configured source theme.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .config import PaletteConfig
from .errors import MissingPathError
from .hsl_generator import generate_hsl_ranges
from .loader import StylesheetLoader
from .swatches import Swatch, SwatchStyle, build_swatches
from .templates import render_page
from .theme import ResolvedTheme, resolve_static
from .utils import default_search_roots, theme_short_name

_log = logging.getLogger(__name__)

RESOLVERS = ("static", "browser")

_QUERY_PATTERN = re.compile(r"^\?css=(.*)$")


def get_css_path(query: Optional[str], default: Optional[str]) -> str:
    """Extract the stylesheet path from a ``?css=<path>`` query string.

    Falls back to ``default``; with no default, a missing path is an error.

    Raises:
        MissingPathError: If no path was given and ``default`` is None.
    """
    match = _QUERY_PATTERN.match(query or "")
    if match and match.group(1):
        return match.group(1)
    if default is None:
        raise MissingPathError()
    return default


@dataclass
class PaletteResult:
    """Everything produced for one stylesheet."""

    css_path: str
    stylesheet_href: str
    theme: ResolvedTheme
    swatches: list[Swatch] = field(default_factory=list)
    generated_css: Optional[str] = None

    @property
    def theme_name(self) -> str:
        return theme_short_name(self.css_path)

    def render(self) -> str:
        return render_page(self.theme_name, self.stylesheet_href, self.swatches)


def make_loader(config: PaletteConfig) -> StylesheetLoader:
    return StylesheetLoader(search_roots=default_search_roots(config.search_roots))


def resolve_theme(css_path: str, config: PaletteConfig, resolver: str = "static") -> tuple[ResolvedTheme, str]:
    """Resolve a stylesheet with the chosen resolver.

    Returns the resolved theme and the file href to link from a rendered page.
    """
    if resolver not in RESOLVERS:
        raise ValueError(f"Unknown resolver: {resolver} (expected one of {', '.join(RESOLVERS)})")

    loader = make_loader(config)
    marker = config.naming.marker

    if resolver == "browser":
        from .browser import resolve_in_browser

        theme = resolve_in_browser(css_path, loader=loader, marker=marker)
        path = loader.locate(css_path)
        href = f"file://{path.absolute().as_posix()}" if path is not None else theme.href
        return theme, href

    sheet = loader.load(css_path)
    return resolve_static(sheet, marker=marker, with_rgba=True), sheet.href


def build_palette(
    css_path: str,
    config: Optional[PaletteConfig] = None,
    resolver: str = "static",
    precision: int = 0,
    tooltips: bool = False,
    generate: Optional[bool] = None,
) -> PaletteResult:
    """Run the palette pipeline for one stylesheet path.

    Args:
        css_path: Stylesheet path, relative to the search roots or absolute.
        config: Palette configuration (defaults when omitted).
        resolver: "static" or "browser".
        precision: Decimals for HSL saturation/lightness percents.
        tooltips: Attach the rendered 8-digit hex to each swatch.
        generate: Force the HSL generator on or off; by default it runs only
            for the configured source theme.

    Raises:
        ResourceNotFoundError: If the stylesheet cannot be found.
    """
    config = config or PaletteConfig()
    theme, href = resolve_theme(css_path, config, resolver)
    _log.debug("Resolved %d properties for %s", len(theme.names), css_path)

    style = SwatchStyle(
        dark_shade_threshold=config.dark_shade_threshold,
        light_text=config.light_text,
        dark_text=config.dark_text,
        group_spacing=config.group_spacing,
        precision=precision,
        tooltips=tooltips,
    )
    swatches = build_swatches(theme, config.naming, style)

    if generate is None:
        generate = theme_short_name(css_path) == config.hsl_source_theme

    generated_css = None
    if generate:
        generated_css = generate_hsl_ranges(
            theme,
            config.naming,
            neutral_family=config.neutral_family,
            neutral_hue=config.neutral_hue,
            precision=precision,
        )

    return PaletteResult(
        css_path=css_path,
        stylesheet_href=href,
        theme=theme,
        swatches=swatches,
        generated_css=generated_css,
    )
