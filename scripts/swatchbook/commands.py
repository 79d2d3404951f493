"""
Command handlers for the swatchbook CLI.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import PaletteConfig, load_config
from .hsl_generator import generate_hsl_ranges
from .palette import build_palette, get_css_path, resolve_theme
from .utils import log


def _load(args: argparse.Namespace) -> tuple[PaletteConfig, str]:
    """Config and stylesheet path shared by every command."""
    config = load_config(Path(args.config) if args.config else None)
    if args.css:
        return config, args.css
    default = None if args.strict else config.default_css_path
    return config, get_css_path(args.query, default)


# =============================================================================
# render
# =============================================================================


def cmd_render(args: argparse.Namespace) -> int:
    """Render the palette page as HTML."""
    config, css_path = _load(args)

    result = build_palette(
        css_path,
        config=config,
        resolver=args.resolver,
        precision=args.precision,
        tooltips=args.tooltips,
    )
    page = result.render()

    if not args.output:
        print(page, end="")
        return 0

    output = Path(args.output)
    output.write_text(page, encoding="utf-8")

    log.header(f"Palette: {result.theme_name}")
    log.info(f"Stylesheet: {result.stylesheet_href}")
    log.info(f"Swatches: {len(result.swatches)}")
    if result.generated_css is not None:
        log.dim("HSL ranges generated (use --verbose to log them)")
    log.success(f"Wrote {output}")
    return 0


# =============================================================================
# list
# =============================================================================


def cmd_list(args: argparse.Namespace) -> int:
    """Print each property with a color chip, its value and HSL form."""
    config, css_path = _load(args)

    result = build_palette(
        css_path,
        config=config,
        resolver=args.resolver,
        precision=args.precision,
        tooltips=args.tooltips,
        generate=False,
    )

    log.header(result.theme_name)
    if not result.swatches:
        log.warning("No custom properties found in the first rule")
        return 0

    width = max(len(s.property) for s in result.swatches) + 2
    for swatch in result.swatches:
        if swatch.margin_top:
            print()
        detail = swatch.value if swatch.value == swatch.hsl else f"{swatch.value}  {swatch.hsl}"
        if swatch.tooltip:
            detail = f"{detail}  [{swatch.tooltip}]"
        if swatch.is_hue:
            log.dim(f"   {swatch.property:<{width}} {detail}")
        else:
            log.swatch_row(result.theme.pixel(swatch.property), swatch.property, detail, name_width=width)
    return 0


# =============================================================================
# generate-hsl
# =============================================================================


def cmd_generate_hsl(args: argparse.Namespace) -> int:
    """Print the hue-relative rewrite of a hex theme."""
    config, css_path = _load(args)

    theme, _ = resolve_theme(css_path, config, args.resolver)
    text = generate_hsl_ranges(
        theme,
        config.naming,
        neutral_family=config.neutral_family,
        neutral_hue=config.neutral_hue,
        precision=args.precision,
        wrap=args.wrap,
    )

    if not text:
        log.warning(f"No hex color families found in {css_path}")
        return 1

    print(text, end="")
    return 0
