"""
swatchbook - palette viewer for CSS custom-property color themes.

Loads a stylesheet, resolves the custom properties declared in its first
rule and renders one swatch per color, with the HSL breakdown for hex
themes. Can also rewrite a hex theme as hue-relative HSL definitions.

Usage:
    python -m swatchbook <command> [options]

Commands:
    render        Render the palette page as HTML
    list          Print properties and their colors as a table
    generate-hsl  Print a hue-relative HSL rewrite of a hex theme
"""

from .cli import __version__, main

__all__ = ["__version__", "main"]
