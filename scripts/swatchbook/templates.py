"""Templates for the palette HTML page."""

from __future__ import annotations

import html

from .swatches import Swatch


PAGE_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<link rel="stylesheet" href="{stylesheet_href}">
<style>
  body {{
    font-family: system-ui, sans-serif;
    margin: 0;
    padding: 20px;
  }}
  .swatch {{
    padding: 8px 12px;
    font-family: ui-monospace, monospace;
    font-size: 13px;
  }}
  .swatch span {{
    opacity: 0.7;
    margin-left: 8px;
  }}
</style>
</head>
<body>
<div id="container">
<h1>{title}</h1>
{swatches}
</div>
</body>
</html>
'''


def format_style(swatch: Swatch) -> str:
    """Inline style declarations for one swatch."""
    declarations = []
    if swatch.margin_top:
        declarations.append(f"margin-top: {swatch.margin_top}")
    if swatch.background:
        declarations.append(f"background-color: {swatch.background}")
    if swatch.foreground:
        declarations.append(f"color: {swatch.foreground}")
    return "; ".join(declarations)


def format_swatch(swatch: Swatch) -> str:
    """One ``<div class="swatch">`` element."""
    attributes = ['class="swatch"']
    style = format_style(swatch)
    if style:
        attributes.append(f'style="{html.escape(style)}"')
    if swatch.tooltip:
        attributes.append(f'title="{html.escape(swatch.tooltip)}"')
    return f"<div {' '.join(attributes)}>{swatch.label_html}</div>"


def render_page(title: str, stylesheet_href: str, swatches: list[Swatch]) -> str:
    """Full palette page: heading, then one block per swatch."""
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        stylesheet_href=html.escape(stylesheet_href),
        swatches="\n".join(format_swatch(s) for s in swatches),
    )
