"""
Swatch building.

Turns a resolved theme into one ``Swatch`` per custom property: label text,
background/foreground styling and group spacing. Building is a pure function
of the theme and the style settings; nothing carries over between calls.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

from .design.color import rgba_to_hex8, to_hsl
from .design.naming import NamingConvention
from .theme import ResolvedTheme

HSL_TITLE = "HSL based on original HEX color"
LABEL_ANNOTATION = "HSL derived from hex"


@dataclass(frozen=True)
class SwatchStyle:
    """Presentation settings for swatches."""

    dark_shade_threshold: int = 700
    light_text: str = "var(--dh-color-gray-75)"
    dark_text: str = "var(--dh-color-gray-800)"
    group_spacing: str = "40px"
    precision: int = 0  # decimals for saturation/lightness percents
    tooltips: bool = False


@dataclass(frozen=True)
class Swatch:
    """One rendered block of the palette.

    Attributes:
        property: Custom-property name.
        value: Resolved value at render time.
        hsl: HSL form of the value (equal to ``value`` if not convertible).
        label: Plain-text label.
        label_html: Label markup with the HSL annotation span.
        background: CSS background, None for hue definitions.
        foreground: CSS text color, None for hue definitions.
        margin_top: Extra spacing before this swatch, if any.
        is_hue: Whether the property is a hue definition.
        tooltip: 8-digit hex of the rendered background, when known.
    """

    property: str
    value: str
    hsl: str
    label: str
    label_html: str
    background: Optional[str] = None
    foreground: Optional[str] = None
    margin_top: Optional[str] = None
    is_hue: bool = False
    tooltip: Optional[str] = None


# =============================================================================
# Decisions
# =============================================================================


def foreground_for(name: str, naming: NamingConvention, style: SwatchStyle) -> str:
    """Light text on dark shades (and unnumbered tokens), dark text otherwise."""
    weight = naming.shade_weight(name)
    if weight is None or weight >= style.dark_shade_threshold:
        return style.light_text
    return style.dark_text


def needs_spacing(index: int, name: str, previous: Optional[str], naming: NamingConvention) -> bool:
    """A new family starts a new group, unless a hue definition opened it."""
    return (
        index > 0
        and naming.family_key(name) != naming.family_key(previous)
        and not naming.is_hue_definition(previous)
    )


def format_label(name: str, value: str, hsl: str, naming: NamingConvention) -> tuple[str, str]:
    """Return (plain label, HTML label) for a property."""
    is_label = naming.is_label(name)
    if value == hsl and not is_label:
        return f"{name}: {value}", f"{html.escape(name)}: {html.escape(value)}"

    annotation = LABEL_ANNOTATION if is_label else hsl
    plain = f"{name}: {value} ({annotation})"
    markup = (
        f"{html.escape(name)}: {html.escape(value)} "
        f'<span title="{html.escape(HSL_TITLE)}">{html.escape(annotation)}</span>'
    )
    return plain, markup


# =============================================================================
# Builder
# =============================================================================


def build_swatches(
    theme: ResolvedTheme,
    naming: Optional[NamingConvention] = None,
    style: Optional[SwatchStyle] = None,
) -> list[Swatch]:
    """Build swatches for every property of a resolved theme, in order."""
    naming = naming or NamingConvention()
    style = style or SwatchStyle()

    swatches: list[Swatch] = []
    previous: Optional[str] = None

    for index, name in enumerate(theme.names):
        value = theme.value(name)
        hsl = to_hsl(value, style.precision)
        label, label_html = format_label(name, value, hsl, naming)
        margin_top = style.group_spacing if needs_spacing(index, name, previous, naming) else None

        if naming.is_hue_definition(name):
            swatches.append(Swatch(
                property=name,
                value=value,
                hsl=hsl,
                label=label,
                label_html=label_html,
                margin_top=margin_top,
                is_hue=True,
            ))
        else:
            pixel = theme.pixel(name) if style.tooltips else None
            swatches.append(Swatch(
                property=name,
                value=value,
                hsl=hsl,
                label=label,
                label_html=label_html,
                background=f"var({name})",
                foreground=foreground_for(name, naming, style),
                margin_top=margin_top,
                tooltip=rgba_to_hex8(pixel) if pixel is not None else None,
            ))

        previous = name

    return swatches
