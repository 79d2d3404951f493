"""
HSL range generation for hex themes.

Re-expresses a hex palette relative to one hue per color family, so a whole
family can be re-tinted by editing a single variable:

    --dh-color-blue-hue: 210deg;
    --dh-color-blue-100-hsl: calc(var(--dh-color-blue-hue) + 15deg) 92% 95%;
    --dh-color-blue-100: hsl(var(--dh-color-blue-100-hsl));

The baseline is the rounded mean of the family's hues. The neutral family
(grays) is pinned to a fixed hue instead. The result is text to paste into a
theme; nothing is written to disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .design.color import format_percent, parse_hex, rgb_tuple_to_hsl, round_half_up
from .design.naming import NamingConvention
from .theme import ResolvedTheme

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShadeOffset:
    """One shade's HSL, with its hue relative to the family baseline."""

    name: str
    shade: str
    hue: int
    delta: int
    saturation: str
    lightness: str


@dataclass
class FamilyRange:
    """All shades of one color family and their shared hue baseline."""

    family: str
    baseline: int
    shades: list[ShadeOffset] = field(default_factory=list)


# =============================================================================
# Formatting helpers
# =============================================================================


def format_hue_offset(delta: int) -> str:
    """Signed degree delta: ``+15deg``, ``-15deg``, or empty for zero."""
    if delta == 0:
        return ""
    return f"+{delta}deg" if delta > 0 else f"{delta}deg"


def hue_expression(hue_property: str, delta: int) -> str:
    """CSS hue term: the baseline variable, offset when delta is non-zero."""
    if delta == 0:
        return f"var({hue_property})"
    operator = "+" if delta > 0 else "-"
    return f"calc(var({hue_property}) {operator} {abs(delta)}deg)"


# =============================================================================
# Grouping
# =============================================================================


def group_families(theme: ResolvedTheme, naming: NamingConvention) -> dict[str, list[str]]:
    """Hex-valued numbered shades grouped by family, in first-appearance order.

    Aliases such as ``--dh-color-accent-bg`` have no shade weight and are left
    out, as are hue definitions.
    """
    families: dict[str, list[str]] = {}
    for name in theme.names:
        family = naming.family_key(name)
        if family is None or naming.shade_weight(name) is None:
            continue
        if not theme.value(name).startswith("#"):
            continue
        families.setdefault(family, []).append(name)
    return families


def compute_ranges(
    theme: ResolvedTheme,
    naming: Optional[NamingConvention] = None,
    neutral_family: str = "gray",
    neutral_hue: int = 0,
    precision: int = 0,
) -> list[FamilyRange]:
    """Compute the hue baseline and per-shade offsets for each family."""
    naming = naming or NamingConvention()
    ranges: list[FamilyRange] = []

    for family, names in group_families(theme, naming).items():
        measured = []
        for name in names:
            h, s, l = rgb_tuple_to_hsl(parse_hex(theme.value(name)))
            measured.append((name, int(round_half_up(h)) % 360, s, l))

        if family == neutral_family:
            baseline = neutral_hue
        else:
            baseline = int(round_half_up(sum(m[1] for m in measured) / len(measured)))

        family_range = FamilyRange(family=family, baseline=baseline)
        for name, hue, s, l in measured:
            family_range.shades.append(ShadeOffset(
                name=name,
                shade=naming.shade_name(name) or "",
                hue=hue,
                delta=hue - baseline,
                saturation=format_percent(s * 100, precision),
                lightness=format_percent(l * 100, precision),
            ))
        ranges.append(family_range)

    return ranges


# =============================================================================
# Output
# =============================================================================


def format_ranges(ranges: list[FamilyRange], naming: NamingConvention, wrap: bool = False) -> str:
    """Render family ranges as CSS declarations, optionally inside ``:root``."""
    indent = "  " if wrap else ""
    blocks: list[str] = []

    for family_range in ranges:
        hue_property = naming.hue_property(family_range.family)
        lines = [f"{indent}{hue_property}: {family_range.baseline}deg;"]

        for shade in family_range.shades:
            hsl_property = naming.hsl_property(family_range.family, shade.shade)
            lines.append(
                f"{indent}{hsl_property}: {hue_expression(hue_property, shade.delta)} "
                f"{shade.saturation}% {shade.lightness}%;"
            )
        for shade in family_range.shades:
            hsl_property = naming.hsl_property(family_range.family, shade.shade)
            color_property = naming.color_property(family_range.family, shade.shade)
            lines.append(f"{indent}{color_property}: hsl(var({hsl_property}));")

        blocks.append("\n".join(lines))

    body = "\n\n".join(blocks)
    if wrap:
        return f":root {{\n{body}\n}}\n"
    return f"{body}\n" if body else ""


def generate_hsl_ranges(
    theme: ResolvedTheme,
    naming: Optional[NamingConvention] = None,
    neutral_family: str = "gray",
    neutral_hue: int = 0,
    precision: int = 0,
    wrap: bool = False,
) -> str:
    """Generate the hue-relative rewrite of a hex theme as CSS text."""
    naming = naming or NamingConvention()
    ranges = compute_ranges(theme, naming, neutral_family, neutral_hue, precision)
    text = format_ranges(ranges, naming, wrap=wrap)
    _log.info("Generated HSL ranges for %d families:\n%s", len(ranges), text)
    return text
