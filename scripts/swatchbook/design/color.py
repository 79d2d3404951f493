"""
Color-space conversions for palette swatches.

Text-level helpers (``hex_to_rgb``, ``rgb_to_hsl``, ``to_hsl``) mirror how a
browser serializes custom properties: anything they cannot convert is passed
through unchanged, so a value authored in ``hsl()`` comes out equal to itself.

Tuple-level helpers work on channel integers and are used by the HSL
generator and the static resolver.

>>> hex_to_rgb('#0f0')
'rgb(0 255 0)'
>>> rgb_to_hsl('rgb(255 0 0)')
'hsl(0deg 100% 50%)'
>>> to_hsl('hsl(210deg 50% 40%)')
'hsl(210deg 50% 40%)'
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import Optional

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, float]
HSL = tuple[float, float, float]

_RGB_TEXT_PATTERN = re.compile(r"^rgb\((\d{1,3}) (\d{1,3}) (\d{1,3})\)$")
_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_PATTERN = re.compile(r"^(rgba?|hsla?)\((.*)\)$", re.DOTALL)
_CALC_BODY_PATTERN = re.compile(r"\s*[\d.]+(?:deg)?(?:\s*[+-]\s*[\d.]+(?:deg)?)*\s*")
_CALC_TERM_PATTERN = re.compile(r"([+-])?\s*([\d.]+)(?:deg)?")

NAMED_COLORS: dict[str, RGBA] = {
    "transparent": (0, 0, 0, 0.0),
    "black": (0, 0, 0, 1.0),
    "white": (255, 255, 255, 1.0),
}


# =============================================================================
# Rounding and formatting
# =============================================================================


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like JavaScript's Math.round (halves go up, not to even)."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def format_percent(value: float, precision: int) -> str:
    text = f"{round_half_up(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_hsl(h: float, s: float, l: float, precision: int = 0) -> str:
    """Format an unrounded HSL triple (s and l in 0..1) as CSS text.

    Hue is rounded to the nearest degree; saturation and lightness to
    ``precision`` decimals of a percent.
    """
    hue = int(round_half_up(h)) % 360
    return (
        f"hsl({hue}deg "
        f"{format_percent(s * 100, precision)}% "
        f"{format_percent(l * 100, precision)}%)"
    )


# =============================================================================
# Tuple conversions
# =============================================================================


def parse_hex(value: str) -> RGB:
    """Parse ``#rgb`` or ``#rrggbb`` into channel integers.

    Raises:
        ValueError: If the value is not a 3 or 6 digit hex color.
    """
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def rgba_to_hex8(rgba: RGBA) -> str:
    """Encode RGBA as ``#rrggbbaa``."""
    r, g, b, a = rgba
    alpha = int(round_half_up(a * 255))
    return f"#{r:02x}{g:02x}{b:02x}{alpha:02x}"


def rgb_tuple_to_hsl(rgb: RGB) -> HSL:
    """Convert channels to an unrounded (hue degrees, s 0..1, l 0..1) triple."""
    r, g, b = (c / 255 for c in rgb)

    low = min(r, g, b)
    high = max(r, g, b)
    spread = high - low

    l = (low + high) / 2

    if spread == 0:
        return (0.0, 0.0, l)

    if l <= 0.5:
        s = spread / (high + low)
    else:
        s = spread / (2 - high - low)

    if high == r:
        h = 60 * ((g - b) / spread)
    elif high == g:
        h = 60 * ((b - r) / spread) + 120
    else:
        h = 60 * ((r - g) / spread) + 240

    if h < 0:
        h += 360

    return (h, s, l)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert (hue degrees, s 0..1, l 0..1) back to channel integers."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l, s)
    return (
        int(round_half_up(r * 255)),
        int(round_half_up(g * 255)),
        int(round_half_up(b * 255)),
    )


# =============================================================================
# Text conversions
# =============================================================================


def hex_to_rgb(value: str) -> str:
    """Convert ``#rgb``/``#rgba``/``#rrggbb``/``#rrggbbaa`` text to ``rgb(r g b)``.

    Non-hex values are returned unchanged. Alpha digits are ignored.
    """
    if not value.startswith("#"):
        return value

    if len(value) in (4, 5):
        value = "#" + "".join(c * 2 for c in value[1:])

    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)

    return f"rgb({r} {g} {b})"


def rgb_to_hsl(value: str, precision: int = 0) -> str:
    """Convert ``rgb(r g b)`` text to ``hsl(Hdeg S% L%)``.

    Values that are not space-separated ``rgb()`` are returned unchanged.
    """
    match = _RGB_TEXT_PATTERN.match(value)
    if match is None:
        return value

    rgb = (int(match.group(1)), int(match.group(2)), int(match.group(3)))
    return format_hsl(*rgb_tuple_to_hsl(rgb), precision=precision)


def to_hsl(value: str, precision: int = 0) -> str:
    return rgb_to_hsl(hex_to_rgb(value), precision=precision)


# =============================================================================
# Generic color parsing
# =============================================================================


def _parse_channel(token: str) -> int:
    if token.endswith("%"):
        return int(round_half_up(float(token[:-1]) * 255 / 100))
    return int(round_half_up(float(token)))


def _parse_alpha(token: Optional[str]) -> float:
    if token is None:
        return 1.0
    if token.endswith("%"):
        return float(token[:-1]) / 100
    return float(token)


def _parse_hue(token: str) -> Optional[float]:
    """Hue in degrees; supports ``calc()`` sums of plain degree terms."""
    if token.startswith("calc(") and token.endswith(")"):
        body = token[5:-1]
        if not _CALC_BODY_PATTERN.fullmatch(body):
            return None
        total = 0.0
        for sign, number in _CALC_TERM_PATTERN.findall(body):
            total += -float(number) if sign == "-" else float(number)
        return total
    if token.endswith("deg"):
        token = token[:-3]
    try:
        return float(token)
    except ValueError:
        return None


def _split_args(body: str) -> tuple[list[str], Optional[str]]:
    """Split function arguments into channels and an optional alpha."""
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if len(parts) == 4:
            return parts[:3], parts[3]
        return parts, None

    alpha = None
    if "/" in body:
        body, alpha = body.rsplit("/", 1)
        alpha = alpha.strip()

    # calc() terms contain spaces; keep them together
    parts: list[str] = []
    depth = 0
    current = ""
    for char in body.strip():
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char.isspace() and depth == 0:
            if current:
                parts.append(current)
                current = ""
            continue
        current += char
    if current:
        parts.append(current)
    return parts, alpha


def parse_color(value: str) -> Optional[RGBA]:
    """Parse a resolved color value into an RGBA tuple.

    Understands hex (3, 4, 6 or 8 digits), ``rgb()``/``rgba()`` and
    ``hsl()``/``hsla()`` in comma or space syntax, and a few keywords.
    Returns None for anything else.

    >>> parse_color('#ff000080')
    (255, 0, 0, 0.5019607843137255)
    >>> parse_color('hsl(calc(200deg + 40deg) 100% 50%)')
    (0, 0, 255, 1.0)
    """
    value = value.strip()

    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return named

    hex_match = _HEX_PATTERN.match(value)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return (channels[0], channels[1], channels[2], alpha)

    func_match = _FUNC_PATTERN.match(value)
    if func_match is None:
        return None

    name, body = func_match.group(1), func_match.group(2)
    parts, alpha_token = _split_args(body)
    if len(parts) != 3:
        return None

    try:
        alpha = _parse_alpha(alpha_token)
        if name.startswith("rgb"):
            r, g, b = (_parse_channel(p) for p in parts)
            return (r, g, b, alpha)

        hue = _parse_hue(parts[0])
        if hue is None or not parts[1].endswith("%") or not parts[2].endswith("%"):
            return None
        s = float(parts[1][:-1]) / 100
        l = float(parts[2][:-1]) / 100
        r, g, b = hsl_to_rgb(hue, s, l)
        return (r, g, b, alpha)
    except ValueError:
        return None
