"""
Design-token helpers: CSS parsing, naming conventions and color conversions.
"""

from .color import hex_to_rgb, parse_color, rgb_to_hsl, rgba_to_hex8, to_hsl
from .css_parser import (
    CSSRule,
    StyleSheet,
    extract_css_variables,
    extract_custom_properties,
    parse_css_content,
    parse_css_file,
)
from .naming import NamingConvention

__all__ = [
    "CSSRule",
    "NamingConvention",
    "StyleSheet",
    "extract_css_variables",
    "extract_custom_properties",
    "hex_to_rgb",
    "parse_color",
    "parse_css_content",
    "parse_css_file",
    "rgb_to_hsl",
    "rgba_to_hex8",
    "to_hsl",
]
