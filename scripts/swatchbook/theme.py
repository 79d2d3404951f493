"""
Resolved themes.

A ``ResolvedTheme`` is a snapshot of a stylesheet's custom properties after
resolution: ordered names, each name's computed text value, and optionally
the rendered RGBA of a swatch painted with it. Swatch building and HSL
generation only ever see this snapshot, never the stylesheet.

Two resolvers produce it: ``resolve_static`` here (pure Python ``var()``
substitution) and ``swatchbook.browser.resolve_in_browser`` (Chromium's
computed style).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .design.color import RGBA, parse_color
from .design.css_parser import StyleSheet, extract_css_variables, extract_custom_properties

_log = logging.getLogger(__name__)

# Start of a var() reference, not the tail of a longer identifier
_VAR_START = re.compile(r"(?<![\w-])var\(")


def _closing_paren(value: str, start: int) -> Optional[int]:
    """Index of the ``)`` balancing the ``(`` at ``start``, or None."""
    depth = 0
    for index in range(start, len(value)):
        char = value[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


@dataclass(frozen=True)
class ResolvedTheme:
    """Custom-property names and their resolved values for one stylesheet."""

    href: str
    names: tuple[str, ...]
    values: Mapping[str, str]
    rgba: Optional[Mapping[str, RGBA]] = field(default=None)

    def value(self, name: str) -> str:
        """Computed value of a property; empty when it does not resolve."""
        return self.values.get(name, "")

    def pixel(self, name: str) -> Optional[RGBA]:
        if self.rgba is None:
            return None
        return self.rgba.get(name)


def substitute_vars(
    value: str,
    variables: Mapping[str, str],
    _resolving: frozenset[str] = frozenset(),
) -> Optional[str]:
    """Replace every ``var()`` reference in ``value``.

    Each outermost ``var(--name, fallback)`` takes the value of ``--name``
    when that resolves; the fallback is used only when ``--name`` is undefined
    or itself invalid. Returns None when a reference cannot be resolved
    (undefined without a fallback, or a reference cycle), matching an invalid
    custom property.
    """
    parts: list[str] = []
    pos = 0
    while True:
        match = _VAR_START.search(value, pos)
        if match is None:
            parts.append(value[pos:])
            return "".join(parts).strip()

        open_paren = match.end() - 1
        close_paren = _closing_paren(value, open_paren)
        if close_paren is None:
            _log.debug("Unbalanced var() in %r", value)
            return None

        name, comma, fallback = value[open_paren + 1:close_paren].partition(",")
        name = name.strip()

        replacement = None
        if name in variables and name not in _resolving:
            replacement = substitute_vars(variables[name], variables, _resolving | {name})
        if replacement is None and comma:
            replacement = substitute_vars(fallback, variables, _resolving)
        if replacement is None:
            return None

        parts.append(value[pos:match.start()])
        parts.append(replacement)
        pos = close_paren + 1


def resolve_static(sheet: StyleSheet, marker: str = "--", with_rgba: bool = False) -> ResolvedTheme:
    """Resolve a stylesheet's first-rule custom properties without a browser."""
    names = tuple(extract_custom_properties(sheet, marker))
    variables = extract_css_variables(sheet)

    values: dict[str, str] = {}
    for name in names:
        resolved = substitute_vars(variables.get(name, ""), variables)
        values[name] = resolved if resolved is not None else ""

    rgba: Optional[dict[str, RGBA]] = None
    if with_rgba:
        rgba = {}
        for name, value in values.items():
            parsed = parse_color(value)
            if parsed is not None:
                rgba[name] = parsed

    _log.debug("Resolved %d properties from %s", len(names), sheet.href)
    return ResolvedTheme(href=sheet.href, names=names, values=values, rgba=rgba)
