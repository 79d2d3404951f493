"""
Custom-property naming conventions.

Theme tokens follow ``<prefix><family>-<shade>``, e.g. ``--dh-color-blue-700``:

    marker   ``--``            every custom property starts with it
    prefix   ``--dh-color-``   color tokens
    family   ``blue``          shortest segment between the prefix and the next '-'
    shade    ``700``           everything after ``<family>-``
    weight   ``700``           trailing run of digits, when there is one

Two suffixes mark special tokens: ``-hue`` (a family's hue baseline, not a
color) and ``-label`` (text-only tokens whose HSL form is not meaningful).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

_WEIGHT_PATTERN = re.compile(r"-(\d+)$")


@dataclass(frozen=True)
class NamingConvention:
    """Parser for custom-property names."""

    marker: str = "--"
    prefix: str = "--dh-color-"
    hue_suffix: str = "-hue"
    label_suffix: str = "-label"
    hsl_suffix: str = "-hsl"

    @cached_property
    def _family_pattern(self) -> re.Pattern[str]:
        return re.compile(rf"^{re.escape(self.prefix)}(.*?)-")

    def family_key(self, name: Optional[str]) -> Optional[str]:
        """Return the family segment of a color token, or None.

        >>> NamingConvention().family_key("--dh-color-blue-100")
        'blue'
        """
        if name is None:
            return None
        match = self._family_pattern.match(name)
        return match.group(1) if match else None

    def is_hue_definition(self, name: Optional[str]) -> bool:
        return name is not None and name.endswith(self.hue_suffix)

    def is_label(self, name: str) -> bool:
        return name.endswith(self.label_suffix)

    def shade_weight(self, name: str) -> Optional[int]:
        """Numeric shade parsed from a trailing ``-<digits>``, or None."""
        match = _WEIGHT_PATTERN.search(name)
        return int(match.group(1)) if match else None

    def shade_name(self, name: str) -> Optional[str]:
        """Everything after ``<prefix><family>-``, or None for non-color tokens."""
        family = self.family_key(name)
        if family is None:
            return None
        return name[len(self.prefix) + len(family) + 1:]

    # Names emitted by the HSL generator

    def hue_property(self, family: str) -> str:
        return f"{self.prefix}{family}{self.hue_suffix}"

    def hsl_property(self, family: str, shade: str) -> str:
        return f"{self.prefix}{family}-{shade}{self.hsl_suffix}"

    def color_property(self, family: str, shade: str) -> str:
        return f"{self.prefix}{family}-{shade}"
