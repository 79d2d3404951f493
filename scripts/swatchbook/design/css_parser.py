"""
CSS parsing utilities for theme stylesheets.

Parses a stylesheet into rules and extracts the custom properties a palette
is built from. This is a simplified parser: it does NOT handle nested rules
(SCSS/LESS) or blocks nested inside @media queries.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path


# =============================================================================
# Data Structures
# =============================================================================


@dataclass
class CSSRule:
    """A parsed CSS rule.

    Attributes:
        selector: The CSS selector string (e.g., ':root').
        properties: Property names mapped to values, in declaration order.
        line_number: Line number where the rule begins in the source file.
    """

    selector: str
    properties: dict[str, str]
    line_number: int


@dataclass
class StyleSheet:
    """A stylesheet attached to a document.

    Attributes:
        href: Absolute location the sheet was loaded from.
        rules: Parsed style rules in source order.
    """

    href: str
    rules: list[CSSRule] = field(default_factory=list)


# =============================================================================
# Parsing Functions
# =============================================================================

_RULE_PATTERN = re.compile(r"([^{}]+)\{([^{}]*)\}", re.DOTALL)
_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_PATTERN = re.compile(r"\s*!\s*important$", re.IGNORECASE)


def parse_css_file(path: Path) -> list[CSSRule]:
    """Parse a CSS file into a list of CSS rules.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be read.
    """
    return parse_css_content(path.read_text(encoding="utf-8"))


def parse_css_content(content: str) -> list[CSSRule]:
    """Parse CSS content string into rules.

    Rules without any declarations are dropped.
    """
    rules: list[CSSRule] = []

    # Newlines inside comments are kept so line numbers stay accurate
    content = _COMMENT_PATTERN.sub(lambda m: "\n" * m.group().count("\n"), content)

    for match in _RULE_PATTERN.finditer(content):
        raw_selector = match.group(1)
        start = match.start() + len(raw_selector) - len(raw_selector.lstrip())
        line_number = content[:start].count("\n") + 1
        selector = " ".join(raw_selector.split())
        properties = _parse_properties(match.group(2))

        if selector and properties:
            rules.append(CSSRule(selector=selector, properties=properties, line_number=line_number))

    return rules


def _parse_properties(block: str) -> dict[str, str]:
    """Parse the content between { and } into a dictionary."""
    properties: dict[str, str] = {}

    for decl in block.split(";"):
        decl = decl.strip()
        if ":" not in decl:
            continue

        # Split on first colon only (values may contain colons)
        prop_name, _, prop_value = decl.partition(":")
        prop_name = prop_name.strip()
        prop_value = _IMPORTANT_PATTERN.sub("", " ".join(prop_value.split()))

        if prop_name and prop_value:
            properties[prop_name] = prop_value

    return properties


def extract_css_variables(sheet: StyleSheet) -> dict[str, str]:
    """Custom property definitions across all rules of a stylesheet.

    A later rule with the same selector as the one that first defined a
    variable overrides it, as the cascade does for repeated :root blocks.
    Definitions under other selectors (e.g. a dark-mode override) are ignored
    once a variable is known.
    """
    variables: dict[str, str] = {}
    defined_by: dict[str, str] = {}

    for rule in sheet.rules:
        for prop_name, prop_value in rule.properties.items():
            if not prop_name.startswith("--"):
                continue
            if defined_by.setdefault(prop_name, rule.selector) == rule.selector:
                variables[prop_name] = prop_value

    return variables


def extract_custom_properties(sheet: StyleSheet, marker: str = "--") -> list[str]:
    """Names of the first rule's custom properties, in declaration order."""
    if not sheet.rules:
        return []
    return [name for name in sheet.rules[0].properties if name.startswith(marker)]
