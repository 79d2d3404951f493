"""
Tests for the HSL range generator.

Hex fixtures are chosen so their hues round to exact degrees:
#00bfff -> 195deg, #0080ff -> 210deg, #0040ff -> 225deg (all 100% 50%).
"""

from __future__ import annotations

import logging

import pytest

from swatchbook.design.naming import NamingConvention
from swatchbook.hsl_generator import (
    compute_ranges,
    format_hue_offset,
    generate_hsl_ranges,
    group_families,
    hue_expression,
)

BLUE_ENTRIES = [
    ("--dh-color-blue-100", "#00bfff"),
    ("--dh-color-blue-200", "#0080ff"),
    ("--dh-color-blue-300", "#0040ff"),
]


@pytest.mark.evergreen
class TestHueOffset:
    """Tests for signed hue deltas."""

    def test_positive(self) -> None:
        assert format_hue_offset(15) == "+15deg"

    def test_negative(self) -> None:
        assert format_hue_offset(-15) == "-15deg"

    def test_zero_is_omitted(self) -> None:
        assert format_hue_offset(0) == ""

    def test_expression(self) -> None:
        assert hue_expression("--dh-color-blue-hue", 15) == "calc(var(--dh-color-blue-hue) + 15deg)"
        assert hue_expression("--dh-color-blue-hue", -15) == "calc(var(--dh-color-blue-hue) - 15deg)"
        assert hue_expression("--dh-color-blue-hue", 0) == "var(--dh-color-blue-hue)"


@pytest.mark.evergreen
class TestGrouping:
    """Tests for family grouping."""

    def test_groups_in_first_appearance_order(self, make_theme) -> None:
        theme = make_theme([
            ("--dh-color-red-100", "#ffe5e3"),
            ("--dh-color-blue-100", "#e0f0ff"),
            ("--dh-color-red-700", "#961d17"),
        ])
        families = group_families(theme, NamingConvention())

        assert list(families) == ["red", "blue"]
        assert families["red"] == ["--dh-color-red-100", "--dh-color-red-700"]

    def test_skips_hue_aliases_and_non_hex(self, make_theme) -> None:
        theme = make_theme([
            ("--dh-color-blue-hue", "210deg"),
            ("--dh-color-blue-100", "#e0f0ff"),
            ("--dh-color-blue-200", "hsl(210deg 50% 50%)"),
            ("--dh-color-accent-bg", "#155194"),
            ("--dh-color-accent-label", "#155194"),
            ("--spacing-100", "#000000"),
        ])
        families = group_families(theme, NamingConvention())

        assert families == {"blue": ["--dh-color-blue-100"]}


@pytest.mark.evergreen
class TestComputeRanges:
    """Tests for baselines and offsets."""

    def test_average_hue_and_offsets(self, make_theme) -> None:
        ranges = compute_ranges(make_theme(BLUE_ENTRIES))

        assert len(ranges) == 1
        blue = ranges[0]
        assert blue.family == "blue"
        assert blue.baseline == 210
        assert [s.hue for s in blue.shades] == [195, 210, 225]
        assert [s.delta for s in blue.shades] == [-15, 0, 15]
        assert [s.shade for s in blue.shades] == ["100", "200", "300"]
        assert all(s.saturation == "100" and s.lightness == "50" for s in blue.shades)

    def test_neutral_family_pinned(self, make_theme) -> None:
        theme = make_theme([("--dh-color-gray-100", "#e3e2e0")])
        gray = compute_ranges(theme)[0]

        assert gray.baseline == 0
        assert gray.shades[0].hue == 40
        assert gray.shades[0].delta == 40
        assert gray.shades[0].saturation == "5"
        assert gray.shades[0].lightness == "88"

    def test_custom_neutral(self, make_theme) -> None:
        theme = make_theme(BLUE_ENTRIES)
        blue = compute_ranges(theme, neutral_family="blue", neutral_hue=200)[0]

        assert blue.baseline == 200
        assert [s.delta for s in blue.shades] == [-5, 10, 25]

    def test_malformed_hex_raises(self, make_theme) -> None:
        theme = make_theme([("--dh-color-blue-100", "#12")])
        with pytest.raises(ValueError):
            compute_ranges(theme)


@pytest.mark.evergreen
class TestGenerate:
    """Tests for the generated CSS text."""

    def test_declarations(self, make_theme) -> None:
        text = generate_hsl_ranges(make_theme(BLUE_ENTRIES))

        assert text == (
            "--dh-color-blue-hue: 210deg;\n"
            "--dh-color-blue-100-hsl: calc(var(--dh-color-blue-hue) - 15deg) 100% 50%;\n"
            "--dh-color-blue-200-hsl: var(--dh-color-blue-hue) 100% 50%;\n"
            "--dh-color-blue-300-hsl: calc(var(--dh-color-blue-hue) + 15deg) 100% 50%;\n"
            "--dh-color-blue-100: hsl(var(--dh-color-blue-100-hsl));\n"
            "--dh-color-blue-200: hsl(var(--dh-color-blue-200-hsl));\n"
            "--dh-color-blue-300: hsl(var(--dh-color-blue-300-hsl));\n"
        )

    def test_families_separated_by_blank_line(self, make_theme) -> None:
        theme = make_theme([("--dh-color-gray-100", "#e3e2e0"), *BLUE_ENTRIES])
        text = generate_hsl_ranges(theme)

        assert text.startswith("--dh-color-gray-hue: 0deg;\n")
        assert "--dh-color-gray-100-hsl: calc(var(--dh-color-gray-hue) + 40deg) 5% 88%;" in text
        assert "\n\n--dh-color-blue-hue: 210deg;\n" in text

    def test_wrapped_in_root(self, make_theme) -> None:
        text = generate_hsl_ranges(make_theme(BLUE_ENTRIES), wrap=True)

        assert text.startswith(":root {\n  --dh-color-blue-hue: 210deg;\n")
        assert text.endswith("\n}\n")

    def test_empty_theme(self, make_theme) -> None:
        assert generate_hsl_ranges(make_theme([])) == ""

    def test_logs_output(self, make_theme, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="swatchbook.hsl_generator"):
            text = generate_hsl_ranges(make_theme(BLUE_ENTRIES))

        assert text in caplog.text
