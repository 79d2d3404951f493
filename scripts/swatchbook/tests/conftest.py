"""
Shared pytest fixtures for swatchbook tests.

Test Tier Markers:
  @pytest.mark.evergreen   - Tests that always run, never skip
  @pytest.mark.dev         - Development/WIP tests, toggle-able
  @pytest.mark.interactive - Tests requiring browser automation (Playwright)
"""

from __future__ import annotations

import io
import logging
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Callable, Iterator, Optional

import pytest

from swatchbook.theme import ResolvedTheme


# =============================================================================
# Test Data Constants
# =============================================================================

SAMPLE_HEX_CSS = """\
:root {
  --dh-color-gray-75: #f0f0ee;
  --dh-color-gray-800: #2d2a2e;
  --dh-color-blue-100: #e0f0ff;
  --dh-color-blue-700: #155194;
  --dh-color-accent-bg: var(--dh-color-blue-700);
  --dh-color-accent-label: var(--dh-color-blue-100);
}
"""

SAMPLE_HSL_CSS = """\
:root {
  --dh-color-blue-hue: 210deg;
  --dh-color-blue-100: hsl(var(--dh-color-blue-hue) 100% 94%);
  --dh-color-blue-700: hsl(calc(var(--dh-color-blue-hue) + 5deg) 75% 33%);
  --dh-color-red-hue: 4deg;
  --dh-color-red-500: hsl(var(--dh-color-red-hue) 71% 53%);
}
"""


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )
    config.addinivalue_line(
        "markers",
        "interactive: tests requiring browser automation (Playwright)"
    )


# =============================================================================
# Theme Fixtures
# =============================================================================


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    """Directory with themes/hex.css and themes/hsl.css sample stylesheets."""
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "hex.css").write_text(SAMPLE_HEX_CSS, encoding="utf-8")
    (themes / "hsl.css").write_text(SAMPLE_HSL_CSS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def in_theme_dir(theme_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the sample theme directory as the cwd."""
    monkeypatch.chdir(theme_dir)
    return theme_dir


@pytest.fixture
def make_theme() -> Callable[..., ResolvedTheme]:
    """Factory for a ResolvedTheme from (name, value) pairs."""

    def _make(
        entries: list[tuple[str, str]],
        rgba: Optional[dict] = None,
    ) -> ResolvedTheme:
        return ResolvedTheme(
            href="file:///test/theme.css",
            names=tuple(name for name, _ in entries),
            values=dict(entries),
            rgba=rgba,
        )

    return _make


# =============================================================================
# CLI Runner
# =============================================================================


class CLIResult:
    """Result of running a CLI command."""

    def __init__(self, returncode: int, stdout: str, stderr: str):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __repr__(self) -> str:
        return f"CLIResult(returncode={self.returncode}, stdout={self.stdout[:100]!r}...)"


class CLIRunner:
    """Helper class to run CLI commands in-process with captured output."""

    def run(self, args: list[str]) -> CLIResult:
        from swatchbook.cli import main

        stdout_capture = io.StringIO()
        stderr_capture = io.StringIO()

        with redirect_stdout(stdout_capture), redirect_stderr(stderr_capture):
            try:
                returncode = main(["--no-color", *args])
            except SystemExit as e:
                returncode = e.code if isinstance(e.code, int) else 1

        return CLIResult(
            returncode=returncode or 0,
            stdout=stdout_capture.getvalue(),
            stderr=stderr_capture.getvalue(),
        )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the root-logger setup main() performs via configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner(in_theme_dir: Path) -> CLIRunner:
    """CLI runner executing inside the sample theme directory."""
    return CLIRunner()
