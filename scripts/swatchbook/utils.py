"""
Shared utilities for the swatchbook CLI.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .design.color import RGBA

# =============================================================================
# Constants
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent

# Built-in themes ship inside the package (themes/hex.css, themes/hsl.css)
BUILTIN_ROOT = PACKAGE_DIR

DEFAULT_CSS_PATH = "themes/hex.css"


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Colored terminal output with --no-color support.

    Headers and table rows go to stdout with the rest of a command's output.
    Status lines (info, success, warnings, errors) go to stderr so a page or
    CSS fragment printed to stdout can be piped cleanly.
    """

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
        "dim": "\033[2m",
    }

    def __init__(self, use_color: Optional[bool] = None):
        self._use_color = sys.stdout.isatty() if use_color is None else use_color

    def set_color(self, use_color: bool) -> None:
        self._use_color = use_color

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def _status(self, message: str) -> None:
        print(f"  {message}", file=sys.stderr)

    def header(self, message: str) -> None:
        print(f"\n{self._color('===', 'cyan')} {self._color(message, 'bold')} {self._color('===', 'cyan')}")

    def info(self, message: str) -> None:
        self._status(message)

    def success(self, message: str) -> None:
        self._status(f"{self._color('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        self._status(f"{self._color('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        self._status(f"{self._color('[ERROR]', 'red')} {message}")

    def dim(self, message: str) -> None:
        print(f"  {self._color(message, 'dim')}")

    def chip(self, rgba: Optional[RGBA]) -> str:
        """Two-cell sample of a color as a 24-bit background; blank without color."""
        if not self._use_color or rgba is None or rgba[3] == 0:
            return "  "
        r, g, b, _ = rgba
        return f"\033[48;2;{r};{g};{b}m  {self.COLORS['reset']}"

    def swatch_row(self, rgba: Optional[RGBA], name: str, detail: str, name_width: int = 30) -> None:
        """One palette row: color chip, property name, value details."""
        print(f"  {self.chip(rgba)} {name:<{name_width}} {detail}")


# Global logger instance
log = Logger()


def configure_logging(verbose: bool = False) -> None:
    """Route stdlib diagnostics to stderr.

    Module loggers stay quiet (WARNING) unless --verbose is passed.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


# =============================================================================
# Path Utilities
# =============================================================================


def theme_short_name(css_path: str) -> str:
    """Return the part of a stylesheet path after the last '/'."""
    return css_path[css_path.rfind("/") + 1:]


def default_search_roots(extra: Optional[list[Path]] = None) -> list[Path]:
    """Directories a relative stylesheet path is looked up in, in order.

    The current directory wins over the built-in themes.
    """
    roots = list(extra or [])
    roots.append(Path.cwd())
    roots.append(BUILTIN_ROOT)
    return roots
