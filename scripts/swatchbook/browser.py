"""
Theme resolution in a headless browser.

Loads the stylesheet into a Chromium page through Playwright and reads each
custom property's computed value, plus the background color a swatch painted
with it actually renders as. Files are served to the page from a routed
origin so stylesheet hrefs stay same-origin and their rules readable.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

from .design.color import RGBA, parse_color
from .errors import BrowserUnavailableError, ResourceNotFoundError
from .loader import StylesheetLoader
from .theme import ResolvedTheme
from .utils import log

_log = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

ORIGIN = "http://swatchbook.local"

PAGE_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>swatchbook</title></head>
<body><div id="container"></div></body>
</html>
"""

# Resolves true once the <link> loads, false when it fails to
ATTACH_STYLESHEET_JS = """
async (cssPath) => {
  const link = document.createElement("link");
  link.rel = "stylesheet";
  link.href = encodeURI(cssPath);
  const loaded = new Promise((resolve) => {
    link.addEventListener("load", () => resolve(true));
    link.addEventListener("error", () => resolve(false));
  });
  document.head.appendChild(link);
  return await loaded;
}
"""

READ_PROPERTIES_JS = """
({cssPath, marker}) => {
  const sheet = Array.from(document.styleSheets)
    .find((s) => s.href && decodeURI(s.href).endsWith(`/${cssPath}`));
  if (!sheet) {
    return null;
  }
  const first = sheet.cssRules[0];
  const names = first && first.style
    ? Array.from(first.style).filter((p) => p.startsWith(marker))
    : [];
  const container = document.getElementById("container");
  const entries = names.map((name) => {
    const cell = document.createElement("div");
    container.appendChild(cell);
    const value = getComputedStyle(cell).getPropertyValue(name).trim();
    cell.style.setProperty("background-color", `var(${name})`);
    const background = getComputedStyle(cell).backgroundColor;
    cell.remove();
    return [name, value, background];
  });
  return {href: sheet.href, entries};
}
"""


# =============================================================================
# Routing
# =============================================================================


def _split_root(path: Path, css_path: str) -> tuple[Path, str]:
    """Split a located file into (served root, path relative to it)."""
    if Path(css_path).is_absolute():
        return Path(path.anchor), path.as_posix()[len(path.anchor):]
    relative = Path(css_path.lstrip("/")).as_posix()
    root = path
    for _ in Path(relative).parts:
        root = root.parent
    return root, relative


def _make_handler(root: Path):
    """Route handler serving the page shell and files under ``root``."""

    def handle(route) -> None:
        url_path = unquote(route.request.url[len(ORIGIN):].split("?", 1)[0])
        if url_path in ("", "/", "/index.html"):
            route.fulfill(status=200, content_type="text/html", body=PAGE_HTML)
            return

        file_path = root / url_path.lstrip("/")
        if not file_path.is_file():
            _log.debug("404 %s", url_path)
            route.fulfill(status=404, body="")
            return

        content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        route.fulfill(status=200, content_type=content_type, body=file_path.read_bytes())

    return handle


# =============================================================================
# Resolution
# =============================================================================


def resolve_in_browser(
    css_path: str,
    loader: Optional[StylesheetLoader] = None,
    marker: str = "--",
) -> ResolvedTheme:
    """Resolve a stylesheet's custom properties with Chromium's computed style.

    Raises:
        BrowserUnavailableError: If playwright is not installed.
        ResourceNotFoundError: If the stylesheet cannot be found.
    """
    try:
        from playwright.sync_api import sync_playwright
    except ImportError:
        log.error("playwright not installed.")
        log.error("Run: pip install playwright && playwright install chromium")
        raise BrowserUnavailableError("playwright not available")

    loader = loader or StylesheetLoader()
    path = loader.locate(css_path)
    if path is None:
        raise ResourceNotFoundError(css_path)

    root, relative = _split_root(path, css_path)
    _log.debug("Serving %s from %s", relative, root)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            page.route(f"{ORIGIN}/**", _make_handler(root))
            page.goto(f"{ORIGIN}/index.html", wait_until="load")

            result = None
            if page.evaluate(ATTACH_STYLESHEET_JS, relative):
                result = page.evaluate(READ_PROPERTIES_JS, {"cssPath": relative, "marker": marker})
            else:
                _log.debug("Stylesheet failed to load: %s", relative)
        finally:
            browser.close()

    if result is None:
        raise ResourceNotFoundError(css_path)

    names: list[str] = []
    values: dict[str, str] = {}
    rgba: dict[str, RGBA] = {}
    for name, value, background in result["entries"]:
        names.append(name)
        values[name] = value
        parsed = parse_color(background)
        if parsed is not None:
            rgba[name] = parsed

    return ResolvedTheme(href=result["href"], names=tuple(names), values=values, rgba=rgba)
