"""
Stylesheet loading.

A ``Document`` keeps every stylesheet attached to it, the way a page keeps
``document.styleSheets``. Loading a path attaches the file and then looks the
sheet up again by href suffix, so a path only succeeds if it names a sheet
that actually got attached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .design.css_parser import StyleSheet, parse_css_file
from .errors import ResourceNotFoundError
from .utils import default_search_roots

_log = logging.getLogger(__name__)


class Document:
    """In-memory document holding attached stylesheets."""

    def __init__(self) -> None:
        self.style_sheets: list[StyleSheet] = []

    def attach(self, path: Path) -> StyleSheet:
        """Read and parse a stylesheet file and attach it."""
        href = f"file://{path.absolute().as_posix()}"
        sheet = StyleSheet(href=href, rules=parse_css_file(path))
        self.style_sheets.append(sheet)
        _log.debug("Attached %s (%d rules)", href, len(sheet.rules))
        return sheet

    def find(self, css_path: str) -> Optional[StyleSheet]:
        """First attached sheet whose href ends with ``/<css_path>``."""
        suffix = f"/{css_path}"
        for sheet in self.style_sheets:
            if sheet.href.endswith(suffix):
                return sheet
        return None


class StylesheetLoader:
    """Loads stylesheets by relative path from a list of search roots."""

    def __init__(
        self,
        search_roots: Optional[list[Path]] = None,
        document: Optional[Document] = None,
    ) -> None:
        self.search_roots = search_roots if search_roots is not None else default_search_roots()
        self.document = document if document is not None else Document()

    def locate(self, css_path: str) -> Optional[Path]:
        """File for a stylesheet path, checking each search root in order."""
        candidate = Path(css_path)
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None
        for root in self.search_roots:
            path = root / css_path
            if path.is_file():
                return path
        return None

    def load(self, css_path: str) -> StyleSheet:
        """Attach a stylesheet and return it.

        Raises:
            ResourceNotFoundError: If no attached sheet matches the path.
        """
        path = self.locate(css_path)
        if path is not None:
            self.document.attach(path)
        else:
            _log.debug("No file for %s under %s", css_path, self.search_roots)

        sheet = self.document.find(Path(css_path).as_posix().lstrip("/"))
        if sheet is None:
            raise ResourceNotFoundError(css_path)
        return sheet
