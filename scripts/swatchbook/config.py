"""
Palette configuration.

Naming conventions, foreground thresholds and generator settings. Defaults
match the dh design-token themes; a ``swatchbook.yaml`` file (or ``--config``)
can override any field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .design.naming import NamingConvention
from .errors import ConfigError
from .utils import DEFAULT_CSS_PATH

_log = logging.getLogger(__name__)

CONFIG_FILENAME = "swatchbook.yaml"


@dataclass
class PaletteConfig:
    """Configuration for a palette run."""

    naming: NamingConvention = field(default_factory=NamingConvention)
    default_css_path: str = DEFAULT_CSS_PATH
    dark_shade_threshold: int = 700  # shades >= this get light text
    light_text: str = "var(--dh-color-gray-75)"
    dark_text: str = "var(--dh-color-gray-800)"
    group_spacing: str = "40px"
    neutral_family: str = "gray"
    neutral_hue: int = 0
    hsl_source_theme: str = "hex.css"
    search_roots: list[Path] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaletteConfig":
        """Build a config from a parsed YAML mapping.

        Raises:
            ConfigError: On unknown keys or wrongly typed values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = dict(data)

        naming = kwargs.pop("naming", None)
        if naming is not None:
            if not isinstance(naming, dict):
                raise ConfigError("'naming' must be a mapping")
            naming_known = {f.name for f in fields(NamingConvention)}
            bad = sorted(set(naming) - naming_known)
            if bad:
                raise ConfigError(f"Unknown naming keys: {', '.join(bad)}")
            kwargs["naming"] = NamingConvention(**naming)

        if "search_roots" in kwargs:
            roots = kwargs["search_roots"] or []
            if not isinstance(roots, list):
                raise ConfigError("'search_roots' must be a list of paths")
            kwargs["search_roots"] = [Path(r).expanduser() for r in roots]

        for int_key in ("dark_shade_threshold", "neutral_hue"):
            if int_key in kwargs and not isinstance(kwargs[int_key], int):
                raise ConfigError(f"'{int_key}' must be an integer")

        return cls(**kwargs)


def load_config(path: Optional[Path] = None) -> PaletteConfig:
    """Load configuration from YAML.

    With no explicit path, ``swatchbook.yaml`` in the current directory is
    used when present; otherwise defaults apply.
    """
    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        if not candidate.exists():
            return PaletteConfig()
        path = candidate

    _log.debug("Loading config from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return PaletteConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    return PaletteConfig.from_dict(data)
