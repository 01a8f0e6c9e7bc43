"""Configuration loading for mdtree (.mdtree.yml)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .walker import HiddenPolicy

CONFIG_FILENAME = ".mdtree.yml"
DEFAULT_CONTENT_FILE = "README.md"
DEFAULT_STYLESHEET = "style.css"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class SiteConfig:
    """Everything a build needs; nothing is read from the working directory."""

    content_root: Path
    output_root: Optional[Path] = None
    site_name: str = ""
    stylesheet: Optional[Path] = None
    hidden_entries: HiddenPolicy = HiddenPolicy.SKIP
    content_file: str = DEFAULT_CONTENT_FILE

    def with_overrides(self, **overrides: Any) -> "SiteConfig":
        """Return a copy with every non-``None`` override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def load_config(content_root: Path, config_file: Path | None = None) -> SiteConfig:
    """Load ``.mdtree.yml`` from the content root, falling back to defaults.

    An explicit ``config_file`` must exist; relative paths inside it (the
    stylesheet) still resolve against the content root.
    """
    root = Path(content_root).expanduser().resolve()
    if config_file is not None:
        config_file = Path(config_file).expanduser()
        if not config_file.is_file():
            raise ConfigError(f"Configuration file not found: {config_file}")
    else:
        config_file = root / CONFIG_FILENAME

    defaults = SiteConfig(
        content_root=root,
        site_name=root.name,
        stylesheet=root / DEFAULT_STYLESHEET,
    )
    if not config_file.exists():
        return defaults

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    site_name = _as_str(data.get("site_name")) or defaults.site_name

    stylesheet = defaults.stylesheet
    stylesheet_value = _as_str(data.get("stylesheet"))
    if stylesheet_value:
        stylesheet = root / stylesheet_value

    hidden_entries = _as_hidden_policy(data.get("hidden_entries"))

    content_file = _as_str(data.get("content_file")) or DEFAULT_CONTENT_FILE
    if "/" in content_file:
        raise ConfigError("content_file must be a plain file name")

    return SiteConfig(
        content_root=root,
        site_name=site_name,
        stylesheet=stylesheet,
        hidden_entries=hidden_entries,
        content_file=content_file,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_hidden_policy(value: Any) -> HiddenPolicy:
    if value is None:
        return HiddenPolicy.SKIP
    if isinstance(value, HiddenPolicy):
        return value
    try:
        return HiddenPolicy(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in HiddenPolicy)
        raise ConfigError(f"hidden_entries must be one of: {choices}") from exc


def parse_hidden_policy(value: str) -> HiddenPolicy:
    """Parse a hidden-entry policy name coming from the command line."""
    return _as_hidden_policy(value)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONTENT_FILE",
    "DEFAULT_STYLESHEET",
    "SiteConfig",
    "load_config",
    "parse_hidden_policy",
]
