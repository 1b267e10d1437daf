"""Configuration loading for srcdoc (.srcdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".srcdoc.yml"
DEFAULT_OUTPUT_DIR = "src-doc/"
DEFAULT_INDEX_FILENAME = "README.md"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class IndexConfig:
    """Index document settings."""

    filename: str = DEFAULT_INDEX_FILENAME
    title: Optional[str] = None
    template: Optional[Path] = None


@dataclass
class ScannerConfig:
    """Comment scanner options."""

    allow_bang: bool = False


@dataclass
class SrcDocConfig:
    """Represents the settings defined in .srcdoc.yml."""

    root: Path
    output_dir: str = DEFAULT_OUTPUT_DIR
    index: IndexConfig = field(default_factory=IndexConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> SrcDocConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SrcDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    index_data = _as_dict(data.get("index"))
    index = IndexConfig()
    if index_data:
        index.filename = _as_str(index_data.get("filename")) or DEFAULT_INDEX_FILENAME
        index.title = _as_str(index_data.get("title"))
        template = _as_str(index_data.get("template"))
        index.template = root / template if template else None

    scanner_data = _as_dict(data.get("scanner"))
    scanner = ScannerConfig()
    if scanner_data:
        scanner.allow_bang = _as_bool(scanner_data.get("allow_bang")) or False

    log_file = _as_str(data.get("log_file"))

    return SrcDocConfig(
        root=root,
        output_dir=_as_str(data.get("output_dir")) or DEFAULT_OUTPUT_DIR,
        index=index,
        scanner=scanner,
        log_file=root / log_file if log_file else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_INDEX_FILENAME",
    "DEFAULT_OUTPUT_DIR",
    "IndexConfig",
    "ScannerConfig",
    "SrcDocConfig",
    "load_config",
]
