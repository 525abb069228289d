"""Configuration loading for devdocs (.devdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".devdocs.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SourcesConfig:
    """Input roots, relative to the project root."""

    typescript: str = "libs/src"
    stylesheets: str = "src/main/frontend"
    clojurescript: str = "src/main/frontend"
    api: str = "src/main/logseq"


@dataclass
class OutputConfig:
    """Where and how generated documents are written."""

    dir: str = "docs/generated"
    timestamps: bool = True
    key_function_limit: int = 10
    showcase_example_limit: int = 5
    namespace_limit: int = 15


@dataclass
class ScannerConfig:
    """Scanner enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class DevDocsConfig:
    """Represents the settings defined in .devdocs.yml."""

    root: Path
    project_name: str = "Logseq"
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    scanners: ScannerConfig = field(default_factory=ScannerConfig)
    exclude_paths: List[str] = field(default_factory=list)
    templates_dir: Optional[Path] = None

    def source_path(self, key: str) -> Path:
        relative = getattr(self.sources, key)
        return (self.root / relative).resolve()

    @property
    def output_dir(self) -> Path:
        return (self.root / self.output.dir).resolve()


def load_config(config_path: Path) -> DevDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DevDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DevDocsConfig(root=root)

    project_name = _as_str(data.get("project_name"))
    if project_name:
        config.project_name = project_name

    sources_data = _as_dict(data.get("sources"))
    for key in ("typescript", "stylesheets", "clojurescript", "api"):
        value = _as_str(sources_data.get(key))
        if value:
            setattr(config.sources, key, value)

    output_data = _as_dict(data.get("output"))
    if output_data:
        output_dir = _as_str(output_data.get("dir"))
        if output_dir:
            config.output.dir = output_dir
        timestamps = _as_bool(output_data.get("timestamps"))
        if timestamps is not None:
            config.output.timestamps = timestamps
        for key in ("key_function_limit", "showcase_example_limit", "namespace_limit"):
            if key not in output_data:
                continue
            limit = _as_int(output_data.get(key))
            if limit is None or limit < 1:
                raise ConfigError(f"output.{key} must be a positive integer")
            setattr(config.output, key, limit)

    scanner_data = _as_dict(data.get("scanners"))
    if scanner_data:
        config.scanners.enabled = _as_str_list(scanner_data.get("enabled"))

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = (root / templates_dir).resolve()
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
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


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


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


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
