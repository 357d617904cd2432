"""Configuration loading and normalization for apidoc (.apidoc.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

import yaml

from .errors import ConfigError

DEFAULT_INCLUDES = (r"\.(js|es6)$",)
DEFAULT_EXCLUDES = (r"\.config\.(js|es6)$",)
DEFAULT_INDEX = "./README.md"
DEFAULT_PACKAGE = "./package.json"

CONFIG_FILENAMES = (".apidoc.yml", ".apidoc.yaml", ".apidoc.json")


@dataclass
class PluginDescriptor:
    """Names a plugin to load and the options handed to its constructor."""

    name: str
    option: Dict[str, Any] = field(default_factory=dict)
    instance: Optional[object] = None


@dataclass
class GenerationConfig:
    """Settings for one generation run; mutable until the run resolves it."""

    source: Optional[str] = None
    destination: Optional[str] = None
    package: Optional[str] = None
    index: Optional[str] = None
    includes: Optional[List[str]] = None
    excludes: Optional[List[str]] = None
    plugins: List[PluginDescriptor] = field(default_factory=list)
    debug: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {item.name for item in fields(cls)}
        unknown = sorted(key for key in data if key not in known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        includes = data.get("includes")
        excludes = data.get("excludes")
        return cls(
            source=_as_str(data.get("source")),
            destination=_as_str(data.get("destination")),
            package=_as_str(data.get("package")),
            index=_as_str(data.get("index")),
            includes=_as_str_list(includes) if includes is not None else None,
            excludes=_as_str_list(excludes) if excludes is not None else None,
            plugins=_as_plugin_list(data.get("plugins")),
            debug=_as_bool(data.get("debug")) or False,
        )


@dataclass(frozen=True)
class ResolvedConfig:
    """Immutable view of a handled configuration with compiled filters."""

    source: Path
    destination: Path
    package: str
    index: str
    includes: Tuple[Pattern[str], ...]
    excludes: Tuple[Pattern[str], ...]
    plugins: Tuple[PluginDescriptor, ...]
    debug: bool


def load_config(config_path: Path) -> GenerationConfig:
    """Load configuration from a YAML or JSON file on disk."""
    config_file = config_path.expanduser()
    if config_file.is_dir():
        config_file = find_config_file(config_file)
        if config_file is None:
            raise ConfigError(f"No apidoc configuration found in {config_path}")
    if not config_file.exists():
        raise ConfigError(f"Configuration file not found: {config_file}")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")
    return GenerationConfig.from_mapping(data)


def find_config_file(directory: Path) -> Path | None:
    """Return the first conventional config file present in ``directory``."""
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def require_paths(config: GenerationConfig) -> None:
    """Fail before any I/O when the mandatory paths are missing."""
    missing = [name for name in ("source", "destination") if not getattr(config, name)]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


def apply_defaults(config: GenerationConfig) -> GenerationConfig:
    """Fill every unset optional field with its documented default."""
    if config.includes is None:
        config.includes = list(DEFAULT_INCLUDES)
    if config.excludes is None:
        config.excludes = list(DEFAULT_EXCLUDES)
    if not config.index:
        config.index = DEFAULT_INDEX
    if not config.package:
        config.package = DEFAULT_PACKAGE
    if config.plugins is None:
        config.plugins = []
    return config


def compile_patterns(patterns: Sequence[str]) -> Tuple[Pattern[str], ...]:
    """Compile filter patterns, reporting the first invalid expression."""
    compiled: List[Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigError(f"Invalid filter pattern {pattern!r}: {exc}") from exc
    return tuple(compiled)


def resolve_config(config: GenerationConfig) -> ResolvedConfig:
    """Freeze a handled config; nothing may change it for the rest of the run."""
    require_paths(config)
    apply_defaults(config)
    return ResolvedConfig(
        source=Path(config.source),  # type: ignore[arg-type]
        destination=Path(config.destination),  # type: ignore[arg-type]
        package=config.package,  # type: ignore[arg-type]
        index=config.index,  # type: ignore[arg-type]
        includes=compile_patterns(config.includes or ()),
        excludes=compile_patterns(config.excludes or ()),
        plugins=tuple(config.plugins),
        debug=bool(config.debug),
    )


def _read_config(path: Path) -> Any:
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
    raise ConfigError(f"Expected a list of patterns, got {type(value).__name__}")


def _as_plugin_list(value: Any) -> List[PluginDescriptor]:
    if value is None:
        return []
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigError("plugins must be a list")

    descriptors: List[PluginDescriptor] = []
    for item in value:
        if isinstance(item, PluginDescriptor):
            descriptors.append(item)
        elif isinstance(item, str):
            descriptors.append(PluginDescriptor(name=item))
        elif isinstance(item, Mapping):
            name = _as_str(item.get("name"))
            if not name:
                raise ConfigError("Plugin entries require a 'name'")
            option = item.get("option") or {}
            if not isinstance(option, Mapping):
                raise ConfigError(f"Plugin '{name}' option must be a mapping")
            descriptors.append(PluginDescriptor(name=name, option=dict(option)))
        else:
            raise ConfigError(f"Unsupported plugin entry: {item!r}")
    return descriptors


__all__ = [
    "CONFIG_FILENAMES",
    "ConfigError",
    "DEFAULT_EXCLUDES",
    "DEFAULT_INCLUDES",
    "DEFAULT_INDEX",
    "DEFAULT_PACKAGE",
    "GenerationConfig",
    "PluginDescriptor",
    "ResolvedConfig",
    "apply_defaults",
    "compile_patterns",
    "find_config_file",
    "load_config",
    "require_paths",
    "resolve_config",
]
