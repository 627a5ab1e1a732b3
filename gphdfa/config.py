"""Configuration dataclasses and loader."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class EngineConfig:
    """How descriptors are checked and executed."""

    skip_self_loops: bool = True
    validate_states: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    console: bool = True
    filepath: Optional[Path] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    def resolved_path(self) -> Optional[Path]:
        if self.filepath is None:
            return None
        return Path(self.filepath).expanduser().resolve()


@dataclass(frozen=True)
class Config:
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_raw_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Config file not found at {config_path}")

    suffix = config_path.suffix.lower()
    try:
        with config_path.open("r", encoding="utf-8") as stream:
            if suffix in {".yaml", ".yml"}:
                raw = yaml.safe_load(stream) or {}
            elif suffix == ".json":
                raw = json.load(stream)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping at the top level")
    return raw


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FIELD_TYPES: Dict[str, tuple] = {
    "skip_self_loops": (bool,),
    "validate_states": (bool,),
    "level": (str,),
    "console": (bool,),
    "filepath": (str, Path, type(None)),
    "max_bytes": (int,),
    "backup_count": (int,),
}


def _section_values(cls, raw: Any, name: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown key(s) in '{name}': {', '.join(unknown)}")

    for key, value in raw.items():
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; only bool fields take true/false
        if isinstance(value, bool) and bool not in expected or not isinstance(value, expected):
            names = " or ".join(t.__name__ for t in expected if t is not type(None))
            raise ConfigError(f"'{name}.{key}' must be {names}, got {value!r}")
    return dict(raw)


def load_config(config_path: Path | str) -> Config:
    """Load a YAML or JSON configuration file."""

    config_path = Path(config_path)
    raw = _load_raw_config(config_path)

    unknown = sorted(set(raw) - {"engine", "logging"})
    if unknown:
        raise ConfigError(f"Unknown config section(s): {', '.join(unknown)}")

    engine = EngineConfig(**_section_values(EngineConfig, raw.get("engine"), "engine"))

    logging_raw = _section_values(LoggingConfig, raw.get("logging"), "logging")
    level = logging_raw.get("level")
    if level is not None and level.upper() not in LOG_LEVELS:
        raise ConfigError(f"'logging.level' must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    log_path = logging_raw.get("filepath")
    # relative log paths follow the config file; an empty path disables the file
    logging_raw["filepath"] = (config_path.parent / log_path).resolve() if log_path else None
    logging = LoggingConfig(**logging_raw)

    return Config(engine=engine, logging=logging)
