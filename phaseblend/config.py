from __future__ import annotations

from dataclasses import dataclass
from logging import Formatter
from pathlib import Path
from typing import Any

from phaseblend.errors import ConfigError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR | CRITICAL
    format: str = DEFAULT_LOG_FORMAT


@dataclass(frozen=True)
class OutputConfig:
    overwrite: bool = True


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section


def _logging_config(section: dict[str, Any]) -> LoggingConfig:
    defaults = LoggingConfig()
    level = str(section.get("level") or defaults.level).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown logging.level '{level}', expected one of {', '.join(LOG_LEVELS)}")
    fmt = str(section.get("format") or defaults.format)
    try:
        Formatter(fmt, validate=True)
    except ValueError as exc:
        raise ConfigError(f"Invalid logging.format: {exc}") from exc
    return LoggingConfig(level=level, format=fmt)


def _output_config(section: dict[str, Any]) -> OutputConfig:
    overwrite = section.get("overwrite")
    return OutputConfig(overwrite=OutputConfig.overwrite if overwrite is None else bool(overwrite))


def load_config(path: Path) -> AppConfig:
    path = Path(path)
    if not path.exists():
        return AppConfig()

    try:
        import yaml  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read config.yaml") from exc

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(raw, dict):
        return AppConfig()

    return AppConfig(
        logging=_logging_config(_section(raw, "logging")),
        output=_output_config(_section(raw, "output")),
    )
