"""Configuration loader that parses and validates user-provided TOML."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from .alignment import Alignment, parse_alignment
from .datatypes import AppConfig, ColumnsConfig, FlowConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the configuration file is malformed or fails validation."""


_MINIMUMS: Dict[str, int] = {
    "flow.width": 1,
    "columns.height": 1,
    "columns.gap": 0,
}


def _coerce_int(value: Any, dotted_key: str) -> int:
    """Return an integer, rejecting booleans and values below the key's minimum."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{dotted_key} must be an integer.")
    minimum = _MINIMUMS.get(dotted_key)
    if minimum is not None and value < minimum:
        raise ConfigError(f"{dotted_key} must be >= {minimum}.")
    return value


def _coerce_enum(value: Any, dotted_key: str, enum_type: type[Enum]) -> Enum:
    """Return an enum member, coercing string values case-insensitively."""

    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        if enum_type is Alignment:
            try:
                return parse_alignment(value)
            except ValueError as exc:
                raise ConfigError(f"{dotted_key}: {exc}") from None
        normalized = value.strip().lower()
        for member in enum_type:
            if normalized == str(member.value).lower():
                return member
    raise ConfigError(
        f"{dotted_key} must be one of: {', '.join(str(member.value) for member in enum_type)}"
    )


def _sanitize_section(raw: Any, name: str, cls):
    """
    Coerce a raw TOML table into an instance of ``cls``.

    Parameters:
        raw (Any): Raw TOML section data.
        name (str): Section name used when reporting validation errors.
        cls: Dataclass type used to construct the section object.

    Returns:
        Any: Instantiated dataclass populated with values from ``raw``.

    Raises:
        ConfigError: If the section is not a table or contains invalid keys or values.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    cls_fields = {field.name: field for field in fields(cls)}
    unknown = sorted(key for key in raw if key not in cls_fields)
    if unknown:
        raise ConfigError(f"Invalid keys in [{name}]: {', '.join(unknown)}")
    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        field_type = cls_fields[key].type
        dotted_key = f"{name}.{key}"
        if isinstance(field_type, type) and issubclass(field_type, Enum):
            cleaned[key] = _coerce_enum(value, dotted_key, field_type)
        elif field_type is int:
            cleaned[key] = _coerce_int(value, dotted_key)
        else:
            cleaned[key] = value
    return cls(**cleaned)


def load_config(path: str | Path) -> AppConfig:
    """
    Load and validate a boxlayout configuration file.

    Sections that are absent keep their dataclass defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or fails validation.
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as handle:
            raw = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read config {config_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML in {config_path}: {exc}") from exc

    sections = {"flow": FlowConfig, "columns": ColumnsConfig}
    unknown = sorted(key for key in raw if key not in sections)
    if unknown:
        raise ConfigError(f"Unknown config sections: {', '.join(unknown)}")

    app = AppConfig(
        flow=_sanitize_section(raw.get("flow", {}), "flow", FlowConfig),
        columns=_sanitize_section(raw.get("columns", {}), "columns", ColumnsConfig),
    )
    logger.debug("Loaded config from %s: %s", config_path, app)
    return app
