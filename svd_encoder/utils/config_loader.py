"""Helpers for loading and validating encoder configuration."""

import logging
import threading
from dataclasses import fields as dataclass_fields
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

import yaml  # type: ignore[import-untyped]

from svd_encoder.core.exceptions import ConfigurationError
from svd_encoder.svd.field import BitRangeType
from svd_encoder.utils.config import (
    Config,
    DerivableSorting,
    DeriveLast,
    IdentifierFormat,
    NumberFormat,
    Sorting,
    Unchanged,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Enum type expected for each plain Config key
_ENUM_KEYS: dict[str, Type[Enum]] = {
    "register_name": IdentifierFormat,
    "register_address_offset": NumberFormat,
    "register_size": NumberFormat,
    "register_reset_value": NumberFormat,
    "register_reset_mask": NumberFormat,
    "field_name": IdentifierFormat,
    "field_bit_range": BitRangeType,
    "enumerated_values_name": IdentifierFormat,
    "enumerated_value_name": IdentifierFormat,
    "enumerated_value_value": NumberFormat,
    "dim_dim": NumberFormat,
    "dim_increment": NumberFormat,
    "write_constraint_range": NumberFormat,
}

_SORTING_MODES = {"unchanged": Unchanged, "derive_last": DeriveLast}

# Configuration cache with thread safety
_LOADER_CACHE: dict[str, Config] = {}
_CACHE_LOCK = threading.RLock()


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(raw).__name__}")
    return raw


def _parse_enum(key: str, enum_type: Type[E], value: Any) -> E:
    """Look up an enum member by name, case-insensitively."""
    if isinstance(value, str):
        name = value.strip().upper().replace("-", "_")
        if name in enum_type.__members__:
            return enum_type[name]

    choices = ", ".join(m.lower() for m in enum_type.__members__)
    raise ConfigurationError(key, f"unknown value {value!r}; expected one of: {choices}")


def _build_field_sorting(raw: Any) -> DerivableSorting:
    """Convert the field_sorting section.

    Accepts ``{mode: unchanged|derive_last, key: offset|offset_reversed|name}``;
    a bare string is shorthand for ``{mode: unchanged, key: <string>}``.
    """
    if raw is None:
        return Unchanged()
    if isinstance(raw, str):
        return Unchanged(_parse_enum("field_sorting.key", Sorting, raw))
    if not isinstance(raw, dict):
        raise ConfigurationError("field_sorting", "must be a mapping or a sort key")

    unknown = set(raw) - {"mode", "key"}
    if unknown:
        raise ConfigurationError("field_sorting", f"unknown keys: {sorted(unknown)}")

    mode = str(raw.get("mode", "unchanged")).strip().lower().replace("-", "_")
    if mode not in _SORTING_MODES:
        raise ConfigurationError(
            "field_sorting.mode", f"must be one of {sorted(_SORTING_MODES)}, got {mode!r}"
        )

    key_raw = raw.get("key")
    key = None if key_raw is None else _parse_enum("field_sorting.key", Sorting, key_raw)
    return _SORTING_MODES[mode](key)


def config_from_dict(raw: dict[str, Any]) -> Config:
    """Build a Config from a plain mapping.

    Missing keys keep their defaults.

    Raises:
        ConfigurationError: on unknown keys or values
    """
    known = {f.name for f in dataclass_fields(Config)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    kwargs: dict[str, Union[Enum, DerivableSorting, None]] = {}
    for key, value in raw.items():
        if key == "field_sorting":
            kwargs[key] = _build_field_sorting(value)
        elif key == "field_bit_range" and value is None:
            kwargs[key] = None
        else:
            kwargs[key] = _parse_enum(key, _ENUM_KEYS[key], value)

    return Config(**kwargs)


def load_config(path: Union[str, Path]) -> Config:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the YAML config

    Returns:
        Config instance

    Raises:
        ConfigurationError: on parse or validation errors
    """
    p = Path(path)
    raw = _load_yaml_file(p)

    try:
        cfg = config_from_dict(raw)
    except ConfigurationError as exc:
        logger.error(f"Invalid encoder config {p}: {exc}")
        raise

    logger.info(f"Loaded encoder config from {p}")
    return cfg


def get_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Return the config for path, loading and caching if necessary.

    With no path the default Config is returned. Configs are cached per
    resolved path; repeated calls return the cached instance without
    re-reading the YAML file.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    if path is None:
        return Config()

    cache_key = str(Path(path).resolve())
    with _CACHE_LOCK:
        if cache_key not in _LOADER_CACHE:
            _LOADER_CACHE[cache_key] = load_config(path)
        return _LOADER_CACHE[cache_key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
