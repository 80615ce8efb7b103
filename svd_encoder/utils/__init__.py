"""Formatting policy and configuration loading."""

from svd_encoder.utils.config import (
    Config,
    DerivableSorting,
    DeriveLast,
    IdentifierFormat,
    NumberFormat,
    Sorting,
    Unchanged,
    change_case,
    format_number,
    parse_number,
)
from svd_encoder.utils.config_loader import (
    clear_config_cache,
    config_from_dict,
    get_config,
    load_config,
)

__all__ = [
    "Config",
    "DerivableSorting",
    "DeriveLast",
    "IdentifierFormat",
    "NumberFormat",
    "Sorting",
    "Unchanged",
    "change_case",
    "format_number",
    "parse_number",
    "clear_config_cache",
    "config_from_dict",
    "get_config",
    "load_config",
]
