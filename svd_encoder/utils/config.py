"""Formatting policy for the encoder.

Config is an immutable value passed by reference through the whole
recursive encode. The helpers here are pure: identifier case conversion,
number rendering (and its inverse) and the field ordering specification.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from svd_encoder.core.exceptions import NumberFormatError
from svd_encoder.svd.field import BitRangeType


class IdentifierFormat(Enum):
    """Case conversion rule for identifiers."""

    ORIGINAL = "original"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLE = "title"
    CONSTANT = "constant"
    SNAKE = "snake"
    PASCAL = "pascal"


class NumberFormat(Enum):
    """Rendering rule for unsigned numbers."""

    DEC = "dec"
    UPPER_HEX = "upper_hex"
    LOWER_HEX = "lower_hex"
    UPPER_HEX8 = "upper_hex8"
    LOWER_HEX8 = "lower_hex8"
    UPPER_HEX16 = "upper_hex16"
    LOWER_HEX16 = "lower_hex16"
    BIN = "bin"


class Sorting(Enum):
    """Sort key for field collections."""

    OFFSET = "offset"
    OFFSET_REVERSED = "offset_reversed"
    NAME = "name"


@dataclass(frozen=True)
class Unchanged:
    """Keep all fields in one sequence, optionally sorted by key."""

    key: Optional[Sorting] = None


@dataclass(frozen=True)
class DeriveLast:
    """Emit non-deriving fields first, then deriving ones.

    Each partition is sorted by key independently (or left in source order
    when key is None).
    """

    key: Optional[Sorting] = None


DerivableSorting = Union[Unchanged, DeriveLast]


@dataclass(frozen=True)
class Config:
    """Encoder formatting policy.

    Identifier rules apply per category (register names, field names, ...),
    number rules per numeric field. ``field_bit_range`` of None keeps the
    bit range notation the description was parsed from.
    """

    register_name: IdentifierFormat = IdentifierFormat.ORIGINAL
    register_address_offset: NumberFormat = NumberFormat.UPPER_HEX
    register_size: NumberFormat = NumberFormat.LOWER_HEX
    register_reset_value: NumberFormat = NumberFormat.UPPER_HEX8
    register_reset_mask: NumberFormat = NumberFormat.UPPER_HEX8
    field_name: IdentifierFormat = IdentifierFormat.ORIGINAL
    field_bit_range: Optional[BitRangeType] = None
    field_sorting: DerivableSorting = field(default_factory=Unchanged)
    enumerated_values_name: IdentifierFormat = IdentifierFormat.ORIGINAL
    enumerated_value_name: IdentifierFormat = IdentifierFormat.ORIGINAL
    enumerated_value_value: NumberFormat = NumberFormat.DEC
    dim_dim: NumberFormat = NumberFormat.DEC
    dim_increment: NumberFormat = NumberFormat.UPPER_HEX
    write_constraint_range: NumberFormat = NumberFormat.DEC


# Case conversion ------------------------------------------------------------

# SVD dimension placeholders survive every conversion untouched.
_PLACEHOLDER_RE = re.compile(r"(\[%s\]|%s)")
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+\d*|[A-Z]+\d*|\d+")
_EDGE_RE = re.compile(r"^(_*)(.*?)(_*)$", re.DOTALL)


def _words(piece: str) -> list[str]:
    return _WORD_RE.findall(piece)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join_words(piece: str, sep: str, upper: bool) -> str:
    # Leading/trailing underscores separate the piece from a placeholder.
    lead, body, trail = _EDGE_RE.match(piece).groups()
    words = [w.upper() if upper else w.lower() for w in _words(body)]
    return lead + sep.join(words) + trail


def _pascal(piece: str) -> str:
    words: list[str] = []
    for word in _words(piece):
        # Two lone capitals in a row would re-split as a single acronym.
        if words and _is_letter(words[-1]) and _is_letter(word[:1]) and _is_number(word[1:]):
            words[-1] += word
        else:
            words.append(word)
    return "".join(_capitalize(w) for w in words)


def _is_letter(word: str) -> bool:
    return len(word) == 1 and word.isalpha()


def _is_number(suffix: str) -> bool:
    return suffix == "" or suffix.isdigit()


def _convert_piece(piece: str, rule: IdentifierFormat) -> str:
    if rule is IdentifierFormat.UPPERCASE:
        return piece.upper()
    if rule is IdentifierFormat.LOWERCASE:
        return piece.lower()
    if rule is IdentifierFormat.TITLE:
        return _capitalize(piece)
    if rule is IdentifierFormat.CONSTANT:
        return _join_words(piece, "_", upper=True)
    if rule is IdentifierFormat.SNAKE:
        return _join_words(piece, "_", upper=False)
    if rule is IdentifierFormat.PASCAL:
        return _pascal(piece)
    return piece


def change_case(identifier: str, rule: Optional[IdentifierFormat]) -> str:
    """Convert an identifier to the given case.

    Args:
        identifier: Identifier as found in the description
        rule: Target case; None or ORIGINAL returns the identifier unchanged

    Returns:
        Converted identifier. Applying the same rule again is a no-op.
    """
    if rule is None or rule is IdentifierFormat.ORIGINAL:
        return identifier

    parts = _PLACEHOLDER_RE.split(identifier)
    # Odd indices are the captured placeholders.
    return "".join(
        part if i % 2 else _convert_piece(part, rule) for i, part in enumerate(parts)
    )


# Numbers --------------------------------------------------------------------


def format_number(value: int, rule: NumberFormat) -> str:
    """Render an unsigned integer.

    Raises:
        NumberFormatError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise NumberFormatError(value, rule.name)

    if rule is NumberFormat.UPPER_HEX:
        return f"0x{value:X}"
    if rule is NumberFormat.LOWER_HEX:
        return f"0x{value:x}"
    if rule is NumberFormat.UPPER_HEX8:
        return f"0x{value:08X}"
    if rule is NumberFormat.LOWER_HEX8:
        return f"0x{value:08x}"
    if rule is NumberFormat.UPPER_HEX16:
        return f"0x{value:016X}"
    if rule is NumberFormat.LOWER_HEX16:
        return f"0x{value:016x}"
    if rule is NumberFormat.BIN:
        return f"0b{value:b}"
    return str(value)


def parse_number(text: str) -> int:
    """Parse an SVD unsigned number (decimal, 0x hex, 0b or # binary).

    Raises:
        ValueError: If text is not a valid number
    """
    s = text.strip().lower()
    if s.startswith("0x"):
        return int(s[2:], 16)
    if s.startswith("0b"):
        return int(s[2:], 2)
    if s.startswith("#"):
        return int(s[1:], 2)
    return int(s, 10)
