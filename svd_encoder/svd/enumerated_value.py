"""A single enumerated value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EnumeratedValue:
    """Named value of a field or array index.

    Exactly one of ``value`` and ``is_default`` is expected; the encoder
    rejects entries that violate this.
    """

    name: str
    description: Optional[str] = None
    value: Optional[int] = None
    is_default: Optional[bool] = None
