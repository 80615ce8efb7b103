"""Array dimension entities shared by registers and fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from svd_encoder.svd.enumerated_value import EnumeratedValue


@dataclass(frozen=True)
class DimArrayIndex:
    """Enumeration naming the indexes of an array."""

    values: tuple[EnumeratedValue, ...]
    header_enum_name: Optional[str] = None


@dataclass(frozen=True)
class DimElement:
    """Dimension information of a register or field array.

    Args:
        dim: Number of elements
        dim_increment: Address (or bit) distance between elements
        dim_index: Index names substituted for %s, one per element
    """

    dim: int
    dim_increment: int
    dim_index: Optional[tuple[str, ...]] = None
    dim_name: Optional[str] = None
    dim_array_index: Optional[DimArrayIndex] = None
