"""Bit field description entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from svd_encoder.svd.dim import DimElement
from svd_encoder.svd.enumerated_value import EnumeratedValue
from svd_encoder.svd.enums import Access, ModifiedWriteValues, ReadAction, Usage
from svd_encoder.svd.write_constraint import WriteConstraint


class BitRangeType(Enum):
    """Notation a bit range is written in."""

    BIT_RANGE = "bit_range"  # [msb:lsb]
    OFFSET_WIDTH = "offset_width"  # bitOffset + bitWidth
    MSB_LSB = "msb_lsb"  # lsb + msb


@dataclass(frozen=True)
class BitRange:
    """Position of a field inside its register."""

    offset: int
    width: int
    range_type: BitRangeType = BitRangeType.BIT_RANGE

    @property
    def lsb(self) -> int:
        return self.offset

    @property
    def msb(self) -> int:
        return self.offset + self.width - 1

    @classmethod
    def from_msb_lsb(
        cls, msb: int, lsb: int, range_type: BitRangeType = BitRangeType.MSB_LSB
    ) -> BitRange:
        return cls(offset=lsb, width=msb - lsb + 1, range_type=range_type)


@dataclass(frozen=True)
class EnumeratedValues:
    """A named container of enumerated values for a field."""

    values: tuple[EnumeratedValue, ...] = ()
    name: Optional[str] = None
    header_enum_name: Optional[str] = None
    usage: Optional[Usage] = None
    derived_from: Optional[str] = None


@dataclass(frozen=True)
class Field:
    """A bit field of a register.

    When ``dim`` is set the field describes an array of fields, with ``%s``
    in its name standing for the index.
    """

    name: str
    bit_range: BitRange
    description: Optional[str] = None
    access: Optional[Access] = None
    modified_write_values: Optional[ModifiedWriteValues] = None
    write_constraint: Optional[WriteConstraint] = None
    read_action: Optional[ReadAction] = None
    enumerated_values: tuple[EnumeratedValues, ...] = ()
    derived_from: Optional[str] = None
    dim: Optional[DimElement] = None

    @property
    def bit_offset(self) -> int:
        return self.bit_range.offset

    @property
    def bit_width(self) -> int:
        return self.bit_range.width
