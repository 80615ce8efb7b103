"""Register description entities.

A register is either a single register or an array of registers. Both
variants wrap the same RegisterInfo; the array variant adds the dimension
information describing count and stride.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from svd_encoder.svd.dim import DimElement
from svd_encoder.svd.enums import Access, ModifiedWriteValues, Protection, ReadAction
from svd_encoder.svd.field import Field
from svd_encoder.svd.write_constraint import WriteConstraint


@dataclass(frozen=True)
class RegisterProperties:
    """Register attributes shared with (and inheritable from) parents."""

    size: Optional[int] = None
    access: Optional[Access] = None
    protection: Optional[Protection] = None
    reset_value: Optional[int] = None
    reset_mask: Optional[int] = None


@dataclass(frozen=True)
class RegisterInfo:
    """The canonical register description.

    ``address_offset`` is the byte offset within the parent peripheral or
    cluster. ``fields`` of None means the register declares no fields at
    all; an empty tuple is also accepted and encodes the same way.
    """

    name: str
    address_offset: int
    display_name: Optional[str] = None
    description: Optional[str] = None
    alternate_group: Optional[str] = None
    alternate_register: Optional[str] = None
    properties: RegisterProperties = field(default_factory=RegisterProperties)
    modified_write_values: Optional[ModifiedWriteValues] = None
    write_constraint: Optional[WriteConstraint] = None
    read_action: Optional[ReadAction] = None
    fields: Optional[tuple[Field, ...]] = None
    derived_from: Optional[str] = None


@dataclass(frozen=True)
class SingleRegister:
    info: RegisterInfo


@dataclass(frozen=True)
class RegisterArray:
    info: RegisterInfo
    dim: DimElement


Register = Union[SingleRegister, RegisterArray]
