"""In-memory SVD description model.

Entities are frozen dataclasses built upstream by a parser; the encoder
only reads them.
"""

from svd_encoder.svd.dim import DimArrayIndex, DimElement
from svd_encoder.svd.enumerated_value import EnumeratedValue
from svd_encoder.svd.enums import Access, ModifiedWriteValues, Protection, ReadAction, Usage
from svd_encoder.svd.field import BitRange, BitRangeType, EnumeratedValues, Field
from svd_encoder.svd.register import (
    Register,
    RegisterArray,
    RegisterInfo,
    RegisterProperties,
    SingleRegister,
)
from svd_encoder.svd.write_constraint import (
    UseEnumeratedValues,
    WriteAsRead,
    WriteConstraint,
    WriteConstraintRange,
)

__all__ = [
    # Registers
    "Register",
    "SingleRegister",
    "RegisterArray",
    "RegisterInfo",
    "RegisterProperties",
    # Fields
    "Field",
    "BitRange",
    "BitRangeType",
    "EnumeratedValues",
    "EnumeratedValue",
    # Arrays
    "DimElement",
    "DimArrayIndex",
    # Write constraints
    "WriteConstraint",
    "WriteAsRead",
    "UseEnumeratedValues",
    "WriteConstraintRange",
    # Enumerations
    "Access",
    "ModifiedWriteValues",
    "Protection",
    "ReadAction",
    "Usage",
]
