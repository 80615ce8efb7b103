"""Entity encoders.

One encoder per description entity kind:
- register: register and register array, register description
- field: bit field and field array, bit range
- sorting: field emission order
- enumerated_values: enumerated values containers and entries
- dim: array dimension information
- properties: register properties, write constraint, enum-like values

Importing this package registers every node encoder with the global
registry so that svd_encoder.core.encode() can dispatch on entity type.
"""

from svd_encoder.core.registry import register_encoder
from svd_encoder.encoders.dim import encode_dim_array_index, encode_dim_element, format_dim_index
from svd_encoder.encoders.enumerated_values import encode_enumerated_value, encode_enumerated_values
from svd_encoder.encoders.field import encode_bit_range, encode_field
from svd_encoder.encoders.properties import (
    ENUM_TAGS,
    encode_enum_value,
    encode_register_properties,
    encode_write_constraint,
)
from svd_encoder.encoders.register import encode_register, encode_register_info
from svd_encoder.encoders.sorting import is_derived, sort_derived_fields, sort_fields
from svd_encoder.svd import (
    DimArrayIndex,
    DimElement,
    EnumeratedValue,
    EnumeratedValues,
    Field,
    RegisterArray,
    RegisterInfo,
    SingleRegister,
    UseEnumeratedValues,
    WriteAsRead,
    WriteConstraintRange,
)

register_encoder(SingleRegister, encode_register)
register_encoder(RegisterArray, encode_register)
register_encoder(RegisterInfo, encode_register_info)
register_encoder(Field, encode_field)
register_encoder(EnumeratedValues, encode_enumerated_values)
register_encoder(EnumeratedValue, encode_enumerated_value)
register_encoder(DimElement, encode_dim_element)
register_encoder(DimArrayIndex, encode_dim_array_index)
register_encoder(WriteAsRead, encode_write_constraint)
register_encoder(UseEnumeratedValues, encode_write_constraint)
register_encoder(WriteConstraintRange, encode_write_constraint)
for _enum_type in ENUM_TAGS:
    register_encoder(_enum_type, encode_enum_value)

__all__ = [
    "encode_register",
    "encode_register_info",
    "encode_field",
    "encode_bit_range",
    "encode_enumerated_values",
    "encode_enumerated_value",
    "encode_dim_element",
    "encode_dim_array_index",
    "format_dim_index",
    "encode_register_properties",
    "encode_write_constraint",
    "encode_enum_value",
    "sort_fields",
    "sort_derived_fields",
    "is_derived",
]
