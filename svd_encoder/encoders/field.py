"""Encoders for bit fields."""

from __future__ import annotations

from svd_encoder.core.element import Element, new_node
from svd_encoder.core.exceptions import InvalidEntityError
from svd_encoder.encoders.dim import encode_dim_element
from svd_encoder.encoders.enumerated_values import encode_enumerated_values
from svd_encoder.encoders.properties import encode_enum_value, encode_write_constraint
from svd_encoder.svd.field import BitRange, BitRangeType, Field
from svd_encoder.utils.config import Config, NumberFormat, change_case, format_number


def encode_bit_range(bit_range: BitRange, config: Config) -> list[Element]:
    """Encode a bit range in the configured notation.

    ``config.field_bit_range`` of None keeps the notation the range was
    described in.

    Raises:
        InvalidEntityError: If the range has zero width
    """
    if bit_range.width < 1:
        raise InvalidEntityError("bitRange", f"width must be positive, got {bit_range.width}")

    notation = config.field_bit_range or bit_range.range_type
    lsb = format_number(bit_range.lsb, NumberFormat.DEC)
    msb = format_number(bit_range.msb, NumberFormat.DEC)

    if notation is BitRangeType.OFFSET_WIDTH:
        return [
            new_node("bitOffset", lsb),
            new_node("bitWidth", format_number(bit_range.width, NumberFormat.DEC)),
        ]
    if notation is BitRangeType.MSB_LSB:
        return [new_node("lsb", lsb), new_node("msb", msb)]
    return [new_node("bitRange", f"[{msb}:{lsb}]")]


def _encode_field_info(field: Field, config: Config) -> Element:
    elem = Element("field")
    elem.append(new_node("name", change_case(field.name, config.field_name)))

    if field.description is not None and field.description != field.name:
        elem.append(new_node("description", field.description))

    elem.extend(encode_bit_range(field.bit_range, config))

    if field.access is not None:
        elem.append(encode_enum_value(field.access, config))

    if field.modified_write_values is not None:
        elem.append(encode_enum_value(field.modified_write_values, config))

    if field.write_constraint is not None:
        elem.append(encode_write_constraint(field.write_constraint, config))

    if field.read_action is not None:
        elem.append(encode_enum_value(field.read_action, config))

    for values in field.enumerated_values:
        elem.append(encode_enumerated_values(values, config))

    if field.derived_from is not None:
        elem.set("derivedFrom", change_case(field.derived_from, config.field_name))

    return elem


def encode_field(field: Field, config: Config) -> Element:
    """Encode a field, or a field array when ``field.dim`` is set.

    Field arrays are built like register arrays: dimension nodes first,
    then the field description merged on top.
    """
    if field.dim is None:
        return _encode_field_info(field, config)

    base = Element("field")
    base.merge(encode_dim_element(field.dim, config))
    base.merge(_encode_field_info(field, config))
    return base
