"""Encoders for registers.

A register array is built in two steps: the dimension information is
merged into an empty register element first, then the register
description is merged on top. Merging appends children and lets the later
element win attribute collisions, so the register description always takes
precedence over the array information.
"""

from __future__ import annotations

import logging

from svd_encoder.core.element import Element, new_node
from svd_encoder.encoders.dim import encode_dim_element
from svd_encoder.encoders.field import encode_field
from svd_encoder.encoders.properties import (
    encode_enum_value,
    encode_register_properties,
    encode_write_constraint,
)
from svd_encoder.encoders.sorting import sort_derived_fields
from svd_encoder.svd.register import Register, RegisterArray, RegisterInfo
from svd_encoder.utils.config import Config, Unchanged, change_case, format_number

logger = logging.getLogger(__name__)


def encode_register(register: Register, config: Config) -> Element:
    """Encode a single register or a register array.

    Raises:
        EncodeError: If the register or any nested entity fails to encode
    """
    if isinstance(register, RegisterArray):
        base = Element("register")
        base.merge(encode_dim_element(register.dim, config))
        base.merge(encode_register_info(register.info, config))
        return base
    return encode_register_info(register.info, config)


def encode_register_info(info: RegisterInfo, config: Config) -> Element:
    """Encode a register description.

    Optional children that merely repeat the register name (display name,
    description, alternate register) are omitted. The ``fields`` wrapper is
    only emitted when at least one field is encoded.

    Args:
        info: Register description
        config: Formatting policy

    Returns:
        A ``register`` element

    Raises:
        EncodeError: If any nested entity fails to encode
    """
    logger.debug(f"Encoding register {info.name}")

    elem = Element("register")
    elem.append(new_node("name", change_case(info.name, config.register_name)))

    if info.display_name is not None and info.display_name != info.name:
        elem.append(new_node("displayName", info.display_name))

    if info.description is not None and info.description != info.name:
        elem.append(new_node("description", info.description))

    if info.alternate_group is not None:
        elem.append(new_node("alternateGroup", str(info.alternate_group)))

    if info.alternate_register is not None and info.alternate_register != info.name:
        alternate = change_case(info.alternate_register, config.register_name)
        elem.append(new_node("alternateRegister", alternate))

    offset = format_number(info.address_offset, config.register_address_offset)
    elem.append(new_node("addressOffset", offset))

    elem.extend(encode_register_properties(info.properties, config))

    if info.modified_write_values is not None:
        elem.append(encode_enum_value(info.modified_write_values, config))

    if info.write_constraint is not None:
        elem.append(encode_write_constraint(info.write_constraint, config))

    if info.read_action is not None:
        elem.append(encode_enum_value(info.read_action, config))

    if info.fields is not None:
        if config.field_sorting == Unchanged():
            ordered = info.fields
        else:
            ordered = sort_derived_fields(info.fields, config.field_sorting)

        children = [encode_field(f, config) for f in ordered]
        if children:
            fields = Element("fields")
            fields.extend(children)
            elem.append(fields)

    if info.derived_from is not None:
        elem.set("derivedFrom", change_case(info.derived_from, config.register_name))

    return elem
