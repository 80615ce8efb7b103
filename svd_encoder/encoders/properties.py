"""Encoders for register properties, write constraints and enum-like values."""

from __future__ import annotations

from enum import Enum

from svd_encoder.core.element import Element, new_node
from svd_encoder.core.exceptions import InvalidEntityError
from svd_encoder.svd.enums import Access, ModifiedWriteValues, Protection, ReadAction, Usage
from svd_encoder.svd.register import RegisterProperties
from svd_encoder.svd.write_constraint import (
    UseEnumeratedValues,
    WriteAsRead,
    WriteConstraint,
)
from svd_encoder.utils.config import Config, format_number

ENUM_TAGS: dict[type, str] = {
    Access: "access",
    ModifiedWriteValues: "modifiedWriteValues",
    Protection: "protection",
    ReadAction: "readAction",
    Usage: "usage",
}


def encode_enum_value(value: Enum, config: Config) -> Element:
    """Encode an enum-like value as a text node with its SVD spelling."""
    return new_node(ENUM_TAGS[type(value)], value.value)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def encode_write_constraint(constraint: WriteConstraint, config: Config) -> Element:
    """Encode a write constraint.

    Raises:
        InvalidEntityError: If a range has its minimum above its maximum
    """
    elem = Element("writeConstraint")
    if isinstance(constraint, WriteAsRead):
        elem.append(new_node("writeAsRead", _bool_text(constraint.enabled)))
    elif isinstance(constraint, UseEnumeratedValues):
        elem.append(new_node("useEnumeratedValues", _bool_text(constraint.enabled)))
    else:
        if constraint.minimum > constraint.maximum:
            raise InvalidEntityError(
                "writeConstraint",
                f"range minimum {constraint.minimum} exceeds maximum {constraint.maximum}",
            )
        rng = Element("range")
        rng.append(
            new_node("minimum", format_number(constraint.minimum, config.write_constraint_range))
        )
        rng.append(
            new_node("maximum", format_number(constraint.maximum, config.write_constraint_range))
        )
        elem.append(rng)
    return elem


def encode_register_properties(props: RegisterProperties, config: Config) -> list[Element]:
    """Encode the register properties group.

    Returns:
        Nodes for each property that is set, to be spliced into the parent
    """
    children: list[Element] = []

    if props.size is not None:
        children.append(new_node("size", format_number(props.size, config.register_size)))

    if props.access is not None:
        children.append(encode_enum_value(props.access, config))

    if props.protection is not None:
        children.append(encode_enum_value(props.protection, config))

    if props.reset_value is not None:
        children.append(
            new_node("resetValue", format_number(props.reset_value, config.register_reset_value))
        )

    if props.reset_mask is not None:
        children.append(
            new_node("resetMask", format_number(props.reset_mask, config.register_reset_mask))
        )

    return children
