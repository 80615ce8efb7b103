"""Encoders for enumerated values and their containers."""

from __future__ import annotations

import logging

from svd_encoder.core.element import Element, new_node
from svd_encoder.core.exceptions import InvalidEntityError
from svd_encoder.encoders.properties import encode_enum_value
from svd_encoder.svd.enumerated_value import EnumeratedValue
from svd_encoder.svd.field import EnumeratedValues
from svd_encoder.utils.config import Config, change_case, format_number

logger = logging.getLogger(__name__)


def encode_enumerated_value(value: EnumeratedValue, config: Config) -> Element:
    """Encode one enumerated value.

    Raises:
        InvalidEntityError: If neither or both of value and isDefault are set
    """
    has_value = value.value is not None
    has_default = value.is_default is not None
    if has_value == has_default:
        raise InvalidEntityError(
            "enumeratedValue",
            f"'{value.name}' must set exactly one of value and isDefault",
        )

    elem = Element("enumeratedValue")
    elem.append(new_node("name", change_case(value.name, config.enumerated_value_name)))

    if value.description is not None:
        elem.append(new_node("description", value.description))

    if has_value:
        elem.append(new_node("value", format_number(value.value, config.enumerated_value_value)))
    else:
        elem.append(new_node("isDefault", "true" if value.is_default else "false"))

    return elem


def encode_enumerated_values(values: EnumeratedValues, config: Config) -> Element:
    """Encode an enumerated values container.

    A derived container may be empty since it takes its values from the
    referenced one; any other container needs at least one value.

    Raises:
        InvalidEntityError: If a non-derived container has no values
    """
    if not values.values and values.derived_from is None:
        raise InvalidEntityError(
            "enumeratedValues", f"'{values.name or '<anonymous>'}' has no values"
        )

    elem = Element("enumeratedValues")

    if values.name is not None:
        elem.append(new_node("name", change_case(values.name, config.enumerated_values_name)))

    if values.header_enum_name is not None:
        elem.append(new_node("headerEnumName", values.header_enum_name))

    if values.usage is not None:
        elem.append(encode_enum_value(values.usage, config))

    for value in values.values:
        elem.append(encode_enumerated_value(value, config))

    if values.derived_from is not None:
        logger.debug(f"enumeratedValues {values.name} derives from {values.derived_from}")
        elem.set("derivedFrom", change_case(values.derived_from, config.enumerated_values_name))

    return elem
