"""Encoders for array dimension information."""

from __future__ import annotations

from typing import Optional

from svd_encoder.core.element import Element, new_node
from svd_encoder.encoders.enumerated_values import encode_enumerated_value
from svd_encoder.svd.dim import DimArrayIndex, DimElement
from svd_encoder.utils.config import Config, format_number


def format_dim_index(indexes: tuple[str, ...]) -> str:
    """Render a dimIndex list.

    Consecutive ascending decimal indexes collapse to ``first-last``;
    anything else is comma-joined.
    """
    numbers = _as_numbers(indexes)
    if numbers is not None and len(numbers) > 1:
        first = numbers[0]
        if numbers == list(range(first, first + len(numbers))):
            return f"{first}-{numbers[-1]}"
    return ",".join(indexes)


def _as_numbers(indexes: tuple[str, ...]) -> Optional[list[int]]:
    if not all(i.isdigit() for i in indexes):
        return None
    # Leading zeros would not survive the collapsed form.
    if any(len(i) > 1 and i.startswith("0") for i in indexes):
        return None
    return [int(i) for i in indexes]


def encode_dim_array_index(index: DimArrayIndex, config: Config) -> Element:
    elem = Element("dimArrayIndex")
    if index.header_enum_name is not None:
        elem.append(new_node("headerEnumName", index.header_enum_name))
    for value in index.values:
        elem.append(encode_enumerated_value(value, config))
    return elem


def encode_dim_element(dim: DimElement, config: Config) -> Element:
    """Encode dimension information.

    The element's tag is only a carrier: register and field arrays merge its
    attributes and children into their own element.
    """
    elem = Element("dimElement")
    elem.append(new_node("dim", format_number(dim.dim, config.dim_dim)))
    elem.append(new_node("dimIncrement", format_number(dim.dim_increment, config.dim_increment)))

    # An empty index list is treated as absent.
    if dim.dim_index:
        elem.append(new_node("dimIndex", format_dim_index(dim.dim_index)))

    if dim.dim_name is not None:
        elem.append(new_node("dimName", dim.dim_name))

    if dim.dim_array_index is not None:
        elem.append(encode_dim_array_index(dim.dim_array_index, config))

    return elem
