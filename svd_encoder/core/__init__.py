"""Core modules for the encoder.

Core infrastructure shared by every entity encoder:
- element: Generic ordered tree model
- exceptions: Error hierarchy
- registry: Entity type to encoder dispatch
"""

from svd_encoder.core.element import Element, Node, new_node
from svd_encoder.core.exceptions import (
    ConfigurationError,
    EncodeError,
    InvalidEntityError,
    NumberFormatError,
    SvdEncoderError,
    UnsupportedEntityError,
)
from svd_encoder.core.registry import (
    EncoderRegistry,
    encode,
    get_encoder,
    list_encodable_types,
    register_encoder,
)

__all__ = [
    # Tree model
    "Element",
    "Node",
    "new_node",
    # Errors
    "SvdEncoderError",
    "ConfigurationError",
    "EncodeError",
    "NumberFormatError",
    "InvalidEntityError",
    "UnsupportedEntityError",
    # Registry
    "EncoderRegistry",
    "encode",
    "get_encoder",
    "list_encodable_types",
    "register_encoder",
]
