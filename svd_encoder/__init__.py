"""SVD register encoder.

Converts an in-memory CMSIS-SVD register description into a generic
ordered tree of elements, the precursor of an SVD XML document. A Config
value decides which optional children are emitted, how identifiers are
cased, how numbers are rendered and in which order fields appear.

Getting started:
    from svd_encoder import Config, DeriveLast, Sorting, encode

    config = Config(field_sorting=DeriveLast(Sorting.OFFSET))
    element = encode(register, config)
"""

from svd_encoder.core import (
    ConfigurationError,
    Element,
    EncodeError,
    InvalidEntityError,
    NumberFormatError,
    SvdEncoderError,
    UnsupportedEntityError,
    encode,
    new_node,
)
from svd_encoder.encoders import encode_field, encode_register, encode_register_info
from svd_encoder.utils import (
    Config,
    DeriveLast,
    IdentifierFormat,
    NumberFormat,
    Sorting,
    Unchanged,
    change_case,
    format_number,
    get_config,
    load_config,
    parse_number,
)

__all__ = [
    # Tree model
    "Element",
    "new_node",
    # Encoding
    "encode",
    "encode_register",
    "encode_register_info",
    "encode_field",
    # Formatting policy
    "Config",
    "DeriveLast",
    "Unchanged",
    "IdentifierFormat",
    "NumberFormat",
    "Sorting",
    "change_case",
    "format_number",
    "parse_number",
    "get_config",
    "load_config",
    # Errors
    "SvdEncoderError",
    "ConfigurationError",
    "EncodeError",
    "NumberFormatError",
    "InvalidEntityError",
    "UnsupportedEntityError",
]
