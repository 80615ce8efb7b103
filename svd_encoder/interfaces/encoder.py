"""Encoder protocol for description entities.

An encoder turns one description entity into part of the output tree under
a formatting policy.

PROTOCOL CONTRACT:
- A NodeEncoder returns one standalone Element (register, field, ...)
- Encoders never mutate the entity or the config
- Failures raise EncodeError (or a subclass); no partial node is returned

Register properties and bit ranges are not node encoders: they return a
list of Elements that the caller splices into its own child list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from svd_encoder.core.element import Element
    from svd_encoder.utils.config import Config


class NodeEncoder(Protocol):
    """Encodes an entity into a single element."""

    def __call__(self, entity: Any, config: Config) -> Element:
        """Encode the entity.

        Raises:
            EncodeError: If the entity or a nested entity cannot be encoded
        """
        ...
