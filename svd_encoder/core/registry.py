"""Encoder registry and dispatch.

Maps description entity types to the encoder producing their element.
Built-in encoders register themselves when svd_encoder.encoders is imported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from svd_encoder.core.exceptions import UnsupportedEntityError

if TYPE_CHECKING:
    from svd_encoder.core.element import Element
    from svd_encoder.interfaces.encoder import NodeEncoder
    from svd_encoder.utils.config import Config


class EncoderRegistry:
    """Registry of node encoders keyed by entity type.

    THREAD SAFETY: Not thread-safe. All registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._encoders: dict[type, NodeEncoder] = {}

    def register(self, entity_type: type, encoder: NodeEncoder) -> None:
        """Register the encoder for an entity type."""
        if entity_type in self._encoders:
            raise ValueError(f"Encoder for '{entity_type.__name__}' already registered")
        self._encoders[entity_type] = encoder

    def get(self, entity_type: type) -> NodeEncoder:
        """Get the encoder for an entity type.

        Raises:
            UnsupportedEntityError: If no encoder is registered for the type
        """
        if entity_type not in self._encoders:
            raise UnsupportedEntityError(entity_type)
        return self._encoders[entity_type]

    def list_types(self) -> list[type]:
        """List all entity types with a registered encoder."""
        return list(self._encoders.keys())

    def encode(self, entity: Any, config: Config) -> Element:
        """Encode an entity with the encoder registered for its type."""
        return self.get(type(entity))(entity, config)


# Global registry
_REGISTRY = EncoderRegistry()


def register_encoder(entity_type: type, encoder: NodeEncoder) -> None:
    """Register an encoder globally."""
    _REGISTRY.register(entity_type, encoder)


def get_encoder(entity_type: type) -> NodeEncoder:
    """Get the globally registered encoder for an entity type."""
    return _REGISTRY.get(entity_type)


def encode(entity: Any, config: Config) -> Element:
    """Encode any registered description entity."""
    return _REGISTRY.encode(entity, config)


def list_encodable_types() -> list[type]:
    """List all entity types with a registered encoder."""
    return _REGISTRY.list_types()
