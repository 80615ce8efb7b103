"""Protocols for encoder collaborators."""

from svd_encoder.interfaces.encoder import NodeEncoder

__all__ = ["NodeEncoder"]
