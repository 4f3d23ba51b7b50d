"""Numeric layer for identifier creation.

This module provides integer ranges and reversible domain-bounded
transformers, together with the registry that shares transformer instances.
"""

from .range import Range
from .transformer import (
    EncryptionTransformer,
    IdentityTransformer,
    TransformationCallback,
    Transformer,
)
from .registry import (
    RegistryStatistics,
    TransformerRegistry,
    default_registry,
    set_default_registry,
)

__all__ = [
    "Range",
    "EncryptionTransformer",
    "IdentityTransformer",
    "TransformationCallback",
    "Transformer",
    "RegistryStatistics",
    "TransformerRegistry",
    "default_registry",
    "set_default_registry",
]
