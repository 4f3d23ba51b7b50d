"""Identifier Codec.

Generates and decodes fixed-length identifiers (serial numbers, container
codes and the like) from integer values, optionally obscuring the sequence
so that one identifier gives no practical clue to its neighbours.

Progressive API Disclosure:
- Level 1: Predefined creators - NUMERIC_CREATOR, HEXADECIMAL_CREATOR, ...
- Level 2: Custom character sets - CharacterSetCreator class
- Level 3: Raw value transformation - Transformer.get()
- Level 4: Injected registries - TransformerRegistry, IdentifierConfig
"""

__version__ = "0.1.0"
__author__ = "Identifier Codec Team"

# Level 1: Predefined creators
from .character import (
    ALPHABETIC_CREATOR,
    ALPHANUMERIC_CREATOR,
    HEXADECIMAL_CREATOR,
    NUMERIC_CREATOR,
)

# Level 2: Custom character sets
from .character import (
    CharacterSetCreator,
    CharacterSetValidation,
    CharacterSetValidator,
    Exclusion,
)

# Level 3 and 4: Transformation and registries
from .numeric import (
    EncryptionTransformer,
    IdentityTransformer,
    Range,
    Transformer,
    TransformerRegistry,
)
from .shared import (
    CharacterSetError,
    DomainError,
    ErrorKind,
    IdentifierConfig,
    IdentifierError,
    StringValidationError,
    ValueRangeError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Predefined creators
    "ALPHABETIC_CREATOR",
    "ALPHANUMERIC_CREATOR",
    "HEXADECIMAL_CREATOR",
    "NUMERIC_CREATOR",

    # Level 2: Custom character sets
    "CharacterSetCreator",
    "CharacterSetValidation",
    "CharacterSetValidator",
    "Exclusion",

    # Level 3: Transformation
    "EncryptionTransformer",
    "IdentityTransformer",
    "Range",
    "Transformer",

    # Level 4: Registries and configuration
    "TransformerRegistry",
    "IdentifierConfig",

    # Errors
    "CharacterSetError",
    "DomainError",
    "ErrorKind",
    "IdentifierError",
    "StringValidationError",
    "ValueRangeError",
]
