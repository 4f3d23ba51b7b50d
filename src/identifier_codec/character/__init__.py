"""Character layer for identifier creation.

This module provides character set validation and the creator that maps
integers to fixed-length strings over a character set, with optional
exclusion of leading-zero and all-numeric strings.
"""

from .exclusion import Exclusion
from .validator import (
    CharacterSetValidation,
    CharacterSetValidator,
)
from .creator import (
    MAXIMUM_STRING_LENGTH,
    CharacterSetCreator,
    CreationCallback,
)
from .presets import (
    ALPHABETIC_CREATOR,
    ALPHABETIC_VALIDATOR,
    ALPHANUMERIC_CREATOR,
    ALPHANUMERIC_VALIDATOR,
    HEXADECIMAL_CREATOR,
    HEXADECIMAL_VALIDATOR,
    NUMERIC_CREATOR,
    NUMERIC_VALIDATOR,
)

__all__ = [
    "Exclusion",
    "CharacterSetValidation",
    "CharacterSetValidator",
    "MAXIMUM_STRING_LENGTH",
    "CharacterSetCreator",
    "CreationCallback",
    "ALPHABETIC_CREATOR",
    "ALPHABETIC_VALIDATOR",
    "ALPHANUMERIC_CREATOR",
    "ALPHANUMERIC_VALIDATOR",
    "HEXADECIMAL_CREATOR",
    "HEXADECIMAL_VALIDATOR",
    "NUMERIC_CREATOR",
    "NUMERIC_VALIDATOR",
]
