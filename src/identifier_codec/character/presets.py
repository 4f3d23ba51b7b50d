"""Predefined character set creators.

Each creator is also exported as a validator alias for callers that only
validate strings.
"""

import string

from .creator import CharacterSetCreator
from .exclusion import Exclusion
from .validator import CharacterSetValidator

# Character set is 0-9
NUMERIC_CREATOR = CharacterSetCreator(
    string.digits,
    (Exclusion.FIRST_ZERO,)
)
NUMERIC_VALIDATOR: CharacterSetValidator = NUMERIC_CREATOR

# Character set is 0-9, A-F
HEXADECIMAL_CREATOR = CharacterSetCreator(
    string.digits + "ABCDEF",
    (Exclusion.FIRST_ZERO, Exclusion.ALL_NUMERIC)
)
HEXADECIMAL_VALIDATOR: CharacterSetValidator = HEXADECIMAL_CREATOR

# Character set is A-Z
ALPHABETIC_CREATOR = CharacterSetCreator(string.ascii_uppercase)
ALPHABETIC_VALIDATOR: CharacterSetValidator = ALPHABETIC_CREATOR

# Character set is 0-9, A-Z
ALPHANUMERIC_CREATOR = CharacterSetCreator(
    string.digits + string.ascii_uppercase,
    (Exclusion.FIRST_ZERO, Exclusion.ALL_NUMERIC)
)
ALPHANUMERIC_VALIDATOR: CharacterSetValidator = ALPHANUMERIC_CREATOR
