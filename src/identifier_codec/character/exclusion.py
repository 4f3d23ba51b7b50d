"""Exclusion options for validating and creating character set strings."""

from enum import Enum


class Exclusion(Enum):
    """Shapes of string excluded from validation or creation."""

    NONE = 0            # No strings excluded
    FIRST_ZERO = 1      # Strings that start with "0"
    ALL_NUMERIC = 2     # Strings made up only of "0" to "9"
