"""Character set validation.

Validates strings against an ordered character set, optional length bounds
and the exclusions the character set supports. Errors identify the offending
character and its 1-based position, optionally within a named component of a
larger composite string.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..shared.errors import (
    CharacterSetError,
    ComponentName,
    ErrorKind,
    StringValidationError,
    component_to_string,
)
from .exclusion import Exclusion

# Any character outside the ten numerals
NOT_ALL_NUMERIC_PATTERN = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class CharacterSetValidation:
    """Character set validation parameters.

    Attributes:
        minimum_length: Minimum length, if any
        maximum_length: Maximum length, if any
        exclusion: Exclusion the string must satisfy, if any
        position_offset: Offset of the string within a larger string, added to
            reported positions
        component: Name of the component being validated, or a callback
            returning it
    """

    minimum_length: Optional[int] = None
    maximum_length: Optional[int] = None
    exclusion: Optional[Exclusion] = None
    position_offset: int = 0
    component: Optional[ComponentName] = None

    def __post_init__(self) -> None:
        """Validate length bounds."""
        if self.minimum_length is not None and self.minimum_length < 0:
            raise ValueError("minimum_length must be >= 0 or None")
        if (self.minimum_length is not None and self.maximum_length is not None
                and self.maximum_length < self.minimum_length):
            raise ValueError("maximum_length must be >= minimum_length")
        if self.position_offset < 0:
            raise ValueError("position_offset must be >= 0")


class CharacterSetValidator:
    """Validates strings against a specified character set."""

    def __init__(
        self,
        character_set: Sequence[str],
        exclusion_support: Iterable[Exclusion] = ()
    ) -> None:
        """Initialize validator.

        Args:
            character_set: Ordered, unique, single-character strings
            exclusion_support: Exclusions supported besides ``Exclusion.NONE``

        Raises:
            CharacterSetError: If an entry is not a single character or is duplicated
        """
        self._character_set: Tuple[str, ...] = tuple(character_set)

        character_set_map: Dict[str, int] = {}
        for index, c in enumerate(self._character_set):
            if not isinstance(c, str) or len(c) != 1:
                raise CharacterSetError(
                    ErrorKind.CHARACTER_MUST_BE_SINGLE, c=c, position=index + 1
                )
            if c in character_set_map:
                raise CharacterSetError(
                    ErrorKind.DUPLICATE_CHARACTER, c=c, position=index + 1
                )
            character_set_map[c] = index

        self._character_set_map = character_set_map
        self._exclusion_support: Tuple[Exclusion, ...] = tuple(
            exclusion for exclusion in dict.fromkeys(exclusion_support)
            if exclusion is not Exclusion.NONE
        )

    @property
    def character_set(self) -> Tuple[str, ...]:
        """Character set."""
        return self._character_set

    @property
    def character_set_size(self) -> int:
        """Character set size (the radix)."""
        return len(self._character_set)

    @property
    def exclusion_support(self) -> Tuple[Exclusion, ...]:
        """Exclusions supported besides ``Exclusion.NONE``."""
        return self._exclusion_support

    def character(self, index: int) -> str:
        """Get the character at an index."""
        return self._character_set[index]

    def character_index(self, c: str) -> Optional[int]:
        """Get the index of a character, or None if it is not in the character set."""
        return self._character_set_map.get(c)

    def character_indexes(self, s: str) -> List[Optional[int]]:
        """Get the index of every character in a string (None where absent)."""
        return [self._character_set_map.get(c) for c in s]

    def validate_exclusion(self, exclusion: Optional[Exclusion]) -> Exclusion:
        """Validate that an exclusion is supported.

        Args:
            exclusion: Exclusion to validate; None is treated as ``Exclusion.NONE``

        Returns:
            The validated exclusion

        Raises:
            StringValidationError: If the exclusion is not supported
        """
        if exclusion is None:
            return Exclusion.NONE

        if exclusion is not Exclusion.NONE and exclusion not in self._exclusion_support:
            raise StringValidationError(
                ErrorKind.EXCLUSION_NOT_SUPPORTED,
                exclusion=exclusion.value if isinstance(exclusion, Exclusion) else exclusion
            )

        return exclusion

    def validate(self, s: str, validation: Optional[CharacterSetValidation] = None) -> None:
        """Validate a string.

        Args:
            s: String to validate
            validation: Validation parameters

        Raises:
            StringValidationError: If the string violates the character set or
                any of the validation parameters
        """
        validation = validation or CharacterSetValidation()
        component = component_to_string(validation.component)

        self._validate_length(len(s), validation, component)

        for index, character_index in enumerate(self.character_indexes(s)):
            if character_index is None:
                raise self._invalid_character(
                    s[index], index + validation.position_offset + 1, component
                )

        if validation.exclusion is not None:
            self.validate_exclusion(validation.exclusion)

            if validation.exclusion is Exclusion.FIRST_ZERO:
                if s.startswith("0"):
                    raise self._invalid_character(
                        "0", validation.position_offset + 1, component
                    )
            elif validation.exclusion is Exclusion.ALL_NUMERIC:
                if NOT_ALL_NUMERIC_PATTERN.search(s) is None:
                    raise StringValidationError(ErrorKind.STRING_MUST_NOT_BE_ALL_NUMERIC)

    @staticmethod
    def _validate_length(
        length: int, validation: CharacterSetValidation, component: Optional[str]
    ) -> None:
        minimum_length = validation.minimum_length
        maximum_length = validation.maximum_length

        if minimum_length is not None and length < minimum_length:
            if maximum_length is not None and maximum_length == minimum_length:
                kind = (ErrorKind.LENGTH_MUST_BE_EQUAL_TO if component is None
                        else ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_EQUAL_TO)
                raise StringValidationError(
                    kind, component=component, length=length, exact_length=minimum_length
                )

            kind = (ErrorKind.LENGTH_MUST_BE_GREATER_THAN_OR_EQUAL_TO if component is None
                    else ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_GREATER_THAN_OR_EQUAL_TO)
            raise StringValidationError(
                kind, component=component, length=length, minimum_length=minimum_length
            )

        # Too long is reported against the maximum even when the bounds are equal
        if maximum_length is not None and length > maximum_length:
            kind = (ErrorKind.LENGTH_MUST_BE_LESS_THAN_OR_EQUAL_TO if component is None
                    else ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_LESS_THAN_OR_EQUAL_TO)
            raise StringValidationError(
                kind, component=component, length=length, maximum_length=maximum_length
            )

    @staticmethod
    def _invalid_character(
        c: str, position: int, component: Optional[str]
    ) -> StringValidationError:
        if component is None:
            return StringValidationError(
                ErrorKind.INVALID_CHARACTER_AT_POSITION, c=c, position=position
            )
        return StringValidationError(
            ErrorKind.INVALID_CHARACTER_AT_POSITION_OF_COMPONENT,
            c=c, position=position, component=component
        )
