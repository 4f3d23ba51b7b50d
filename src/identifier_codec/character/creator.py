"""Character set creator: maps integers to fixed-length strings and back.

The characters of the set act as digits in a positional numbering system
whose radix is the character set size. Values are first passed through a
transformer over the admissible domain for the requested length and
exclusion, so that with a tweak, sequential values produce strings with no
visible order.

Two exclusions are supported. ``FIRST_ZERO`` removes strings that start
with "0" by numbering the leading digit in radix ``size - 1``.
``ALL_NUMERIC`` removes strings made entirely of numerals by shifting each
value past every all-numeric string that precedes it in the full numbering.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..numeric.range import Range
from ..numeric.registry import TransformerRegistry, default_registry
from ..shared.errors import CharacterSetError, ErrorKind, StringValidationError
from ..shared.logging import get_logger
from .exclusion import Exclusion
from .validator import CharacterSetValidator

# Created string and its 0-based index in the input (0 for a single value)
CreationCallback = Callable[[str, int], str]

CreatorInput = Union[int, Range, Iterable[int]]

MAXIMUM_STRING_LENGTH = 40

NUMERALS = "0123456789"


def create_powers_of(base: int) -> Tuple[int, ...]:
    """Create powers of a base from ``base**0`` to ``base**MAXIMUM_STRING_LENGTH``."""
    powers_of: List[int] = []
    power_of = 1
    for _ in range(MAXIMUM_STRING_LENGTH + 1):
        powers_of.append(power_of)
        power_of *= base
    return tuple(powers_of)


# One extra power covers the shift past a full set of numeric strings
POWERS_OF_10: Tuple[int, ...] = create_powers_of(10) + (10 ** (MAXIMUM_STRING_LENGTH + 1),)


class CharacterSetCreator(CharacterSetValidator):
    """Maps numeric values to strings using the character set as digits."""

    MAXIMUM_STRING_LENGTH = MAXIMUM_STRING_LENGTH

    def __init__(
        self,
        character_set: Sequence[str],
        exclusion_support: Iterable[Exclusion] = (),
        registry: Optional[TransformerRegistry] = None
    ) -> None:
        """Initialize creator.

        Args:
            character_set: Ordered, unique, single-character strings
            exclusion_support: Exclusions supported besides ``Exclusion.NONE``
            registry: Transformer registry; the process-wide registry by default

        Raises:
            CharacterSetError: If the character set cannot support a declared
                exclusion
        """
        super().__init__(character_set, exclusion_support)

        self._registry = registry
        self.logger = get_logger(__name__, component="character_set_creator")

        size = self.character_set_size

        exclusion_none_domains = create_powers_of(size)
        exclusion_domains: Dict[Exclusion, Tuple[int, ...]] = {
            Exclusion.NONE: exclusion_none_domains,
        }

        if Exclusion.FIRST_ZERO in self.exclusion_support:
            if self.character_set[0] != "0":
                raise CharacterSetError(ErrorKind.FIRST_ZERO_FIRST_CHARACTER)

            # Length 0 cannot satisfy the exclusion; otherwise the leading
            # character has one fewer choice
            exclusion_domains[Exclusion.FIRST_ZERO] = (0,) + tuple(
                (size - 1) * exclusion_none_domains[length - 1]
                for length in range(1, MAXIMUM_STRING_LENGTH + 1)
            )

        all_zeros_values: Tuple[int, ...] = ()

        if Exclusion.ALL_NUMERIC in self.exclusion_support:
            numeral_indexes = self.character_indexes(NUMERALS)

            zero_index = numeral_indexes[0]
            if zero_index is None or numeral_indexes != list(
                range(zero_index, zero_index + len(NUMERALS))
            ):
                raise CharacterSetError(ErrorKind.ALL_NUMERIC_ALL_NUMERIC_CHARACTERS)

            exclusion_domains[Exclusion.ALL_NUMERIC] = tuple(
                exclusion_none_domains[length] - POWERS_OF_10[length]
                for length in range(MAXIMUM_STRING_LENGTH + 1)
            )

            # Value of "00...0" for each length
            values = []
            all_zeros_value = 0
            for _ in range(MAXIMUM_STRING_LENGTH + 1):
                values.append(all_zeros_value)
                all_zeros_value = all_zeros_value * size + zero_index
            all_zeros_values = tuple(values)

        self._exclusion_domains = exclusion_domains
        self._all_zeros_values = all_zeros_values

        if self.logger.is_debug_enabled():
            self.logger.debug(
                f"Created character set creator of size {size}",
                extra={"exclusion_support": [e.name for e in self.exclusion_support]}
            )

    @property
    def registry(self) -> TransformerRegistry:
        """Transformer registry used by this creator."""
        return self._registry if self._registry is not None else default_registry()

    def exclusion_domain(self, length: int, exclusion: Optional[Exclusion] = None) -> int:
        """Get the number of admissible strings of a length under an exclusion.

        Args:
            length: String length
            exclusion: Exclusion; None is the same as ``Exclusion.NONE``

        Returns:
            Domain of values for strings of that length
        """
        self._validate_creation_length(length)
        exclusion = self.validate_exclusion(exclusion)
        return self._exclusion_domains[exclusion][length]

    def _power_of_size(self, power: int) -> int:
        return self._exclusion_domains[Exclusion.NONE][power]

    def _all_numeric_shift(self, shift_forward: bool, length: int, value: int) -> int:
        """Determine the shift required to skip all all-numeric strings up to a value.

        Args:
            shift_forward: True to shift from value to string, False for string to value
            length: Length for which to compute the shift
            value: Value relative to the all-zeros value

        Returns:
            Number of all-numeric strings to skip

        Raises:
            StringValidationError: If shifting backward reveals an all-numeric string
        """
        if length == 0:
            if not shift_forward and value < 10:
                raise StringValidationError(ErrorKind.STRING_MUST_NOT_BE_ALL_NUMERIC)

            # Single characters; skip the ten numerals
            return 10

        power_of_size = self._power_of_size(length)
        power_of_10 = POWERS_OF_10[length]

        # Gap to the next all-numeric string of equal length
        gap = power_of_size - power_of_10 if shift_forward else power_of_size

        gaps = value // gap

        if gaps >= 10:
            return POWERS_OF_10[length + 1]

        return gaps * power_of_10 + self._all_numeric_shift(
            shift_forward, length - 1, value - gaps * gap
        )

    def _validate_creation_length(self, length: int) -> None:
        if length < 0:
            raise StringValidationError(
                ErrorKind.LENGTH_MUST_BE_GREATER_THAN_OR_EQUAL_TO,
                length=length, minimum_length=0
            )
        if length > MAXIMUM_STRING_LENGTH:
            raise StringValidationError(
                ErrorKind.LENGTH_MUST_BE_LESS_THAN_OR_EQUAL_TO,
                length=length, maximum_length=MAXIMUM_STRING_LENGTH
            )

    def create(
        self,
        length: int,
        value_or_values: CreatorInput,
        exclusion: Optional[Exclusion] = None,
        tweak: Optional[int] = None,
        creation_callback: Optional[CreationCallback] = None
    ) -> Union[str, Iterator[str]]:
        """Create string(s) by mapping value(s) onto the character set.

        Args:
            length: Required string length (0 to 40)
            value_or_values: Value, Range or iterable of values
            exclusion: Strings to exclude from the output (None for no exclusion)
            tweak: If provided, values are obscured by an encryption transformer
            creation_callback: Called with each created string and its index to
                produce the final string

        Returns:
            String for a single value, lazy iterator of strings otherwise
        """
        self._validate_creation_length(length)
        exclusion = self.validate_exclusion(exclusion)

        size = self.character_set_size
        all_zeros_value = (
            self._all_zeros_values[length] if exclusion is Exclusion.ALL_NUMERIC else 0
        )

        transformer = self.registry.get(self._exclusion_domains[exclusion][length], tweak)

        def render(transformed_value: int, index: int) -> str:
            s = ""

            if length != 0:
                convert_value = transformed_value

                if exclusion is Exclusion.ALL_NUMERIC and convert_value >= all_zeros_value:
                    convert_value += self._all_numeric_shift(
                        True, length, convert_value - all_zeros_value
                    )

                characters = []

                # Right to left, excluding the first character
                for _ in range(length - 1):
                    convert_value, digit = divmod(convert_value, size)
                    characters.append(self._character_set[digit])

                if exclusion is Exclusion.FIRST_ZERO:
                    characters.append(self._character_set[convert_value % (size - 1) + 1])
                else:
                    characters.append(self._character_set[convert_value % size])

                s = "".join(reversed(characters))

            return s if creation_callback is None else creation_callback(s, index)

        return transformer.forward(value_or_values, render)

    def value_for(
        self,
        s: str,
        exclusion: Optional[Exclusion] = None,
        tweak: Optional[int] = None
    ) -> int:
        """Determine the value for a string.

        Args:
            s: String previously created with the same exclusion and tweak
            exclusion: Strings excluded from the input (None for no exclusion)
            tweak: Tweak used when the string was created

        Returns:
            Numeric value of the string

        Raises:
            StringValidationError: If the string is not valid under the exclusion
        """
        length = len(s)

        self._validate_creation_length(length)
        exclusion = self.validate_exclusion(exclusion)

        size = self.character_set_size

        value = 0
        for index, character_index in enumerate(self.character_indexes(s)):
            if character_index is None:
                raise StringValidationError(
                    ErrorKind.INVALID_CHARACTER_AT_POSITION, c=s[index], position=index + 1
                )

            if index == 0 and exclusion is Exclusion.FIRST_ZERO:
                if character_index == 0:
                    raise StringValidationError(
                        ErrorKind.INVALID_CHARACTER_AT_POSITION, c="0", position=1
                    )
                value = character_index - 1
            else:
                value = value * size + character_index

        if exclusion is Exclusion.ALL_NUMERIC:
            all_zeros_value = self._all_zeros_values[length]

            if value >= all_zeros_value:
                # Fails if the string is all-numeric
                value -= self._all_numeric_shift(False, length, value - all_zeros_value)

        return self.registry.get(self._exclusion_domains[exclusion][length], tweak).reverse(value)

    def __repr__(self) -> str:
        return (
            f"CharacterSetCreator({''.join(self._character_set)!r}, "
            f"exclusion_support={[e.name for e in self.exclusion_support]})"
        )
