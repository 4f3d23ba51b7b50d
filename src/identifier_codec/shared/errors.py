"""Structured error types for identifier creation and decoding.

Every failure raised by the library carries an ``ErrorKind`` and the named
parameters that describe it, so that callers can render their own messages.
A default English rendering is attached as the exception message.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


class ErrorKind(Enum):
    """Enumeration of structured error kinds."""

    # Transformer construction
    DOMAIN_MUST_BE_GREATER_THAN_ZERO = "domain_must_be_greater_than_zero"
    TWEAK_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO = (
        "tweak_must_be_greater_than_or_equal_to_zero"
    )

    # Value bounds
    VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO = (
        "value_must_be_greater_than_or_equal_to_zero"
    )
    VALUE_MUST_BE_LESS_THAN = "value_must_be_less_than"
    MINIMUM_VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO = (
        "minimum_value_must_be_greater_than_or_equal_to_zero"
    )
    MAXIMUM_VALUE_MUST_BE_LESS_THAN = "maximum_value_must_be_less_than"

    # Character set construction
    FIRST_ZERO_FIRST_CHARACTER = "first_zero_first_character"
    ALL_NUMERIC_ALL_NUMERIC_CHARACTERS = "all_numeric_all_numeric_characters"
    DUPLICATE_CHARACTER = "duplicate_character"
    CHARACTER_MUST_BE_SINGLE = "character_must_be_single"

    # String shape
    STRING_MUST_NOT_BE_ALL_NUMERIC = "string_must_not_be_all_numeric"
    LENGTH_MUST_BE_GREATER_THAN_OR_EQUAL_TO = "length_must_be_greater_than_or_equal_to"
    LENGTH_MUST_BE_LESS_THAN_OR_EQUAL_TO = "length_must_be_less_than_or_equal_to"
    LENGTH_MUST_BE_EQUAL_TO = "length_must_be_equal_to"
    LENGTH_OF_COMPONENT_MUST_BE_GREATER_THAN_OR_EQUAL_TO = (
        "length_of_component_must_be_greater_than_or_equal_to"
    )
    LENGTH_OF_COMPONENT_MUST_BE_LESS_THAN_OR_EQUAL_TO = (
        "length_of_component_must_be_less_than_or_equal_to"
    )
    LENGTH_OF_COMPONENT_MUST_BE_EQUAL_TO = "length_of_component_must_be_equal_to"
    INVALID_CHARACTER_AT_POSITION = "invalid_character_at_position"
    INVALID_CHARACTER_AT_POSITION_OF_COMPONENT = (
        "invalid_character_at_position_of_component"
    )
    EXCLUSION_NOT_SUPPORTED = "exclusion_not_supported"


# Default English rendering, keyed by kind; placeholders are kind parameters
MESSAGE_TEMPLATES: Dict[ErrorKind, str] = {
    ErrorKind.DOMAIN_MUST_BE_GREATER_THAN_ZERO:
        "Domain {domain} must be greater than 0",
    ErrorKind.TWEAK_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO:
        "Tweak {tweak} must be greater than or equal to 0",
    ErrorKind.VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO:
        "Value {value} must be greater than or equal to 0",
    ErrorKind.VALUE_MUST_BE_LESS_THAN:
        "Value {value} must be less than {domain}",
    ErrorKind.MINIMUM_VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO:
        "Minimum value {minimum_value} must be greater than or equal to 0",
    ErrorKind.MAXIMUM_VALUE_MUST_BE_LESS_THAN:
        "Maximum value {maximum_value} must be less than {domain}",
    ErrorKind.FIRST_ZERO_FIRST_CHARACTER:
        "Character set must support zero as first character",
    ErrorKind.ALL_NUMERIC_ALL_NUMERIC_CHARACTERS:
        "Character set must support all numeric characters in sequence",
    ErrorKind.DUPLICATE_CHARACTER:
        "Character '{c}' is duplicated in character set at position {position}",
    ErrorKind.CHARACTER_MUST_BE_SINGLE:
        "Character set entry '{c}' at position {position} must be a single character",
    ErrorKind.STRING_MUST_NOT_BE_ALL_NUMERIC:
        "String must not be all numeric",
    ErrorKind.LENGTH_MUST_BE_GREATER_THAN_OR_EQUAL_TO:
        "Length {length} must be greater than or equal to {minimum_length}",
    ErrorKind.LENGTH_MUST_BE_LESS_THAN_OR_EQUAL_TO:
        "Length {length} must be less than or equal to {maximum_length}",
    ErrorKind.LENGTH_MUST_BE_EQUAL_TO:
        "Length {length} must be equal to {exact_length}",
    ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_GREATER_THAN_OR_EQUAL_TO:
        "Length {length} of {component} must be greater than or equal to "
        "{minimum_length}",
    ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_LESS_THAN_OR_EQUAL_TO:
        "Length {length} of {component} must be less than or equal to "
        "{maximum_length}",
    ErrorKind.LENGTH_OF_COMPONENT_MUST_BE_EQUAL_TO:
        "Length {length} of {component} must be equal to {exact_length}",
    ErrorKind.INVALID_CHARACTER_AT_POSITION:
        "Invalid character '{c}' at position {position}",
    ErrorKind.INVALID_CHARACTER_AT_POSITION_OF_COMPONENT:
        "Invalid character '{c}' at position {position} of {component}",
    ErrorKind.EXCLUSION_NOT_SUPPORTED:
        "Exclusion value of {exclusion} is not supported",
}


ComponentName = Union[str, Callable[[], str]]


def component_to_string(component: Optional[ComponentName]) -> Optional[str]:
    """Resolve a component name that may be given as a callback."""
    return component() if callable(component) else component


def render_message(kind: ErrorKind, params: Dict[str, Any]) -> str:
    """Render the default English message for an error kind.

    Args:
        kind: Error kind
        params: Named parameters of the error

    Returns:
        Rendered message; the bare kind value if the template cannot be filled
    """
    template = MESSAGE_TEMPLATES.get(kind)
    if template is None:
        return kind.value
    try:
        return template.format(**params)
    except KeyError:
        return f"{kind.value}: {params}"


class IdentifierError(ValueError):
    """Base exception carrying a structured error kind and its parameters."""

    def __init__(self, kind: ErrorKind, **params: Any) -> None:
        super().__init__(render_message(kind, params))
        self.kind = kind
        self.params = params

    def __reduce__(self) -> Any:
        return (_rebuild_error, (type(self), self.kind, self.params))


def _rebuild_error(
    error_class: type, kind: ErrorKind, params: Dict[str, Any]
) -> IdentifierError:
    return error_class(kind, **params)


class DomainError(IdentifierError):
    """Raised when a transformer domain or tweak is invalid."""


class ValueRangeError(IdentifierError):
    """Raised when a value or range of values falls outside a domain."""


class StringValidationError(IdentifierError):
    """Raised when a string violates a character set, length or exclusion."""


class CharacterSetError(IdentifierError):
    """Raised when a character set cannot support its declared exclusions."""
