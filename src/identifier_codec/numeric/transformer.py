"""Reversible value transformation within a numeric domain.

A transformer maps every value in ``[0, domain)`` to a value in the same
range. The identity transformer leaves values untouched; the encryption
transformer applies a keyed shuffle/xor permutation so that sequential input
values produce output values with no visible order. The concept is similar
to format-preserving encryption but makes no claim of cryptographic strength:
it obscures sequences (serial numbers, for example), nothing more.
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from ..shared.errors import DomainError, ErrorKind, ValueRangeError
from .range import Range

if TYPE_CHECKING:
    from .registry import TransformerRegistry

T = TypeVar("T")

# Transformed value and its 0-based index in the input (0 for a single value)
TransformationCallback = Callable[[int, int], T]

TransformerInput = Union[int, Range, Iterable[int]]

# 8-digit prime multiplied into the key to force at least four rounds
KEY_PRIME = 603868999

BITS: Tuple[int, ...] = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80)
INVERSE_BITS: Tuple[int, ...] = tuple(~bit & 0xFF for bit in BITS)


class Transformer(ABC):
    """Base class for transformers over the domain ``[0, domain)``.

    Use ``Transformer.get`` to obtain a shared instance for a domain and
    optional tweak; instances are read-only once constructed.
    """

    def __init__(self, domain: int) -> None:
        """Initialize transformer.

        Args:
            domain: Exclusive upper bound of valid values

        Raises:
            DomainError: If the domain is not greater than zero
        """
        if domain <= 0:
            raise DomainError(ErrorKind.DOMAIN_MUST_BE_GREATER_THAN_ZERO, domain=domain)

        self._domain = domain

    @staticmethod
    def construct(domain: int, tweak: Optional[int] = None) -> "Transformer":
        """Construct a new, uncached transformer.

        Args:
            domain: Domain
            tweak: Tweak; ``None`` selects the identity transformer

        Returns:
            IdentityTransformer if tweak is None, EncryptionTransformer otherwise
        """
        if tweak is None:
            return IdentityTransformer(domain)
        return EncryptionTransformer(domain, tweak)

    @staticmethod
    def get(
        domain: int,
        tweak: Optional[int] = None,
        registry: Optional["TransformerRegistry"] = None
    ) -> "Transformer":
        """Get a transformer, constructing it if necessary.

        An explicit tweak of 0 still yields an ``EncryptionTransformer``, which
        behaves as the identity but is a distinct instance.

        Args:
            domain: Domain
            tweak: Tweak; ``None`` selects the identity transformer
            registry: Registry to look up; the process-wide registry by default

        Returns:
            Transformer for the domain and tweak
        """
        if registry is None:
            from .registry import default_registry
            registry = default_registry()
        return registry.get(domain, tweak)

    @property
    def domain(self) -> int:
        """Domain (exclusive upper bound of valid values)."""
        return self._domain

    def _validate(self, value: int) -> None:
        if value < 0:
            raise ValueRangeError(
                ErrorKind.VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO, value=value
            )
        if value >= self._domain:
            raise ValueRangeError(
                ErrorKind.VALUE_MUST_BE_LESS_THAN, value=value, domain=self._domain
            )

    def _validate_range(self, values: Range) -> None:
        if values.minimum < 0:
            raise ValueRangeError(
                ErrorKind.MINIMUM_VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO,
                minimum_value=values.minimum
            )
        if values.maximum >= self._domain:
            raise ValueRangeError(
                ErrorKind.MAXIMUM_VALUE_MUST_BE_LESS_THAN,
                maximum_value=values.maximum,
                domain=self._domain
            )

    @abstractmethod
    def _do_forward(self, value: int) -> int:
        """Transform a value known to be within the domain."""

    @abstractmethod
    def _do_reverse(self, transformed_value: int) -> int:
        """Reverse a transformed value known to be within the domain."""

    def forward(
        self,
        value_or_values: TransformerInput,
        callback: Optional[TransformationCallback] = None
    ) -> Union[int, T, Iterator[int], Iterator[T]]:
        """Transform a value or values forward.

        A ``Range`` has its minimum and maximum validated once, before any
        value is produced. Any other iterable has each value validated as it
        is consumed, so an invalid value fails mid-iteration.

        Args:
            value_or_values: Single value, Range or iterable of values
            callback: Called with each transformed value and its index to
                produce the final value

        Returns:
            Transformed value for a single value, lazy iterator otherwise
        """
        if isinstance(value_or_values, int):
            self._validate(value_or_values)
            transformed_value = self._do_forward(value_or_values)
            return transformed_value if callback is None else callback(transformed_value, 0)

        if isinstance(value_or_values, Range):
            self._validate_range(value_or_values)
            return self._forward_range(value_or_values, callback)

        return self._forward_iterable(value_or_values, callback)

    def _forward_range(
        self, values: Range, callback: Optional[TransformationCallback]
    ) -> Iterator:
        for index, value in enumerate(values):
            transformed_value = self._do_forward(value)
            yield transformed_value if callback is None else callback(transformed_value, index)

    def _forward_iterable(
        self, values: Iterable[int], callback: Optional[TransformationCallback]
    ) -> Iterator:
        for index, value in enumerate(values):
            self._validate(value)
            transformed_value = self._do_forward(value)
            yield transformed_value if callback is None else callback(transformed_value, index)

    def reverse(self, transformed_value: int) -> int:
        """Transform a value in reverse.

        Args:
            transformed_value: Value previously returned by ``forward``

        Returns:
            Original value
        """
        self._validate(transformed_value)
        return self._do_reverse(transformed_value)


class IdentityTransformer(Transformer):
    """Identity transformer. Values are transformed to themselves."""

    def _do_forward(self, value: int) -> int:
        return value

    def _do_reverse(self, transformed_value: int) -> int:
        return transformed_value

    def __repr__(self) -> str:
        return f"IdentityTransformer(domain={self._domain})"


class EncryptionTransformer(Transformer):
    """Encryption transformer using repeated shuffle and xor rounds.

    The domain and tweak together determine the key, which determines the
    xor byte and shuffle bit of each round. Domains of at most 256 values
    are handled in a single xor-only round, since shuffling one byte is a
    no-op. A tweak of 0 produces identity output.

    Values that land outside the domain are cycle-walked: the rounds are
    reapplied until the result falls back inside the domain.
    """

    def __init__(self, domain: int, tweak: int) -> None:
        """Initialize encryption transformer.

        Args:
            domain: Domain
            tweak: Non-negative tweak

        Raises:
            DomainError: If the domain is not positive or the tweak is negative
        """
        super().__init__(domain)

        if tweak < 0:
            raise DomainError(
                ErrorKind.TWEAK_MUST_BE_GREATER_THAN_OR_EQUAL_TO_ZERO, tweak=tweak
            )

        self._tweak = tweak

        # Bytes needed to represent domain - 1; zero for a domain of 1
        self._domain_bytes = ((domain - 1).bit_length() + 7) // 8

        xor_bytes = []
        bits = []
        inverse_bits = []

        reduced_key = domain * tweak * KEY_PRIME
        while reduced_key != 0:
            key_byte = reduced_key & 0xFF

            xor_bytes.insert(0, key_byte)

            # Bits are taken in the opposite order to the xor bytes
            bit_number = key_byte & 0x07
            bits.append(BITS[bit_number])
            inverse_bits.append(INVERSE_BITS[bit_number])

            reduced_key >>= 8

        if self._domain_bytes == 1:
            domain_mask = reduce(
                lambda accumulator, bit: accumulator | bit,
                (bit for bit in BITS if bit < domain),
                0
            )

            self._xor_bytes: Tuple[int, ...] = (
                reduce(lambda accumulator, xor_byte: accumulator ^ xor_byte, xor_bytes, 0)
                & domain_mask,
            )
            # No shuffling within a single byte; any bit will do
            self._bits: Tuple[int, ...] = (BITS[0],)
            self._inverse_bits: Tuple[int, ...] = (INVERSE_BITS[0],)
            self._rounds = 1
        else:
            self._xor_bytes = tuple(xor_bytes)
            self._bits = tuple(bits)
            self._inverse_bits = tuple(inverse_bits)
            self._rounds = len(xor_bytes)

    @property
    def tweak(self) -> int:
        """Tweak."""
        return self._tweak

    @property
    def domain_bytes(self) -> int:
        """Number of bytes covered by the domain."""
        return self._domain_bytes

    @property
    def rounds(self) -> int:
        """Number of shuffle/xor rounds."""
        return self._rounds

    def _value_to_bytes(self, value: int) -> bytearray:
        return bytearray(value.to_bytes(self._domain_bytes, "big"))

    @staticmethod
    def _bytes_to_value(data: bytearray) -> int:
        return int.from_bytes(data, "big")

    def _shuffle(self, data: bytearray, round_number: int, forward: bool) -> bytearray:
        """Shuffle bytes by the state of the round's bit.

        Indexes of bytes with the bit set, followed by those without it, form
        the shuffle order. Forward moves the byte at each shuffle index to the
        sequential index; reverse moves it back. The tested bit stays in its
        original position so the operation can be undone.
        """
        bit = self._bits[round_number]
        inverse_bit = self._inverse_bits[round_number]

        determinants = [byte & bit for byte in data]

        shuffle_indexes = [index for index, determinant in enumerate(determinants) if determinant]
        shuffle_indexes.extend(
            index for index, determinant in enumerate(determinants) if not determinant
        )

        shuffled = bytearray(len(data))

        for index, shuffle_index in enumerate(shuffle_indexes):
            if forward:
                shuffled[index] = (data[shuffle_index] & inverse_bit) | determinants[index]
            else:
                shuffled[shuffle_index] = (data[index] & inverse_bit) | determinants[shuffle_index]

        return shuffled

    def _xor(self, data: bytearray, round_number: int, forward: bool) -> bytearray:
        """Chain-xor bytes, seeded by the round's xor byte.

        Forward: ``out[0] = in[0] ^ key``, ``out[i] = in[i] ^ out[i - 1]``.
        Reverse: ``out[0] = in[0] ^ key``, ``out[i] = in[i] ^ in[i - 1]``.
        """
        cumulative_xor_byte = self._xor_bytes[round_number]

        xored = bytearray(len(data))

        for index, byte in enumerate(data):
            xor_byte = byte ^ cumulative_xor_byte
            cumulative_xor_byte = xor_byte if forward else byte
            xored[index] = xor_byte

        return xored

    def _do_forward(self, value: int) -> int:
        data = self._value_to_bytes(value)

        while True:
            for round_number in range(self._rounds):
                data = self._xor(self._shuffle(data, round_number, True), round_number, True)

            transformed_value = self._bytes_to_value(data)
            if transformed_value < self._domain:
                return transformed_value

    def _do_reverse(self, transformed_value: int) -> int:
        data = self._value_to_bytes(transformed_value)

        while True:
            for round_number in reversed(range(self._rounds)):
                data = self._shuffle(self._xor(data, round_number, False), round_number, False)

            value = self._bytes_to_value(data)
            if value < self._domain:
                return value

    def __repr__(self) -> str:
        return f"EncryptionTransformer(domain={self._domain}, tweak={self._tweak})"
