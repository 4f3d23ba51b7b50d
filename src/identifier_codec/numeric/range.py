"""Ascending and descending integer ranges for batch operations.

A ``Range`` exposes its bounds without traversal, which lets batch
transformations validate the whole span once up front.
"""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class Range:
    """Immutable span of integers starting at ``start``.

    A non-negative ``count`` ascends from ``start``; a negative ``count``
    descends from it. Iteration is lazy and every call to ``iter()`` starts a
    fresh traversal.

    Attributes:
        start: First value (inclusive)
        count: Signed count of values
    """

    start: int
    count: int

    @property
    def end(self) -> int:
        """End value (exclusive)."""
        return self.start + self.count

    @property
    def ascending(self) -> bool:
        """True if iteration ascends from the start value."""
        return self.count >= 0

    @property
    def minimum(self) -> int:
        """Minimum value (inclusive)."""
        return self.start if self.ascending else self.end + 1

    @property
    def maximum(self) -> int:
        """Maximum value (inclusive)."""
        return self.end - 1 if self.ascending else self.start

    def __iter__(self) -> Iterator[int]:
        step = 1 if self.ascending else -1
        value = self.start
        end = self.end
        while value != end:
            yield value
            value += step

    def __len__(self) -> int:
        return abs(self.count)

    def __contains__(self, value: Any) -> bool:
        if not isinstance(value, int):
            return False
        return self.minimum <= value <= self.maximum
