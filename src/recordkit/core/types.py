"""Core type definitions for recordkit."""

from enum import Enum

type Copy[T] = T
"""Type alias indicating a value is an independent copy of its source.

When you see `Copy[T]` in a return type, mutating the returned value does NOT
affect the value it was duplicated from.
"""


class Ordering(Enum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        """Swap LESS and GREATER, keep EQUAL.

        Returns:
            Ordering of the comparison with its arguments swapped.
        """
        return Ordering(-self.value)

    @classmethod
    def of(cls, a: int, b: int) -> "Ordering":
        """Three-way compare two integers."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL
