"""Primitive record: a non-owning, trivially copyable person value.

`name` is a reference to text owned elsewhere. Python strings are immutable,
so every copy may point at the same string object without either copy owning
or altering it.
"""

from dataclasses import dataclass

from recordkit.core.copy import trivially_copyable
from recordkit.core.types import Copy


@trivially_copyable
@dataclass(frozen=True, slots=True)
class PrimitiveRecord:
    """Structurally compared record with no identity field.

    Equality compares name, age and height by value. `age` is signed
    (i32 range), `height` unsigned (u16 range); neither is range-checked.
    """

    name: str = "Something"
    age: int = 0
    height: int = 0

    @classmethod
    def default(cls) -> "PrimitiveRecord":
        return cls()

    def duplicate(self) -> Copy["PrimitiveRecord"]:
        """Flat copy sharing the same field objects."""
        return self.__copy__()  # type: ignore[attr-defined]
