"""Copy models: duplication protocol and trivial-copy metadata.

Duplication protocols are optional interfaces that value types implement to
describe how an independent copy of them is produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Duplicable(Protocol):
    """Explicit duplication: one instance → an independent copy."""

    def duplicate(self) -> Self: ...

    def duplicate_from(self, source: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class TrivialCopyMeta:
    """Metadata for types registered as trivially copyable."""

    type_name: str
    field_names: tuple[str, ...]
