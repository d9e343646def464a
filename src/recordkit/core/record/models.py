"""Record models: the owning record value type and its id policy.

Usage:
    person = Record.build(7, "Sid", 10, 120)
    twin = person.duplicate()               # id reset to 0 by default
    same = person.duplicate(IdPolicy.PRESERVE)
    assert same == person                   # equality is by id only
    assert copy.copy(person).id == 7        # stdlib copy keeps the id
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from recordkit.core.types import Copy
from recordkit.utils.logging import get_logger

log = get_logger(__name__)


class IdPolicy(Enum):
    """What a duplicate does with the source record's identifier."""

    RESET = "reset"  # Duplicate gets id 0, it is a new entity
    PRESERVE = "preserve"  # Duplicate keeps the source id

    def get_strategy(self) -> Callable[[Record], int]:
        """Get the id function for this policy.

        Returns:
            Pure function mapping the source record to the duplicate's id.
        """
        # Late import to avoid circular dependency
        from recordkit.core.record import operations

        strategies = {
            IdPolicy.RESET: operations.reset_id,
            IdPolicy.PRESERVE: operations.preserve_id,
        }
        return strategies[self]


@dataclass(order=True, slots=True)
class Record:
    """Person-like record whose identity is its `id`.

    Only `id` takes part in equality, ordering and hashing; `name`, `age` and
    `height` are payload. Field ranges (u64 id, u16 age and height) are not
    checked.
    """

    id: int = 0
    name: str = field(default="", compare=False)
    age: int = field(default=0, compare=False)
    height: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def default(cls) -> Record:
        """Zero value: id 0, empty name, age and height 0."""
        return cls()

    @classmethod
    def build(cls, id: int, name: str, age: int, height: int) -> Record:
        """Create a record from all four fields, taken as given."""
        return cls(id=id, name=name, age=age, height=height)

    def duplicate(self, policy: IdPolicy | None = None) -> Copy[Record]:
        """Copy the payload into a new record.

        Args:
            policy: Identifier policy. None uses the configured
                `duplicate_id_policy` (RESET unless overridden).

        Returns:
            New record with the same name, age and height, and an id decided
            by the policy.
        """
        if policy is None:
            # Late import to avoid circular dependency
            from recordkit.config import get_settings

            policy = get_settings().duplicate_id_policy

        new_id = policy.get_strategy()(self)
        log.debug("duplicating record %s with %s policy", self.id, policy.value)
        return Record(id=new_id, name=self.name, age=self.age, height=self.height)

    def duplicate_from(self, source: Record) -> None:
        """Overwrite name, age and height from source in place; id is kept."""
        log.debug("refreshing record %s from record %s", self.id, source.id)
        self.name = source.name
        self.age = source.age
        self.height = source.height

    def __copy__(self) -> Record:
        return self.duplicate(IdPolicy.PRESERVE)

    def __deepcopy__(self, memo: dict[int, Any]) -> Record:
        # str and int are immutable, the shallow duplicate is already independent
        duplicate = self.duplicate(IdPolicy.PRESERVE)
        memo[id(self)] = duplicate
        return duplicate
