"""Pure functions over records: identity equality, ordering, id policies.

These mirror the operators defined on Record so callers can pass them around
as plain functions (e.g. as sort keys or reducers).
"""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from recordkit.core.record.models import Record
from recordkit.core.types import Ordering

# Id policies


def reset_id(source: Record) -> int:
    """Duplicates start a new identity.

    Args:
        source: Record being duplicated (ignored).

    Returns:
        Always 0.
    """
    return 0


def preserve_id(source: Record) -> int:
    """Duplicates keep the source identity.

    Args:
        source: Record being duplicated.

    Returns:
        The source id unchanged.
    """
    return source.id


# Equality


def equals(a: Record, b: Record) -> bool:
    """True iff both records carry the same id; other fields are ignored."""
    return a.id == b.id


def not_equals(a: Record, b: Record) -> bool:
    """Negation of equals."""
    return a.id != b.id


# Ordering


def compare(a: Record, b: Record) -> Ordering:
    """Total order by id ascending.

    Consistent with equals: the result is EQUAL exactly when the ids match.

    Args:
        a: Left record.
        b: Right record.

    Returns:
        LESS, EQUAL or GREATER.
    """
    return Ordering.of(a.id, b.id)


def max_record(a: Record, b: Record) -> Record:
    """Return the record with the larger id; b on ties."""
    return a if compare(a, b) is Ordering.GREATER else b


def min_record(a: Record, b: Record) -> Record:
    """Return the record with the smaller id; a on ties."""
    return b if compare(a, b) is Ordering.GREATER else a


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Sort by id ascending, keeping input order among equal ids."""
    return sorted(records, key=attrgetter("id"))
