"""Record functionality: the owning record value type and its operations."""

from recordkit.core.record.models import IdPolicy, Record
from recordkit.core.record.operations import (
    compare,
    equals,
    max_record,
    min_record,
    not_equals,
    preserve_id,
    reset_id,
    sort_records,
)

__all__ = [
    # Models
    "Record",
    "IdPolicy",
    # Operations
    "equals",
    "not_equals",
    "compare",
    "max_record",
    "min_record",
    "sort_records",
    "reset_id",
    "preserve_id",
]
