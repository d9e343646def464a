"""Core functionalities: value types and the pure operations over them.

Architecture Note:
    core/ contains pure, stateless functionality. The only mutation is the
    explicit in-place Record.duplicate_from. Configuration lives in config/,
    logging helpers in utils/.
"""

from recordkit.core.copy import (
    Duplicable,
    TrivialCopyMeta,
    TrivialCopyRegistry,
    duplicate_value,
    get_registry,
    is_trivially_copyable,
    trivially_copyable,
)
from recordkit.core.primitive import PrimitiveRecord
from recordkit.core.record import (
    IdPolicy,
    Record,
    compare,
    equals,
    max_record,
    min_record,
    not_equals,
    preserve_id,
    reset_id,
    sort_records,
)
from recordkit.core.types import Copy, Ordering

__all__ = [
    # Types
    "Copy",
    "Ordering",
    # Record
    "Record",
    "IdPolicy",
    "equals",
    "not_equals",
    "compare",
    "max_record",
    "min_record",
    "sort_records",
    "reset_id",
    "preserve_id",
    # Primitive record
    "PrimitiveRecord",
    # Copy
    "Duplicable",
    "TrivialCopyMeta",
    "TrivialCopyRegistry",
    "trivially_copyable",
    "is_trivially_copyable",
    "get_registry",
    "duplicate_value",
]
