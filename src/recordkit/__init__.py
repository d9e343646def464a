"""recordkit: value-semantics contracts for small fixed-schema records.

Usage:
    from recordkit import IdPolicy, PrimitiveRecord, Record

    sid = Record.build(10, "Sid", 10, 120)
    assert sid > Record.default()          # ordered by id
    assert Record.build(0, "Sid", 10, 120) == Record.default()

    twin = sid.duplicate()                 # id reset to 0
    kept = sid.duplicate(IdPolicy.PRESERVE)

    p = PrimitiveRecord.default()
    assert copy.copy(p) == p               # flat, trivial copy
"""

__version__ = "0.1.0"

# Core primitives
from recordkit.core import (
    Copy,
    Duplicable,
    IdPolicy,
    Ordering,
    PrimitiveRecord,
    Record,
    compare,
    duplicate_value,
    equals,
    is_trivially_copyable,
    max_record,
    min_record,
    not_equals,
    sort_records,
    trivially_copyable,
)

# Configuration
from recordkit.config import RecordSettings, get_settings

# Logging
from recordkit.utils import configure_from_settings, configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Ordering",
    "Record",
    "IdPolicy",
    "PrimitiveRecord",
    "equals",
    "not_equals",
    "compare",
    "max_record",
    "min_record",
    "sort_records",
    "Duplicable",
    "trivially_copyable",
    "is_trivially_copyable",
    "duplicate_value",
    # Config
    "RecordSettings",
    "get_settings",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
