"""Copy functionality: duplication protocol, trivial-copy marker and registry."""

from recordkit.core.copy.core import (
    TrivialCopyRegistry,
    duplicate_value,
    get_registry,
    is_trivially_copyable,
    trivially_copyable,
)
from recordkit.core.copy.models import Duplicable, TrivialCopyMeta

__all__ = [
    # Models
    "Duplicable",
    "TrivialCopyMeta",
    # Core
    "trivially_copyable",
    "is_trivially_copyable",
    "get_registry",
    "TrivialCopyRegistry",
    "duplicate_value",
]
