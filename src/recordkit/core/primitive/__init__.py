"""Primitive record: the trivially copyable variant."""

from recordkit.core.primitive.models import PrimitiveRecord

__all__ = ["PrimitiveRecord"]
