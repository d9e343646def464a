"""Trivial-copy registry, decorator, and generic duplication.

A trivially copyable type holds no owned, mutable data: every field is an
immutable scalar, so a copy is a flat field-by-field copy that shares the
same field objects.

Usage:
    @trivially_copyable
    @dataclass(frozen=True, slots=True)
    class Point:
        x: int
        y: int

    p2 = copy.copy(p1)          # flat copy, never deep
    p3 = duplicate_value(p1)    # same, via the registry
"""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any, TypeVar

from recordkit.core.copy.models import Duplicable, TrivialCopyMeta
from recordkit.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)

# Field annotations allowed on a trivially copyable type
_IMMUTABLE_SCALARS: frozenset[type] = frozenset({str, int, float, bool, bytes, type(None)})


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_immutable_annotation(annotation: Any) -> bool:
    """Check that an annotation names only immutable scalar types.

    Args:
        annotation: Resolved type hint of a dataclass field.

    Returns:
        True for scalars and unions of scalars, False otherwise.
    """
    if annotation in _IMMUTABLE_SCALARS:
        return True
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return all(_is_immutable_annotation(arg) for arg in typing.get_args(annotation))
    return False


def _flat_copy(self: T) -> T:
    return dataclasses.replace(self)  # type: ignore[type-var]


def _flat_deepcopy(self: T, memo: dict[int, Any]) -> T:
    # Nothing is owned, so a deep copy is the same flat copy.
    return dataclasses.replace(self)  # type: ignore[type-var]


class TrivialCopyRegistry:
    """Process-local registry of trivially copyable value types."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_type: dict[type, TrivialCopyMeta] = {}
        self._by_name: dict[str, type] = {}

    def register(self, cls: type) -> TrivialCopyMeta:
        """Validate and register a type as trivially copyable.

        Args:
            cls: Frozen dataclass to register.

        Returns:
            Metadata for the registered type.

        Raises:
            TypeError: If cls is not a frozen dataclass or a field may own
                mutable data.

        Note:
            A class redefined under an already registered qualified name
            (reload, factory called twice) replaces the stale entry.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        if not dataclasses.is_dataclass(cls):
            raise TypeError(
                f"{cls.__name__} must be a dataclass to be trivially copyable. "
                f"Did you forget @dataclass(frozen=True) decorator?"
            )
        if not cls.__dataclass_params__.frozen:  # type: ignore[attr-defined]
            raise TypeError(f"{cls.__name__} must be a frozen dataclass to be trivially copyable")

        hints = typing.get_type_hints(cls)
        field_names = tuple(f.name for f in dataclasses.fields(cls))
        for name in field_names:
            if not _is_immutable_annotation(hints.get(name)):
                raise TypeError(
                    f"{cls.__name__}.{name} is annotated {hints.get(name)!r}, "
                    f"which may own mutable data; trivially copyable fields "
                    f"must be immutable scalars"
                )

        type_name = _qualified_name(cls)
        stale = self._by_name.get(type_name)
        if stale is not None:
            del self._by_type[stale]
            log.debug("replacing stale trivially copyable type %s", type_name)

        meta = TrivialCopyMeta(type_name=type_name, field_names=field_names)
        self._by_type[cls] = meta
        self._by_name[type_name] = cls
        log.debug("registered trivially copyable type %s", type_name)
        return meta

    def get_meta(self, cls: type) -> TrivialCopyMeta | None:
        """Get metadata for a registered type.

        Args:
            cls: Class to look up.

        Returns:
            Metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as trivially copyable."""
        return cls in self._by_type


# Module-level registry instance
_registry = TrivialCopyRegistry()


def get_registry() -> TrivialCopyRegistry:
    """Access the global trivial-copy registry.

    Returns:
        The process-local TrivialCopyRegistry instance.
    """
    return _registry


def trivially_copyable[C: type](cls: C) -> C:
    """Mark a frozen dataclass as trivially copyable.

    Installs `__copy__` and `__deepcopy__` performing a flat field copy, and
    attaches `__copy_meta__`.

    Raises:
        TypeError: If the class does not qualify (see TrivialCopyRegistry.register).

    Note:
        Apply @trivially_copyable AFTER @dataclass:

        >>> @trivially_copyable
        ... @dataclass(frozen=True, slots=True)
        ... class Tag:
        ...     label: str
    """
    meta = _registry.register(cls)
    cls.__copy_meta__ = meta  # type: ignore
    cls.__copy__ = _flat_copy  # type: ignore
    cls.__deepcopy__ = _flat_deepcopy  # type: ignore
    return cls


def is_trivially_copyable(value: object) -> bool:
    """Check whether a type, or the type of a value, is trivially copyable.

    Args:
        value: A class or an instance.

    Returns:
        True if registered in the global registry.
    """
    cls = value if isinstance(value, type) else type(value)
    return _registry.is_registered(cls)


def duplicate_value[V](value: V) -> V:
    """Produce an independent copy of a value.

    Tries in order:
    1. Flat copy if the type is registered as trivially copyable
    2. The value's own duplicate() if it implements Duplicable

    Args:
        value: Value to duplicate.

    Returns:
        The duplicate.

    Raises:
        TypeError: If the value is neither trivially copyable nor Duplicable.
    """
    if is_trivially_copyable(value):
        return _flat_copy(value)
    if isinstance(value, Duplicable):
        return value.duplicate()  # type: ignore[return-value]
    raise TypeError(f"{type(value).__name__} is neither trivially copyable nor Duplicable")
