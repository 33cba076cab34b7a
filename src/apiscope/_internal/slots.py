from __future__ import annotations

import threading
from contextvars import ContextVar
from typing import Any, Generic, Protocol, TypeVar

from apiscope.exceptions import APIScopeInvalidStorageModeError
from apiscope.storage_mode import StorageMode

A = TypeVar("A")

MISSING: Any = object()
"""Marker for an absent slot entry, distinct from any stored value."""


class SlotProtocol(Protocol[A]):
    """Protocol for a per-logical-thread cell holding at most one value."""

    def get(self) -> A:
        """Return the calling thread's value, or ``MISSING`` when absent."""

    def set(self, value: A) -> None:
        """Store ``value`` for the calling thread."""

    def clear(self) -> None:
        """Remove the calling thread's entry."""


class ThreadLocalSlot(Generic[A]):
    """Slot backed by ``threading.local``."""

    __slots__ = ("_local",)

    def __init__(self) -> None:
        self._local = threading.local()

    def get(self) -> A:
        return getattr(self._local, "value", MISSING)

    def set(self, value: A) -> None:
        self._local.value = value

    def clear(self) -> None:
        self._local.__dict__.pop("value", None)


class ContextVarSlot(Generic[A]):
    """Slot backed by a ``ContextVar``.

    Absence is stored as ``MISSING`` rather than rolled back with a token, so a
    value captured in one context can be written back from any other.
    """

    __slots__ = ("_var",)

    def __init__(self, name: str) -> None:
        self._var: ContextVar[A] = ContextVar(name, default=MISSING)

    def get(self) -> A:
        return self._var.get()

    def set(self, value: A) -> None:
        self._var.set(value)

    def clear(self) -> None:
        if self._var.get() is not MISSING:
            self._var.set(MISSING)


def normalize_storage_mode(storage_mode: StorageMode | str) -> StorageMode:
    if isinstance(storage_mode, StorageMode):
        return storage_mode
    try:
        return StorageMode(storage_mode)
    except ValueError:
        valid = ", ".join(repr(mode.value) for mode in StorageMode)
        msg = f"Unknown storage mode {storage_mode!r}; expected a StorageMode or one of {valid}."
        raise APIScopeInvalidStorageModeError(msg) from None


def build_slot(storage_mode: StorageMode, *, name: str) -> SlotProtocol[Any]:
    if storage_mode is StorageMode.CONTEXT:
        return ContextVarSlot(f"apiscope_slot_{name}")
    return ThreadLocalSlot()
