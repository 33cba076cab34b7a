from __future__ import annotations

from enum import Enum


class StorageMode(Enum):
    """Select the per-logical-thread storage cell backing a manager's slot.

    Managers also accept the string values at configuration time.
    """

    THREAD = "thread"
    """Keep the slot in ``threading.local``; each OS thread is one logical thread."""

    CONTEXT = "context"
    """Keep the slot in a ``ContextVar``; threads and asyncio tasks are isolated."""
