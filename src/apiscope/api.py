from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class API(ABC):
    """Base class for services managed as per-thread singletons.

    Implementations may keep per-thread state. ``release`` is called by
    ``APIManager.reset`` before the instance is dropped from the calling
    thread's slot, and must give that state back.

    Examples:
        .. code-block:: python

            class Clock(API):
                def __init__(self) -> None:
                    self._cache: dict[str, float] = {}

                def now(self) -> float:
                    return time.time()

                def release(self) -> None:
                    self._cache.clear()

    """

    __slots__ = ()

    @abstractmethod
    def release(self) -> None:
        """Release resources held by this instance.

        Called at most once per instance by ``APIManager.reset``. Should not
        raise during normal disposal.
        """


@runtime_checkable
class SupportsRelease(Protocol):
    """Structural form of ``API`` for services that cannot subclass it."""

    def release(self) -> None:
        """Release resources held by this instance."""
