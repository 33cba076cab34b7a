from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from apiscope._internal.slots import (
    MISSING,
    SlotProtocol,
    build_slot,
    normalize_storage_mode,
)
from apiscope.api import SupportsRelease
from apiscope.exceptions import APIScopeAsyncStorageModeError
from apiscope.storage_mode import StorageMode

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=SupportsRelease)
T = TypeVar("T")


class APIManager(ABC, Generic[A]):
    """Associate one instance of an API type with each logical thread.

    The calling thread's instance is created lazily by ``create`` on first
    ``current`` and kept until ``reset``. ``call_scoped``/``run_scoped`` (and
    the ``scoped`` context manager they use) install a caller-chosen instance
    for the duration of a unit of work and always put the previous state back,
    including when the work raises.

    Subclasses implement ``create``. ``FactoryAPIManager`` does so with an
    injected factory.

    Args:
        storage_mode: Storage cell for the slot. ``StorageMode.THREAD`` keys
            the slot by OS thread; ``StorageMode.CONTEXT`` keys it by
            ``contextvars`` context, isolating asyncio tasks as well.
        name: Label used in log records and for the context variable. Defaults
            to the class qualname.

    Raises:
        APIScopeInvalidStorageModeError: If ``storage_mode`` is not a known mode.

    """

    __slots__ = ("_name", "_slot", "_storage_mode")

    def __init__(
        self,
        *,
        storage_mode: StorageMode | str = StorageMode.THREAD,
        name: str | None = None,
    ) -> None:
        self._storage_mode = normalize_storage_mode(storage_mode)
        self._name = name if name is not None else type(self).__qualname__
        self._slot: SlotProtocol[A] = build_slot(self._storage_mode, name=self._name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, storage_mode={self._storage_mode})"

    @property
    def name(self) -> str:
        """Return the label used in log records."""
        return self._name

    @property
    def storage_mode(self) -> StorageMode:
        """Return the storage mode backing the slot."""
        return self._storage_mode

    @abstractmethod
    def create(self) -> A:
        """Return a new instance of the API type.

        Does not touch the calling thread's slot.
        """

    def current(self) -> A:
        """Return the calling thread's instance, creating it on first use.

        Repeated calls on one thread return the same object until ``reset``.
        If ``create`` raises, the slot stays empty and the error propagates.
        """
        api = self._slot.get()
        if api is MISSING:
            api = self.create()
            self._slot.set(api)
            logger.debug("Created %r for manager %s", api, self._name)
        return api

    def get(self) -> A:
        """Return the calling thread's instance; alias of ``current``."""
        return self.current()

    def peek(self) -> A | None:
        """Return the calling thread's instance without creating one.

        Returns ``None`` when the slot is empty, so a slot holding ``None``
        cannot be told apart from an empty one.
        """
        api = self._slot.get()
        if api is MISSING:
            return None
        return api

    def reset(self) -> None:
        """Release the calling thread's instance and empty its slot.

        An instance is created first when the slot is empty, so ``release`` is
        always called exactly once. The slot is cleared even when ``release``
        raises; the error then propagates.
        """
        api = self.current()
        try:
            api.release()
        finally:
            self._slot.clear()
            logger.debug("Reset manager %s, released %r", self._name, api)

    @contextmanager
    def scoped(self, api: A) -> Iterator[A]:
        """Install ``api`` as the calling thread's instance for a ``with`` block.

        The previous slot state, including an empty slot, is restored on exit
        however the block ends. ``api`` is not released on exit.

        Examples:
            .. code-block:: python

                with manager.scoped(FakeClock()) as clock:
                    assert manager.current() is clock

        """
        saved = self._slot.get()
        self._slot.set(api)
        logger.debug("Installed %r for manager %s", api, self._name)
        try:
            yield api
        finally:
            self._restore(saved)

    def call_scoped(self, api: A, work: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
        """Call ``work`` with ``api`` installed and return its result.

        Exceptions raised by ``work`` propagate unchanged once the previous
        slot state has been restored.

        Args:
            api: Instance visible through ``current`` while ``work`` runs.
            work: Unit of work, normally a zero-argument callable.
            *args: Positional arguments forwarded to ``work``.
            **kwargs: Keyword arguments forwarded to ``work``.

        """
        with self.scoped(api):
            return work(*args, **kwargs)

    def run_scoped(self, api: A, work: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None:
        """Run ``work`` with ``api`` installed, discarding its result.

        Same restoration and exception behavior as ``call_scoped``.

        Args:
            api: Instance visible through ``current`` while ``work`` runs.
            work: Unit of work, normally a zero-argument callable.
            *args: Positional arguments forwarded to ``work``.
            **kwargs: Keyword arguments forwarded to ``work``.

        """
        with self.scoped(api):
            work(*args, **kwargs)

    async def acall_scoped(
        self,
        api: A,
        work: Callable[..., Awaitable[T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Await ``work(*args, **kwargs)`` with ``api`` installed.

        Requires ``StorageMode.CONTEXT``. Tasks running on one thread share a
        ``threading.local`` slot, so overlapping calls would restore each
        other's overrides out of order and leave one installed.

        Args:
            api: Instance visible through ``current`` while ``work`` runs.
            work: Callable returning an awaitable.
            *args: Positional arguments forwarded to ``work``.
            **kwargs: Keyword arguments forwarded to ``work``.

        Raises:
            APIScopeAsyncStorageModeError: If the manager uses
                ``StorageMode.THREAD``.

        """
        if self._storage_mode is not StorageMode.CONTEXT:
            msg = (
                f"acall_scoped on manager {self._name!r} requires StorageMode.CONTEXT, "
                f"got {self._storage_mode}."
            )
            raise APIScopeAsyncStorageModeError(msg)
        with self.scoped(api):
            return await work(*args, **kwargs)

    def _restore(self, saved: A) -> None:
        if saved is MISSING:
            self._slot.clear()
            logger.debug("Restored empty slot for manager %s", self._name)
        else:
            self._slot.set(saved)
            logger.debug("Restored %r for manager %s", saved, self._name)


class FactoryAPIManager(APIManager[A]):
    """Manager whose ``create`` calls a zero-argument factory.

    Args:
        factory: Callable returning a new API instance, typically the API class.
        storage_mode: Storage cell for the slot, see ``APIManager``.
        name: Log label. Defaults to the factory's qualname.

    Examples:
        .. code-block:: python

            clocks = FactoryAPIManager(SystemClock)
            clock = clocks.current()

    """

    __slots__ = ("_factory",)

    def __init__(
        self,
        factory: Callable[[], A],
        *,
        storage_mode: StorageMode | str = StorageMode.THREAD,
        name: str | None = None,
    ) -> None:
        self._factory = factory
        if name is None:
            name = getattr(factory, "__qualname__", type(self).__qualname__)
        super().__init__(storage_mode=storage_mode, name=name)

    def create(self) -> A:
        """Return ``factory()``."""
        return self._factory()
