from __future__ import annotations

from collections.abc import Awaitable, Callable
from contextlib import AbstractContextManager
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from apiscope.api import SupportsRelease
from apiscope.exceptions import APIScopeManagerNotSetError
from apiscope.manager import APIManager

A = TypeVar("A", bound=SupportsRelease)
T = TypeVar("T")


class APIFacade(Generic[A]):
    """Expose a manager's operations as classmethods of a named class.

    Subclasses bind a manager in the class body; call sites then use the class
    itself and never hold the manager.

    Examples:
        .. code-block:: python

            class Clock(APIFacade[ClockAPI]):
                manager = FactoryAPIManager(SystemClock)


            now = Clock.current().now()
            Clock.run_scoped(FrozenClock(0.0), run_report)

    """

    manager: ClassVar[APIManager[Any] | None] = None

    def __new__(cls, *_args: Any, **_kwargs: Any) -> NoReturn:
        msg = f"{cls.__name__} is a static facade and cannot be instantiated."
        raise TypeError(msg)

    @classmethod
    def _require_manager(cls) -> APIManager[A]:
        manager = cls.manager
        if manager is None:
            msg = (
                f"{cls.__name__} has no manager. Assign one in the class body, for example "
                f"'manager = FactoryAPIManager(...)'."
            )
            raise APIScopeManagerNotSetError(msg)
        return manager

    @classmethod
    def create(cls) -> A:
        """Return a new instance from the bound manager's ``create``."""
        return cls._require_manager().create()

    @classmethod
    def current(cls) -> A:
        """Return the calling thread's instance, creating it on first use."""
        return cls._require_manager().current()

    @classmethod
    def get(cls) -> A:
        """Return the calling thread's instance; alias of ``current``."""
        return cls._require_manager().current()

    @classmethod
    def peek(cls) -> A | None:
        """Return the calling thread's instance without creating one."""
        return cls._require_manager().peek()

    @classmethod
    def reset(cls) -> None:
        """Release the calling thread's instance and empty its slot."""
        cls._require_manager().reset()

    @classmethod
    def scoped(cls, api: A) -> AbstractContextManager[A]:
        """Return a context manager installing ``api`` for a ``with`` block."""
        return cls._require_manager().scoped(api)

    @classmethod
    def call_scoped(cls, api: A, work: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
        """Call ``work`` with ``api`` installed and return its result."""
        return cls._require_manager().call_scoped(api, work, *args, **kwargs)

    @classmethod
    def run_scoped(cls, api: A, work: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None:
        """Run ``work`` with ``api`` installed, discarding its result."""
        cls._require_manager().run_scoped(api, work, *args, **kwargs)

    @classmethod
    async def acall_scoped(
        cls,
        api: A,
        work: Callable[..., Awaitable[T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Await ``work`` with ``api`` installed and return its result."""
        return await cls._require_manager().acall_scoped(api, work, *args, **kwargs)
