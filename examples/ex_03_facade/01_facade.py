"""Static facade: call sites use a class instead of a manager.

This module covers:

1. Binding a manager to an ``APIFacade`` subclass.
2. Overriding the facade's instance in tests with ``call_scoped``.
3. ``APIScopeManagerNotSetError`` for a facade without a manager.
"""

from __future__ import annotations

from apiscope import API, APIFacade, APIScopeManagerNotSetError, FactoryAPIManager


class ClockAPI(API):
    def now(self) -> float:
        raise NotImplementedError

    def release(self) -> None:
        pass


class FixedClock(ClockAPI):
    def __init__(self, value: float = 1000.0) -> None:
        self.value = value

    def now(self) -> float:
        return self.value


class Clock(APIFacade[ClockAPI]):
    manager = FactoryAPIManager(FixedClock)


class UnboundClock(APIFacade[ClockAPI]):
    pass


def elapsed_since(start: float) -> float:
    return Clock.current().now() - start


def main() -> None:
    print(f"elapsed={elapsed_since(400.0)}")  # => elapsed=600.0
    print(f"frozen={Clock.call_scoped(FixedClock(500.0), elapsed_since, 400.0)}")  # => frozen=100.0

    try:
        UnboundClock.current()
    except APIScopeManagerNotSetError as error:
        print(type(error).__name__)  # => APIScopeManagerNotSetError

    Clock.reset()


if __name__ == "__main__":
    main()
