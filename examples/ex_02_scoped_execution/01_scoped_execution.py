"""Scoped execution: temporarily replace the current instance.

This module covers:

1. ``call_scoped`` returning the unit of work's result.
2. ``run_scoped`` for work without a result.
3. Restoration of the previous instance when the work raises.
4. The ``scoped`` context manager.
"""

from __future__ import annotations

from apiscope import API, FactoryAPIManager


class Greeter(API):
    def __init__(self, greeting: str = "hello") -> None:
        self.greeting = greeting

    def greet(self, name: str) -> str:
        return f"{self.greeting} {name}"

    def release(self) -> None:
        pass


greeters = FactoryAPIManager(Greeter)


def greet_world() -> str:
    return greeters.current().greet("world")


def main() -> None:
    print(greet_world())  # => hello world

    result = greeters.call_scoped(Greeter("bonjour"), greet_world)
    print(result)  # => bonjour world
    print(greet_world())  # => hello world

    greeters.run_scoped(Greeter("hola"), lambda: print(greet_world()))  # => hola world

    def failing_work() -> None:
        raise ValueError(greet_world())

    try:
        greeters.run_scoped(Greeter("ciao"), failing_work)
    except ValueError as error:
        print(f"error={error}")  # => error=ciao world
    print(f"restored={greet_world()}")  # => restored=hello world

    with greeters.scoped(Greeter("hallo")):
        print(greet_world())  # => hallo world


if __name__ == "__main__":
    main()
