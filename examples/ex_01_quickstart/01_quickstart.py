"""Quickstart: one lazily created instance per thread.

This module covers:

1. ``current()`` creating an instance on first use and caching it.
2. ``reset()`` releasing the cached instance.
3. A different thread getting its own instance.
"""

from __future__ import annotations

import threading

from apiscope import API, FactoryAPIManager


class Counter(API):
    def __init__(self) -> None:
        self.value = 0
        self.released = False

    def increment(self) -> int:
        self.value += 1
        return self.value

    def release(self) -> None:
        self.released = True


counters = FactoryAPIManager(Counter)


def main() -> None:
    first = counters.current()
    first.increment()
    second = counters.current()
    print(f"same_instance={first is second}")  # => same_instance=True
    print(f"value={second.increment()}")  # => value=2

    seen_in_thread: list[Counter] = []
    thread = threading.Thread(target=lambda: seen_in_thread.append(counters.current()))
    thread.start()
    thread.join()
    print(
        f"thread_has_own_instance={seen_in_thread[0] is not first}",
    )  # => thread_has_own_instance=True

    counters.reset()
    print(f"released_on_reset={first.released}")  # => released_on_reset=True
    print(f"fresh_after_reset={counters.current() is not first}")  # => fresh_after_reset=True


if __name__ == "__main__":
    main()
