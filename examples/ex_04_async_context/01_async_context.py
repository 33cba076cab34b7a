"""Context storage: each asyncio task gets its own slot.

This module covers:

1. ``storage_mode="context"`` isolating concurrent tasks.
2. ``acall_scoped`` awaiting work with an instance installed.
"""

from __future__ import annotations

import asyncio

from apiscope import API, FactoryAPIManager


class RequestInfo(API):
    def __init__(self, request_id: str = "none") -> None:
        self.request_id = request_id

    def release(self) -> None:
        pass


requests = FactoryAPIManager(RequestInfo, storage_mode="context")


async def handle() -> str:
    await asyncio.sleep(0)
    return requests.current().request_id


async def main() -> None:
    results = await asyncio.gather(
        requests.acall_scoped(RequestInfo("a"), handle),
        requests.acall_scoped(RequestInfo("b"), handle),
    )
    print(f"results={results}")  # => results=['a', 'b']
    print(f"outside={requests.current().request_id}")  # => outside=none


if __name__ == "__main__":
    asyncio.run(main())
