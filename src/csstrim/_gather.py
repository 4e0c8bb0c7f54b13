"""Concurrent fan-out that fails as a whole without abandoning work in flight."""
from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def gather_all(aws: list[Awaitable[T]]) -> list[T]:
    """Await *aws* concurrently and return their results in order.

    If any of them fails, the others are still awaited to completion (their
    results and any further errors are discarded) and the first failure is
    re-raised.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
