"""Helpers for calling user code that may or may not be a coroutine."""
from __future__ import annotations

import inspect
from typing import Any


async def maybe_await(value: Any) -> Any:
    """Await ``value`` when it is awaitable, otherwise return it unchanged."""

    if inspect.isawaitable(value):
        return await value
    return value
