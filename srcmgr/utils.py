from collections.abc import Awaitable, Callable
from functools import wraps
from pathlib import Path
from typing import Any, Optional, TypeVar

T = TypeVar("T")


RunArg = str | Path


def is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def async_cached(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    cache: dict[Any, T] = {}

    @wraps(fn)
    async def cached_fn(*args: Any) -> T:
        if args not in cache:
            cache[args] = await fn(*args)
        return cache[args]

    return cached_fn
