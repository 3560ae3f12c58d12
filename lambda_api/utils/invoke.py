"""Call sync or async user-supplied callables uniformly."""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """
    Call a function and await the result if it is awaitable.

    Route handlers, catch-all handlers and error handlers can be ``def``
    or ``async def``.
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
