import asyncio
import threading
from typing import Any, Awaitable, Callable

# Shared loop running in a daemon thread; sync callers of async provider
# methods submit coroutines to it.
_loop: asyncio.AbstractEventLoop | None = None
_lock = threading.Lock()


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    with _lock:
        if _loop is None or _loop.is_closed():
            _loop = asyncio.new_event_loop()
            threading.Thread(
                target=_loop.run_forever,
                name="reelcraft-async",
                daemon=True,
            ).start()
        return _loop


def run_async(func: Callable[..., Any], *args, **kwargs) -> Awaitable[Any]:
    """Run a blocking function in a worker thread."""
    return asyncio.to_thread(func, *args, **kwargs)


def run_sync(afunc: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
    """Run a coroutine function to completion from sync code."""
    future = asyncio.run_coroutine_threadsafe(
        afunc(*args, **kwargs), _get_loop()
    )
    return future.result()
