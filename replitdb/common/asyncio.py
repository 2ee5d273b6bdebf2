"""
Provide mechanisms to cross between asyncio code and blocking code.

- `run_blocking` hands a blocking call to the running loop's default executor
  so the loop thread keeps serving other tasks while it waits.
- `sync_await` calls into asyncio code from synchronous code.

## Thread Safety

`sync_await` spawns a new thread to run a shared asyncio loop. Coroutines
submitted from several threads are interleaved on that one loop.
"""
import asyncio
from functools import partial
import threading
from typing import Any, Callable


__all__ = ["run_blocking", "sync_await"]
_loop = None
_loop_lock = threading.Lock()


async def run_blocking(func: Callable, *args, **kwargs) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))


def sync_await(coroutine) -> Any:
    return asyncio.run_coroutine_threadsafe(coroutine, _event_loop()).result()


def _event_loop() -> asyncio.AbstractEventLoop:
    global _loop
    with _loop_lock:
        if _loop is None:
            _loop = asyncio.new_event_loop()
            thread = threading.Thread(target=_loop.run_forever, name="replitdb-loop", daemon=True)
            thread.start()
    return _loop
