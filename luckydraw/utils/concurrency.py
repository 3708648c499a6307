import asyncio
import threading
from typing import Any, Callable, Coroutine, TypeVar

from loguru import logger

T = TypeVar("T")


def run_in_thread(
    coro_func: Callable[..., Coroutine[Any, Any, T]],
    *args: Any,
    daemon: bool = True,
    **kwargs: Any,
) -> threading.Thread:
    """
    Run an async coroutine function inside a separate thread on its own event loop.

    Args:
        coro_func: An async function (coroutine function) to run in the thread.
        *args: Positional arguments for the coroutine.
        daemon: Whether the thread should run as daemon (default: True).
        **kwargs: Keyword arguments for the coroutine.

    Returns:
        threading.Thread: The started thread. Use .join() to wait for it.
    """

    def _runner() -> None:
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            loop.run_until_complete(coro_func(*args, **kwargs))

        except Exception as error:
            logger.exception(f"Error in thread running {coro_func.__name__}: {error}")

        finally:
            asyncio.set_event_loop(None)
            loop.close()

    thread = threading.Thread(target=_runner, daemon=daemon)
    thread.start()

    return thread
