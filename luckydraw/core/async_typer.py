import asyncio
import inspect
from functools import wraps
from typing import Any, Callable, Coroutine, cast

from loguru import logger
from typer import Exit, Typer
from typer.models import CommandFunctionType


class AsyncTyper(Typer):
    """Typer that accepts ``async def`` commands and runs each one on a fresh event loop."""

    @staticmethod
    def maybe_run_async(
        decorator: Callable[[CommandFunctionType], CommandFunctionType],
        f: CommandFunctionType,
    ) -> CommandFunctionType:
        if not inspect.iscoroutinefunction(f):
            decorator(f)
            return f

        @wraps(f)
        def runner(*args: Any, **kwargs: Any) -> Any:
            coro_func = cast(Callable[..., Coroutine[Any, Any, Any]], f)
            try:
                return asyncio.run(coro_func(*args, **kwargs))

            except KeyboardInterrupt:
                logger.warning(f"Command '{f.__name__}' interrupted")
                raise Exit(130)

        decorator(cast(CommandFunctionType, runner))
        return f

    def callback(self, *args: Any, **kwargs: Any) -> Callable[[CommandFunctionType], CommandFunctionType]:
        decorator = super().callback(*args, **kwargs)
        return lambda f: self.maybe_run_async(decorator, f)

    def command(self, *args: Any, **kwargs: Any) -> Callable[[CommandFunctionType], CommandFunctionType]:
        decorator = super().command(*args, **kwargs)
        return lambda f: self.maybe_run_async(decorator, f)
