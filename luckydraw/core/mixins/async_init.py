from typing import Any, Generator, Self


class AsyncMixin:
    """Two-step construction: ``obj = await Cls(...)`` runs ``__ainit__`` with the same arguments.

    Awaiting an instance a second time returns it untouched, so a service that
    was already initialised can be handed around and awaited defensively.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # Do not override. Use __ainit__ instead
        self.__storedargs = args, kwargs
        self.async_initialized = False

    async def __ainit__(self, *args: Any, **kwargs: Any) -> None:
        """Async constructor, subclasses implement this"""

    async def __initobj(self) -> Self:
        if self.async_initialized:
            return self

        self.async_initialized = True
        args, kwargs = self.__storedargs
        await self.__ainit__(*args, **kwargs)
        return self

    def __await__(self) -> Generator[Any, Any, Self]:
        return self.__initobj().__await__()
