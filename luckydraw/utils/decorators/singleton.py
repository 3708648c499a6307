import threading
from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


def singleton(class_: Type[T]) -> Callable[..., T]:
    instances: Dict[Type[T], T] = {}
    # UI worker threads reach shared managers concurrently
    lock = threading.Lock()

    def getinstance(*args: Any, **kwargs: Any) -> T:
        if class_ in instances:
            return instances[class_]

        with lock:
            if class_ not in instances:
                instances[class_] = class_(*args, **kwargs)

        return instances[class_]

    getinstance.__wrapped__ = class_  # type: ignore[attr-defined]
    return getinstance
