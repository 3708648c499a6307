from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[T] = []

    @property
    def has_next(self) -> bool:
        return bool(self.next)
