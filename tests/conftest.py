from typing import Callable, List

import pytest

from luckydraw.schemas.prize import Prize, PrizeCatalog


class ManualTimer:
    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by ``advance(ms)`` instead of wall-clock time."""

    def __init__(self) -> None:
        self.now = 0
        self.timers: List[ManualTimer] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(due=self.now + delay_ms, callback=callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, ms: int) -> None:
        target = self.now + ms

        while True:
            due = sorted((t for t in self.pending if t.due <= target), key=lambda t: t.due)
            if not due:
                break

            timer = due[0]
            self.now = timer.due
            timer.fired = True
            timer.callback()

        self.now = target


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def phone_catalog() -> PrizeCatalog:
    return PrizeCatalog([Prize.sentinel(), Prize(id=5, name="Phone")])


@pytest.fixture
def gift_list() -> List[dict]:
    return [
        {"id": 5, "name": "Phone", "image": "/media/phone.png", "lucky_draw_system": 3},
        {"id": 8, "name": "Earbuds", "image": "/media/earbuds.png", "lucky_draw_system": 3},
        {"id": 13, "name": "Smart Watch", "image": "/media/watch.png", "lucky_draw_system": 3},
    ]


@pytest.fixture
def catalog(gift_list: List[dict]) -> PrizeCatalog:
    return PrizeCatalog.from_gift_list(gift_list, group_id=3)
