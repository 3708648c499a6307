import contextlib
import random
import tkinter as tk
from dataclasses import dataclass
from typing import List, Optional

CONFETTI_COLORS = ("#f87171", "#fbbf24", "#34d399", "#60a5fa", "#a78bfa", "#f472b6")
CONFETTI_TAG = "confetti"


@dataclass
class Particle:
    item: int
    x: float
    y: float
    speed: float
    drift: float
    size: int


class Confetti:
    """Falling particles drawn on top of an existing canvas."""

    def __init__(self, canvas: tk.Canvas, count: int = 80, interval_ms: int = 30) -> None:
        self._canvas = canvas
        self._count = count
        self._interval_ms = interval_ms

        self._particles: List[Particle] = []
        self._after_id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self._after_id is not None

    def start(self) -> None:
        self.stop()

        width, height = self._bounds()
        for _ in range(self._count):
            self._particles.append(self._create_particle(width=width, height=height))

        self._after_id = self._canvas.after(ms=self._interval_ms, func=self._update)

    def stop(self) -> None:
        if self._after_id is not None:
            with contextlib.suppress(tk.TclError):
                self._canvas.after_cancel(id=self._after_id)

            self._after_id = None

        with contextlib.suppress(tk.TclError):
            self._canvas.delete(CONFETTI_TAG)

        self._particles.clear()

    def _bounds(self) -> tuple[int, int]:
        width = self._canvas.winfo_width() or int(self._canvas.cget("width"))
        height = self._canvas.winfo_height() or int(self._canvas.cget("height"))
        return max(width, 1), max(height, 1)

    def _create_particle(self, width: int, height: int) -> Particle:
        size = random.randint(5, 10)
        x = random.uniform(0, width)
        y = random.uniform(-height, 0)
        item = self._canvas.create_oval(
            x,
            y,
            x + size,
            y + size,
            fill=random.choice(CONFETTI_COLORS),
            outline="",
            tags=CONFETTI_TAG,
        )
        return Particle(item=item, x=x, y=y, speed=random.uniform(3, 9), drift=random.uniform(-2, 2), size=size)

    def _update(self) -> None:
        width, height = self._bounds()

        for particle in self._particles:
            particle.y += particle.speed
            particle.x += particle.drift

            # back to the top once off screen
            if particle.y > height:
                particle.y = random.uniform(-50, 0)
                particle.x = random.uniform(0, width)

            self._canvas.coords(
                particle.item,
                particle.x,
                particle.y,
                particle.x + particle.size,
                particle.y + particle.size,
            )

        self._canvas.tag_raise(CONFETTI_TAG)
        self._after_id = self._canvas.after(ms=self._interval_ms, func=self._update)
