import contextlib
import tkinter as tk
from typing import Callable


class TkTimerHandle:
    def __init__(self, widget: tk.Misc, after_id: str) -> None:
        self._widget = widget
        self._after_id = after_id

    def cancel(self) -> None:
        # window may already be destroyed
        with contextlib.suppress(tk.TclError):
            self._widget.after_cancel(id=self._after_id)


class TkScheduler:
    """Reveal timers on the Tk event queue."""

    def __init__(self, widget: tk.Misc) -> None:
        self._widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TkTimerHandle:
        after_id = self._widget.after(ms=delay_ms, func=callback)
        return TkTimerHandle(widget=self._widget, after_id=after_id)
