import contextlib
import time
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.prize import PrizeCatalog
from luckydraw.services.reveal.geometry import ease_out_cubic, label_position, sector_colors, sector_layout
from luckydraw.services.reveal.session import RevealSession
from luckydraw.utils.helpers import format_prize_count

FRAME_INTERVAL_MS = 16
DIMMED_COLOR = "#4b5563"
POINTER_COLOR = "#ef4444"


class SpinWheel:
    """Canvas rendering of the prize wheel driven by a ``RevealSession``.

    The session decides the final angle; the wheel only tweens towards it.
    """

    def __init__(self, parent: tk.Misc, size: int = 380) -> None:
        self._size = size
        self._frame = ttk.Frame(master=parent)

        self._catalog: Optional[PrizeCatalog] = None
        self._session: Optional[RevealSession] = None
        self._colors: List[str] = []
        self._sector_items: List[int] = []
        self._label_items: List[int] = []

        # Animation
        self._angle = 0.0
        self._start_angle = 0.0
        self._target_angle = 0.0
        self._started_at = 0.0
        self._duration_s = 0.0
        self._frame_id: Optional[str] = None

        self._setup_ui()

    @property
    def frame(self) -> ttk.Frame:
        return self._frame

    @property
    def canvas(self) -> tk.Canvas:
        return self._canvas

    @property
    def angle(self) -> float:
        return self._angle

    # ==================== Public Methods ====================
    def load(self, catalog: PrizeCatalog) -> None:
        self.stop()
        self._catalog = catalog
        self._colors = sector_colors(len(catalog))
        self._angle = 0.0
        self._draw()
        self._status_label.configure(text=format_prize_count(len(catalog) - 1))

    def attach(self, session: RevealSession) -> None:
        if self._session is not None:
            self._session.remove_listener(self._on_reveal_change)

        self._session = session
        self.load(catalog=session.catalog)
        session.add_listener(self._on_reveal_change)

    def stop(self) -> None:
        if self._frame_id is not None:
            with contextlib.suppress(tk.TclError):
                self._canvas.after_cancel(id=self._frame_id)

            self._frame_id = None

    # ==================== Private Methods ====================
    def _setup_ui(self) -> None:
        self._canvas = tk.Canvas(
            master=self._frame,
            width=self._size,
            height=self._size + 20,
            highlightthickness=0,
            bg="#111827",
        )
        self._canvas.pack()

        self._status_label = ttk.Label(master=self._frame, text="Submit the form to load the wheel")
        self._status_label.pack(pady=(5, 0))

        self._spinning_bar = ttk.Progressbar(master=self._frame, mode="indeterminate", length=self._size // 2)

    def _draw(self) -> None:
        self._canvas.delete("all")
        self._sector_items.clear()
        self._label_items.clear()

        if self._catalog is None:
            return

        center = self._size / 2
        padding = 12
        radius = center - padding
        top = 20

        for arc in sector_layout(len(self._catalog)):
            item = self._canvas.create_arc(
                padding,
                top + padding,
                self._size - padding,
                top + self._size - padding,
                start=self._tk_start(arc_start=arc.start, extent=arc.extent),
                extent=arc.extent,
                fill=self._colors[arc.index],
                outline="#ffffff",
                width=2,
            )
            self._sector_items.append(item)

        for index, prize in enumerate(self._catalog):
            dx, dy = label_position(index, len(self._catalog), radius * 0.65, rotation=self._angle)
            item = self._canvas.create_text(
                center + dx,
                top + center + dy,
                text=prize.name,
                width=radius * 0.6,
                fill="#111827",
                font=("Arial", 10, "bold"),
            )
            self._label_items.append(item)

        self._canvas.create_oval(center - 18, top + center - 18, center + 18, top + center + 18, fill="#f9fafb")

        # pointer at 12 o'clock
        self._canvas.create_polygon(
            center - 12,
            2,
            center + 12,
            2,
            center,
            top + padding + 18,
            fill=POINTER_COLOR,
            outline="#ffffff",
        )

    def _tk_start(self, arc_start: float, extent: float) -> float:
        # Tk arcs run counterclockwise from 3 o'clock
        return 90 - (arc_start + extent + self._angle)

    def _render(self) -> None:
        if self._catalog is None:
            return

        center = self._size / 2
        top = 20
        radius = center - 12

        for arc, item in zip(sector_layout(len(self._catalog)), self._sector_items):
            self._canvas.itemconfigure(item, start=self._tk_start(arc_start=arc.start, extent=arc.extent))

        for index, item in enumerate(self._label_items):
            dx, dy = label_position(index, len(self._catalog), radius * 0.65, rotation=self._angle)
            self._canvas.coords(item, center + dx, top + center + dy)

    def _animate(self) -> None:
        elapsed = time.monotonic() - self._started_at
        progress = 1.0 if self._duration_s <= 0 else elapsed / self._duration_s

        self._angle = self._start_angle + (self._target_angle - self._start_angle) * ease_out_cubic(progress)
        self._render()

        if progress < 1.0:
            self._frame_id = self._canvas.after(ms=FRAME_INTERVAL_MS, func=self._animate)
        else:
            self._frame_id = None

    def _start_spin(self, session: RevealSession) -> None:
        self.stop()
        self._start_angle = self._angle
        self._target_angle = session.rotation_angle
        self._duration_s = session.timings.spin_ms / 1000
        self._started_at = time.monotonic()

        self._status_label.configure(text=RevealPhase.SPINNING.label)
        self._spinning_bar.pack(pady=(5, 0))
        self._spinning_bar.start(10)
        self._animate()

    def _show_landed(self, session: RevealSession) -> None:
        self.stop()
        self._angle = session.rotation_angle
        self._render()

        self._spinning_bar.stop()
        self._spinning_bar.pack_forget()

        if self._catalog is None or session.stopped_at_entry is None:
            return

        for index, item in enumerate(self._sector_items):
            if self._catalog[index].id != session.stopped_at_entry.id:
                self._canvas.itemconfigure(item, fill=DIMMED_COLOR)

        self._status_label.configure(text=f"{RevealPhase.LANDED.label} {session.stopped_at_entry.name}")

    def _on_reveal_change(self, session: RevealSession) -> None:
        if session.phase == RevealPhase.SPINNING:
            if self._frame_id is None:
                self._start_spin(session=session)

        elif session.phase == RevealPhase.LANDED:
            self._show_landed(session=session)

        elif session.phase == RevealPhase.REVEALED and session.revealed_outcome is not None:
            self._status_label.configure(text=session.revealed_outcome.headline)
