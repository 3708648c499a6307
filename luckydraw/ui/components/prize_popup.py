import tkinter as tk
from tkinter import ttk

from luckydraw.schemas.outcome import CanonicalOutcome
from luckydraw.ui.utils.ui_factory import UIFactory
from luckydraw.utils.helpers import get_window_position

WIN_COLOR = "#22c55e"
LOSS_COLOR = "#a855f7"


class PrizePopup:
    def __init__(self, parent: tk.Misc, outcome: CanonicalOutcome) -> None:
        self._window = tk.Toplevel(master=parent)
        self._window.title(string=outcome.headline)
        self._window.resizable(width=False, height=False)
        self._window.transient(master=parent.winfo_toplevel())

        frame = ttk.Frame(master=self._window, padding=20)
        frame.pack(fill="both", expand=True)

        icon = "🎉" if outcome.is_celebrated else "🍀"
        ttk.Label(master=frame, text=icon, font=("Arial", 40)).pack()
        ttk.Label(
            master=frame,
            text=outcome.headline,
            font=("Arial", 18, "bold"),
            foreground=WIN_COLOR if outcome.is_celebrated else LOSS_COLOR,
        ).pack(pady=(5, 10))
        ttk.Label(master=frame, text=outcome.message, font=("Arial", 12), wraplength=320).pack()

        UIFactory.create_button(parent=frame, text="Close", style="Accent.TButton", command=self.close).pack(
            fill="x", pady=(15, 0)
        )

        self._window.bind("<Escape>", lambda _: self.close())
        self._center(parent=parent)
        self._window.grab_set()

    @property
    def window(self) -> tk.Toplevel:
        return self._window

    def close(self) -> None:
        self._window.grab_release()
        self._window.destroy()

    def _center(self, parent: tk.Misc) -> None:
        self._window.update_idletasks()
        _, _, width, height, x, y = get_window_position(child_frame=self._window, parent_frame=parent)
        self._window.geometry(f"{width}x{height}+{x}+{y}")
