import contextlib
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError


class UIHelpers:
    @staticmethod
    def bind_enter_key(widgets: Iterable[tk.Widget], callback: Callable[[], None]) -> None:
        for widget in widgets:
            widget.bind("<Return>", lambda _: callback())

    @staticmethod
    def field_errors(error: ValidationError) -> Dict[str, str]:
        """Map each invalid field to its first message. Model-level errors are keyed by ``""``."""
        errors: Dict[str, str] = {}

        for item in error.errors():
            field = str(item["loc"][0]) if item["loc"] else ""
            errors.setdefault(field, str(item["msg"]).removeprefix("Value error, "))

        return errors

    @staticmethod
    def set_state(widgets: List[tk.Widget], enabled: bool) -> None:
        for widget in widgets:
            with contextlib.suppress(tk.TclError):
                enabled_state = "readonly" if isinstance(widget, ttk.Combobox) else "normal"
                widget.configure(state=enabled_state if enabled else "disabled")  # type: ignore[call-arg]

    @staticmethod
    def show_error(message: str, title: str = "Error", parent: Optional[tk.Misc] = None) -> None:
        messagebox.showerror(title, message, parent=parent)
