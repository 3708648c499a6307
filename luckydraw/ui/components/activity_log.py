import tkinter as tk
from datetime import datetime
from tkinter import ttk

from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.ui.utils.ui_factory import UIFactory

MAX_LINES = 500


class ActivityLog:
    def __init__(self, parent: tk.Misc) -> None:
        self._frame = UIFactory.create_label_frame(parent=parent, text="Activity", padding=5)
        self._setup_ui()

    @property
    def frame(self) -> ttk.LabelFrame:
        return self._frame

    def add_message(self, tag: MessageTag, message: str) -> None:
        if not message.strip():
            return

        timestamp = datetime.now().strftime("%H:%M:%S")

        self._text.configure(state="normal")
        self._text.insert(tk.END, f"[{timestamp}] {tag.title}: {message.strip()}\n", tag.name)

        # drop the oldest lines
        line_count = int(self._text.index("end-1c").split(".")[0])
        if line_count > MAX_LINES:
            self._text.delete("1.0", f"{line_count - MAX_LINES}.0")

        self._text.configure(state="disabled")
        self._text.see(tk.END)

    def clear(self) -> None:
        self._text.configure(state="normal")
        self._text.delete("1.0", tk.END)
        self._text.configure(state="disabled")

    def _setup_ui(self) -> None:
        self._text = tk.Text(
            master=self._frame,
            height=8,
            wrap=tk.WORD,
            font=("Arial", 10),
            bg="#2b2b2b",
            fg="#e0e0e0",
            relief="flat",
            borderwidth=0,
            state="disabled",
        )
        scrollbar = ttk.Scrollbar(master=self._frame, orient="vertical", command=self._text.yview)
        self._text.configure(yscrollcommand=scrollbar.set)

        self._text.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        for tag in MessageTag:
            self._text.tag_configure(tag.name, foreground=tag.value)
