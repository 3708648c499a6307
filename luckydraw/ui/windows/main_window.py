import contextlib
import queue
import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Optional

import darkdetect
import sv_ttk
from dishka import AsyncContainer
from loguru import logger

from luckydraw.core.managers.file import file_mgr
from luckydraw.core.settings import Settings
from luckydraw.infrastructure.clients.backend import BackendClient
from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.submission import CustomerEntry
from luckydraw.services.entry_service import EntryService, EntrySubmission
from luckydraw.services.reveal.session import RevealSession
from luckydraw.ui.components.activity_log import ActivityLog
from luckydraw.ui.components.confetti import Confetti
from luckydraw.ui.components.entry_form import EntryForm
from luckydraw.ui.components.prize_popup import PrizePopup
from luckydraw.ui.components.spin_wheel import SpinWheel
from luckydraw.ui.utils.tk_scheduler import TkScheduler
from luckydraw.ui.utils.ui_factory import UIFactory
from luckydraw.ui.utils.ui_helpers import UIHelpers
from luckydraw.utils.concurrency import run_in_thread
from luckydraw.utils.helpers import get_window_position

UI_POLL_INTERVAL_MS = 50


class MainWindow:
    def __init__(self, container: AsyncContainer, settings: Settings) -> None:
        self._container = container
        self._settings = settings

        # Initialize window
        self._root = tk.Tk()
        self._root.title(string=self._settings.program_name)
        self._root.resizable(width=True, height=True)
        self._root.minsize(width=900, height=640)

        # Worker threads hand results to the Tk thread through this queue
        self._ui_queue: "queue.Queue[Callable[[], Any]]" = queue.Queue()

        # Services
        self._service: Optional[EntryService] = None
        self._session: Optional[RevealSession] = None
        self._announced: Optional[RevealSession] = None

        # Widgets
        self._entry_form: Optional[EntryForm] = None
        self._spin_wheel: Optional[SpinWheel] = None
        self._confetti: Optional[Confetti] = None
        self._activity_log: Optional[ActivityLog] = None

    async def initialize_service(self) -> None:
        client = await self._container.get(BackendClient)
        self._service = await EntryService(client=client, settings=self._settings, on_add_message=self._on_add_message)

    def initialize_ui(self) -> None:
        self._setup_window_icon()
        self._setup_header()
        self._setup_body()
        self._adjust_window_size()

    def run(self) -> None:
        logger.info(f"Running {self._settings.program_name}")

        self._root.protocol(name="WM_DELETE_WINDOW", func=self._on_close)
        sv_ttk.set_theme(theme=darkdetect.theme() or "dark")

        self._root.after(UI_POLL_INTERVAL_MS, self._drain_ui_queue)
        self._root.mainloop()

    # ==================== Setup ====================
    def _setup_window_icon(self) -> None:
        with contextlib.suppress(Exception):
            png_path = file_mgr.get_resource_path(relative_path="assets/icon.png")
            icon = tk.PhotoImage(file=png_path)
            self._root.iconphoto(True, icon)

    def _setup_header(self) -> None:
        title = self._service.title if self._service is not None else self._settings.program_name

        header = ttk.Frame(master=self._root, padding=(10, 10, 10, 0))
        header.pack(fill="x")
        ttk.Label(master=header, text=title, font=("Arial", 18, "bold")).pack(side="left")

    def _setup_body(self) -> None:
        body = ttk.Frame(master=self._root, padding=10)
        body.pack(fill="both", expand=True)

        self._entry_form = EntryForm(parent=body, on_submit=self._on_submit)
        self._entry_form.frame.pack(side="left", fill="y", padx=(0, 10))

        right = ttk.Frame(master=body)
        right.pack(side="left", fill="both", expand=True)

        wheel_frame = UIFactory.create_label_frame(parent=right, text="Lucky Wheel")
        wheel_frame.pack(fill="x")

        self._spin_wheel = SpinWheel(parent=wheel_frame)
        self._spin_wheel.frame.pack()
        self._confetti = Confetti(canvas=self._spin_wheel.canvas)

        self._spin_btn = UIFactory.create_button(
            parent=wheel_frame,
            text=RevealPhase.IDLE.label,
            style="Accent.TButton",
            state="disabled",
            command=self._on_spin,
        )
        self._spin_btn.pack(fill="x", pady=(10, 0))

        self._activity_log = ActivityLog(parent=right)
        self._activity_log.frame.pack(fill="both", expand=True, pady=(10, 0))

    def _adjust_window_size(self) -> None:
        self._root.update_idletasks()
        _, _, width, height, x, y = get_window_position(child_frame=self._root)
        self._root.geometry(f"{width}x{height}+{x}+{y}")

    # ==================== Thread bridge ====================
    def _call_in_ui(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self._ui_queue.put(lambda: func(*args, **kwargs))

    def _drain_ui_queue(self) -> None:
        while True:
            try:
                callback = self._ui_queue.get_nowait()

            except queue.Empty:
                break

            try:
                callback()

            except Exception as error:
                logger.exception(f"Error in UI callback: {error}")

        self._root.after(UI_POLL_INTERVAL_MS, self._drain_ui_queue)

    def _on_add_message(self, tag: MessageTag, message: str) -> None:
        self._call_in_ui(self._show_message, tag=tag, message=message)

    def _show_message(self, tag: MessageTag, message: str) -> None:
        if self._activity_log is not None:
            self._activity_log.add_message(tag=tag, message=message)

    # ==================== Entry flow ====================
    def _on_submit(self, entry: CustomerEntry) -> None:
        if self._service is None:
            UIHelpers.show_error(message="The lucky draw service is not available.", parent=self._root)
            return

        if self._entry_form is not None:
            self._entry_form.set_busy(True)

        run_in_thread(self._submit_entry, entry)

    async def _submit_entry(self, entry: CustomerEntry) -> None:
        submission: Optional[EntrySubmission] = None
        try:
            if self._service is not None:
                submission = await self._service.submit(entry=entry)

        finally:
            self._call_in_ui(self._on_submitted, submission)

    def _on_submitted(self, submission: Optional[EntrySubmission]) -> None:
        if self._entry_form is not None:
            self._entry_form.set_busy(False)

        if submission is None or self._service is None or self._spin_wheel is None:
            return

        self._dispose_session()
        if self._entry_form is not None:
            self._entry_form.clear()

        self._session = self._service.start_reveal(
            submission=submission,
            scheduler=TkScheduler(widget=self._root),
            listener=self._on_reveal_change,
        )
        self._spin_wheel.attach(session=self._session)
        self._spin_btn.configure(text=RevealPhase.IDLE.label, state="normal")

    def _on_spin(self) -> None:
        if self._session is not None and self._session.spin():
            self._spin_btn.configure(state="disabled")

    def _on_reveal_change(self, session: RevealSession) -> None:
        self._spin_btn.configure(text=session.phase.label, state="normal" if session.can_spin else "disabled")

        if session.phase != RevealPhase.REVEALED or session.revealed_outcome is None:
            return

        if self._announced is not session:
            self._announced = session
            if self._service is not None:
                self._service.announce(outcome=session.revealed_outcome)

            if session.celebrate and self._confetti is not None:
                self._confetti.start()

            PrizePopup(parent=self._root, outcome=session.revealed_outcome)

        elif not session.celebrate and self._confetti is not None and self._confetti.is_active:
            self._confetti.stop()

    # ==================== Teardown ====================
    def _dispose_session(self) -> None:
        if self._session is not None:
            self._session.dispose()
            self._session = None

        if self._spin_wheel is not None:
            self._spin_wheel.stop()

        if self._confetti is not None:
            self._confetti.stop()

    def _on_close(self) -> None:
        self._dispose_session()
        self._root.destroy()
