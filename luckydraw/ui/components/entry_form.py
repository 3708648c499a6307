import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from luckydraw.schemas.submission import CustomerEntry
from luckydraw.ui.utils.ui_factory import ERROR_COLOR, UIFactory
from luckydraw.ui.utils.ui_helpers import UIHelpers
from luckydraw.utils.constants import CAMPAIGN_SOURCES, OTHER_CHOICE, PROFESSIONS

# field name, label, choices
FIELDS: Tuple[Tuple[str, str, Optional[Sequence[str]]], ...] = (
    ("customer_name", "Customer Name", None),
    ("phone_number", "Contact Number", None),
    ("email", "Email (optional)", None),
    ("shop_name", "Shop Name", None),
    ("sold_area", "Sold Area", None),
    ("region", "Region (optional)", None),
    ("imei", "IMEI", None),
    ("how_know_about_campaign", "How did you know about this campaign?", CAMPAIGN_SOURCES),
    ("other_campaign_source", "Please specify", None),
    ("profession", "Profession", PROFESSIONS),
    ("other_profession", "Please specify your profession", None),
)

# free-text field shown only when its choice field is "Other"
OTHER_FIELDS = {
    "how_know_about_campaign": "other_campaign_source",
    "profession": "other_profession",
}


class EntryForm:
    def __init__(self, parent: tk.Misc, on_submit: Callable[[CustomerEntry], None]) -> None:
        self._on_submit = on_submit
        self._frame = UIFactory.create_label_frame(parent=parent, text="Customer Details")

        self._variables: Dict[str, tk.StringVar] = {}
        self._rows: Dict[str, ttk.Frame] = {}
        self._inputs: Dict[str, tk.Widget] = {}
        self._errors: Dict[str, ttk.Label] = {}

        self._setup_ui()

    @property
    def frame(self) -> ttk.LabelFrame:
        return self._frame

    # ==================== Public Methods ====================
    def set_busy(self, busy: bool) -> None:
        widgets: List[tk.Widget] = [*self._inputs.values(), self._clear_btn, self._submit_btn]
        UIHelpers.set_state(widgets=widgets, enabled=not busy)
        self._submit_btn.configure(text="Submitting..." if busy else "Submit")

    def clear(self) -> None:
        for variable in self._variables.values():
            variable.set("")

        self._clear_errors()
        self._sync_other_fields()

    def validate(self) -> Optional[CustomerEntry]:
        self._clear_errors()
        values = {name: variable.get() for name, variable in self._variables.items()}

        try:
            return CustomerEntry.model_validate(values)

        except ValidationError as error:
            for field, message in UIHelpers.field_errors(error).items():
                label = self._errors.get(field) or self._form_error
                label.configure(text=message)

            return None

    # ==================== Private Methods ====================
    def _setup_ui(self) -> None:
        for name, label_text, choices in FIELDS:
            variable = tk.StringVar(value="")
            row, widget, error_label = UIFactory.create_form_field(
                parent=self._frame,
                label_text=label_text,
                variable=variable,
                choices=choices,
            )
            row.pack(fill="x", pady=(0, 2))

            self._variables[name] = variable
            self._rows[name] = row
            self._inputs[name] = widget
            self._errors[name] = error_label

            if choices:
                widget.bind("<<ComboboxSelected>>", lambda _: self._sync_other_fields())

        self._form_error = ttk.Label(master=self._frame, text="", foreground=ERROR_COLOR)
        self._form_error.pack(anchor="w")

        buttons_frame, (self._clear_btn, self._submit_btn) = UIFactory.create_button_group(
            parent=self._frame,
            buttons=[
                {"text": "Clear", "command": self.clear},
                {"text": "Submit", "style": "Accent.TButton", "command": self._submit},
            ],
        )
        buttons_frame.pack(fill="x", pady=(5, 0))

        UIHelpers.bind_enter_key(widgets=list(self._inputs.values()), callback=self._submit)
        self._sync_other_fields()

    def _sync_other_fields(self) -> None:
        for choice_field, other_field in OTHER_FIELDS.items():
            row = self._rows[other_field]
            if self._variables[choice_field].get() == OTHER_CHOICE:
                # keep the free-text row right below its choice
                row.pack(fill="x", pady=(0, 2), after=self._rows[choice_field])
            else:
                row.pack_forget()
                self._variables[other_field].set("")

    def _clear_errors(self) -> None:
        for label in self._errors.values():
            label.configure(text="")

        self._form_error.configure(text="")

    def _submit(self) -> None:
        if str(self._submit_btn.cget("state")) == "disabled":
            return

        entry = self.validate()
        if entry is not None:
            self._on_submit(entry)
