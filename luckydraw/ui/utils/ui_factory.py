import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

FORM_FONT = ("Arial", 11)
ERROR_COLOR = "#ef4444"


class UIFactory:
    @staticmethod
    def create_label_frame(parent: tk.Misc, text: str, padding: int = 10, **kwargs: Any) -> ttk.LabelFrame:
        return ttk.LabelFrame(master=parent, text=text, padding=padding, **kwargs)

    @staticmethod
    def create_button(
        parent: tk.Misc,
        text: str,
        command: Optional[Callable[[], None]] = None,
        style: Optional[str] = None,
        width: Optional[int] = None,
        state: str = "normal",
        **kwargs: Any,
    ) -> ttk.Button:
        """Create a button; ``style`` is a ttk style name such as "Accent.TButton"."""
        button_kwargs: Dict[str, Any] = {"master": parent, "text": text, "state": state}

        if command:
            button_kwargs["command"] = command

        if style:
            button_kwargs["style"] = style

        if width:
            button_kwargs["width"] = width

        button_kwargs.update(kwargs)
        return ttk.Button(**button_kwargs)

    @staticmethod
    def create_entry(
        parent: tk.Misc,
        textvariable: Optional[tk.StringVar] = None,
        width: int = 30,
        font: Tuple[str, int] = FORM_FONT,
        **kwargs: Any,
    ) -> ttk.Entry:
        entry_kwargs: Dict[str, Any] = {"master": parent, "width": width, "font": font}

        if textvariable:
            entry_kwargs["textvariable"] = textvariable

        entry_kwargs.update(kwargs)
        return ttk.Entry(**entry_kwargs)

    @staticmethod
    def create_combobox(
        parent: tk.Misc,
        textvariable: Optional[tk.StringVar] = None,
        values: Optional[Sequence[str]] = None,
        width: int = 28,
        font: Tuple[str, int] = FORM_FONT,
        state: str = "readonly",
        **kwargs: Any,
    ) -> ttk.Combobox:
        combo_kwargs: Dict[str, Any] = {"master": parent, "width": width, "font": font, "state": state}

        if textvariable:
            combo_kwargs["textvariable"] = textvariable

        if values:
            combo_kwargs["values"] = list(values)

        combo_kwargs.update(kwargs)
        return ttk.Combobox(**combo_kwargs)

    @staticmethod
    def create_form_field(
        parent: tk.Misc,
        label_text: str,
        variable: tk.StringVar,
        choices: Optional[Sequence[str]] = None,
    ) -> Tuple[ttk.Frame, tk.Widget, ttk.Label]:
        """Label, input and an initially empty error line stacked vertically.

        A combobox is created when ``choices`` is given, an entry otherwise.

        Returns:
            Tuple of (container frame, input widget, error label)
        """
        frame = ttk.Frame(master=parent)

        label = ttk.Label(master=frame, text=label_text, font=FORM_FONT)
        label.pack(anchor="w")

        widget: tk.Widget
        if choices:
            widget = UIFactory.create_combobox(parent=frame, textvariable=variable, values=choices)
        else:
            widget = UIFactory.create_entry(parent=frame, textvariable=variable)

        widget.pack(fill="x", pady=(2, 0))

        error_label = ttk.Label(master=frame, text="", foreground=ERROR_COLOR, font=("Arial", 9))
        error_label.pack(anchor="w")

        return frame, widget, error_label

    @staticmethod
    def create_button_group(
        parent: tk.Misc,
        buttons: List[Dict[str, Any]],
        spacing: int = 5,
    ) -> Tuple[ttk.Frame, List[ttk.Button]]:
        """Lay out buttons horizontally; each dict holds ``create_button`` arguments."""
        frame = ttk.Frame(master=parent)
        button_widgets = []

        for i, btn_config in enumerate(buttons):
            btn = UIFactory.create_button(parent=frame, **btn_config)

            padx = (0, spacing) if i < len(buttons) - 1 else 0
            btn.pack(side="left", fill="x", expand=True, padx=padx)

            button_widgets.append(btn)

        return frame, button_widgets
