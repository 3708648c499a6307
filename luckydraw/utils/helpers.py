import tkinter as tk
from typing import Optional, Tuple

# window_width, window_height, child_frame_width, child_frame_height, x, y
WP_TYPE = Tuple[int, int, int, int, int, int]


def get_window_position(child_frame: tk.Misc, parent_frame: Optional[tk.Misc] = None) -> WP_TYPE:
    """Calculate coordinates that center ``child_frame``.

    Centers relative to the top-level window of ``parent_frame`` when given,
    otherwise relative to the screen.

    Returns:
        (reference width, reference height, child width, child height, x, y)
    """
    if parent_frame is not None:
        root_window = parent_frame.winfo_toplevel()
        window_width = root_window.winfo_width()
        window_height = root_window.winfo_height()
        parent_x = root_window.winfo_rootx()
        parent_y = root_window.winfo_rooty()

    else:
        window_width = child_frame.winfo_screenwidth()
        window_height = child_frame.winfo_screenheight()
        parent_x = 0
        parent_y = 0

    child_frame_width = child_frame.winfo_width()
    child_frame_height = child_frame.winfo_height()

    x = parent_x + (window_width // 2) - (child_frame_width // 2)
    y = parent_y + (window_height // 2) - (child_frame_height // 2)

    return window_width, window_height, child_frame_width, child_frame_height, x, y


def format_prize_count(count: int) -> str:
    return "No prizes yet" if count <= 0 else f"{count} prize{'s' if count != 1 else ''} on the wheel"
