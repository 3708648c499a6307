import sys
import tkinter as tk
from tkinter import messagebox

from dishka import AsyncContainer
from loguru import logger

from luckydraw.core.settings import Settings
from luckydraw.main.ui.factory import WindowFactory


def run_ui(container: AsyncContainer, settings: Settings) -> None:
    try:
        ui_app = WindowFactory(container=container, settings=settings).make()
        ui_app.run()

    except Exception as error:
        error_msg = f"Failed to start GUI application: {error}"
        logger.exception(error_msg)

        root = tk.Tk()
        root.withdraw()
        messagebox.showerror("Error", error_msg)

        sys.exit(1)
