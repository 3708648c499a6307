import asyncio
import threading

from dishka import AsyncContainer

from luckydraw.core.settings import Settings
from luckydraw.ui.windows.main_window import MainWindow


class WindowFactory:
    def __init__(self, container: AsyncContainer, settings: Settings) -> None:
        self._container = container
        self._settings = settings

    def make(self) -> MainWindow:
        ui_app = MainWindow(container=self._container, settings=self._settings)

        # Load organization data on a separate loop before the widgets exist
        def _run_async_init() -> None:
            loop = asyncio.new_event_loop()
            try:
                asyncio.set_event_loop(loop)
                loop.run_until_complete(ui_app.initialize_service())

            finally:
                loop.close()

        init_thread = threading.Thread(target=_run_async_init, daemon=False)
        init_thread.start()
        init_thread.join()

        # Tk widgets must be created on the main thread
        ui_app.initialize_ui()

        return ui_app
