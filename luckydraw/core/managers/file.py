import os
import platform
import sys
import tempfile
from pathlib import Path

from loguru import logger

from luckydraw.core.settings import settings
from luckydraw.utils.decorators.singleton import singleton


@singleton
class FileManager:
    @property
    def is_windows(self) -> bool:
        return platform.system().casefold() == "windows"

    def get_resource_path(self, relative_path: str) -> str:
        base_path: Path | str
        if hasattr(sys, "_MEIPASS"):
            base_path = Path(sys._MEIPASS)
        else:
            base_path = Path(__file__).resolve().parents[2]

        return os.path.join(base_path, relative_path)

    def get_configs_directory(self) -> str:
        if self.is_windows:
            app_data = os.environ.get("APPDATA", os.path.expanduser("~"))
            configs_dir = os.path.join(app_data, settings.program_name.replace(" ", ""))
        else:  # MacOS and Linux
            configs_dir = os.path.expanduser(f"~/.{settings.program_name.casefold().replace(' ', '-')}")

        try:
            os.makedirs(configs_dir, exist_ok=True)

        except Exception as error:
            logger.exception(f"Failed to create configs directory: {error}")
            configs_dir = tempfile.gettempdir()

        return configs_dir

    def read_upload(self, file_path: str | Path) -> tuple[str, bytes]:
        path = Path(file_path).expanduser()
        if not path.is_file():
            msg = f"File not found: {path}"
            raise FileNotFoundError(msg)

        return path.name, path.read_bytes()


file_mgr = FileManager()
