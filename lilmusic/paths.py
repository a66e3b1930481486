"""Runtime paths of the application: UI assets and per-user settings storage."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

APP_DIRECTORY_NAME = "LilMusic"
EXECUTABLE_FALLBACK_NAME = "soundcloud_desktop"


class PathResolutionError(RuntimeError):
    """Raised when a required runtime path cannot be determined."""


@dataclass(frozen=True)
class ApplicationPaths:
    """All paths that depend on where the program runs from."""

    executable_directory: Path
    ui_entry_file: Path
    local_app_data_directory: Path
    settings_database_file: Path


class ApplicationPathsResolver:
    """Works out the application's runtime paths."""

    def __init__(
        self,
        *,
        executable_path: str | os.PathLike[str] | None = None,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self._executable_path = Path(executable_path) if executable_path is not None else None
        self._environ = environ if environ is not None else os.environ
        self._platform = platform if platform is not None else sys.platform

    @property
    def _is_windows(self) -> bool:
        return self._platform.startswith("win")

    def _resolve_executable_path(self) -> Path:
        if self._executable_path is not None:
            return self._executable_path
        if self._is_windows:
            program = sys.argv[0] if sys.argv else ""
            if not program:
                raise PathResolutionError("Could not determine the path of the executable")
            return Path(program).resolve()
        return Path.cwd() / EXECUTABLE_FALLBACK_NAME

    def _resolve_local_app_data_directory(self) -> Path:
        if self._is_windows:
            local_app_data = self._environ.get("LOCALAPPDATA", "")
            if not local_app_data:
                raise PathResolutionError("Could not determine the LOCALAPPDATA directory")
            return Path(local_app_data) / APP_DIRECTORY_NAME
        return Path(tempfile.gettempdir()) / APP_DIRECTORY_NAME

    def resolve(self) -> ApplicationPaths:
        """Return the executable directory, UI entry file and settings locations."""
        executable_directory = self._resolve_executable_path().parent
        local_app_data_directory = self._resolve_local_app_data_directory()
        # The UI entry point sits next to the executable in a "ui" folder.
        return ApplicationPaths(
            executable_directory=executable_directory,
            ui_entry_file=executable_directory / "ui" / "index.html",
            local_app_data_directory=local_app_data_directory,
            settings_database_file=local_app_data_directory / "settings.db",
        )