"""Window configuration and the choice of the page the UI window shows."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath

_URL_SAFE = frozenset((string.ascii_letters + string.digits + "/-_.~:").encode("ascii"))


@dataclass
class WindowConfiguration:
    """Shell-level parameters of the main window."""

    title: str = ""
    width: int = 1280
    height: int = 820
    entry_file_path: Path = field(default_factory=Path)


@dataclass(frozen=True)
class EntryPage:
    """What the window should show: a URL to navigate to, or inline HTML."""

    url: str = ""
    html: str = ""

    @property
    def is_fallback(self) -> bool:
        return not self.url


def _generic_string(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    if os.name == "nt":
        return PureWindowsPath(text).as_posix()
    return text


def to_file_url(file_path: str | os.PathLike[str]) -> str:
    """Return a percent-encoded ``file://`` URL for the absolute form of ``file_path``."""
    normalized = _generic_string(Path(file_path).absolute())
    prefix = "file://"
    # Windows paths like C:/... need an extra slash: file:///C:/...
    if normalized and not normalized.startswith("/"):
        prefix += "/"
    encoded = "".join(
        chr(byte) if byte in _URL_SAFE else f"%{byte:02X}" for byte in normalized.encode("utf-8")
    )
    return prefix + encoded


def build_missing_asset_html(missing_file: str | os.PathLike[str]) -> str:
    """Return the fallback page shown when the UI entry file is missing."""
    missing_file_path = _generic_string(missing_file)
    return (
        '<!DOCTYPE html><html lang="ru"><head><meta charset="utf-8">'
        "<title>UI asset not found</title>"
        "<style>"
        "body{font-family:Segoe UI,sans-serif;background:#f6f1ea;color:#1d1d1d;"
        "display:grid;place-items:center;min-height:100vh;margin:0;padding:24px;}"
        ".card{max-width:640px;padding:32px;border-radius:24px;background:#ffffff;"
        "box-shadow:0 24px 80px rgba(56,32,10,.12);}"
        "h1{margin-top:0;color:#d45500;}"
        "code{display:block;margin-top:16px;padding:12px;border-radius:12px;"
        "background:#f4ede6;overflow-wrap:anywhere;}"
        '</style></head><body><section class="card">'
        "<h1>UI-слой не найден</h1>"
        "<p>Приложение запустило native-shell, но не смогло найти runtime assets.</p>"
        "<code>" + missing_file_path + "</code></section></body></html>"
    )


def resolve_entry_page(configuration: WindowConfiguration) -> EntryPage:
    """Navigate to the entry file if it exists, otherwise show the fallback page."""
    entry = Path(configuration.entry_file_path)
    if entry.exists():
        return EntryPage(url=to_file_url(entry))
    return EntryPage(html=build_missing_asset_html(entry))