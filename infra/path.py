# infra/path.py
from __future__ import annotations
import os
import re
import sys
from pathlib import Path

APP_NAME = "BOQProgressLite"
COMPANY_NAME = "TECHASH"

_UNSAFE_FILE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def platform_data_dir() -> Path:
    """
    Per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\TECHASH\\BOQProgressLite

    macOS:
        ~/Library/Application Support/TECHASH/BOQProgressLite

    Linux:
        ~/.local/share/TECHASH/BOQProgressLite
    """
    if sys.platform.startswith("win"):
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base / COMPANY_NAME / APP_NAME


def user_data_dir(override: str | Path | None = None) -> Path:
    """
    Create and return the data directory. ``override`` (RECON_DATA_DIR) wins
    over the platform location; the home directory is the last resort.
    """
    path = Path(override).expanduser() if override else platform_data_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_report_path(data_dir: Path, project_code: str, suffix: str = ".xlsx") -> Path:
    """<data dir>/reports/<project code>-progress<suffix>, e.g. reports/P5066-I2-progress.xlsx."""
    stem = _UNSAFE_FILE_CHARS.sub("_", project_code.strip().upper()) or "project"
    return data_dir / "reports" / f"{stem}-progress{suffix}"
