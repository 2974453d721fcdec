from __future__ import annotations

import os
from importlib import metadata
from pathlib import Path


DIST_NAME = "boq-progress-lite"
_DEFAULT_APP_VERSION = "1.0.0"
_VERSION_FILE = Path(__file__).with_name("app_version.txt")


def _read_version_from_file(path: Path) -> str | None:
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return raw or None


def _read_installed_version() -> str | None:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    """
    Version shown by ``--version`` and written into report logs.

    RECON_APP_VERSION wins (release builds stamp it), then an app_version.txt
    shipped next to this module, then the installed distribution metadata.
    """
    env_override = (os.getenv("RECON_APP_VERSION") or "").strip()
    if env_override:
        return env_override

    return (
        _read_version_from_file(_VERSION_FILE)
        or _read_installed_version()
        or _DEFAULT_APP_VERSION
    )


__all__ = ["DIST_NAME", "get_app_version"]
