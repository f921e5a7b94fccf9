"""
Path Utilities
==============

OS-aware path handling utilities with security considerations.
"""

from __future__ import annotations

import os
import platform
import stat
from pathlib import Path

from passlock.core.errors import DirectoryResolutionError, StorageIOError


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise DirectoryResolutionError(f"cannot determine home directory: {e}") from e


def get_app_data_dir(app_name: str = "PassLock") -> Path:
    """
    Get the OS-appropriate application data directory.

    Args:
        app_name: Name of the application

    Returns:
        Path to application data directory

    Raises:
        DirectoryResolutionError: If no home directory can be determined
    """
    system = platform.system().lower()

    if system == "windows":
        base = os.environ.get("LOCALAPPDATA") or _home() / "AppData" / "Local"
    elif system == "darwin":
        base = _home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_DATA_HOME") or _home() / ".local" / "share"

    return Path(base) / app_name


def get_app_log_dir(app_name: str = "PassLock") -> Path:
    """Get the OS-appropriate log directory."""
    system = platform.system().lower()

    if system == "windows":
        base = os.environ.get("LOCALAPPDATA") or _home() / "AppData" / "Local"
        return Path(base) / app_name / "Logs"
    elif system == "darwin":
        return _home() / "Library" / "Logs" / app_name
    else:
        base = os.environ.get("XDG_STATE_HOME") or _home() / ".local" / "state"
        return Path(base) / app_name / "logs"


def ensure_private_dir(directory: Path) -> None:
    """
    Create a directory (and parents) if missing.

    Newly created directories are restricted to the owner on Unix-like
    systems. Existing directories keep their permissions.

    Raises:
        StorageIOError: If the directory cannot be created
    """
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
        if platform.system().lower() != "windows":
            directory.chmod(stat.S_IRWXU)
    except OSError as e:
        raise StorageIOError(f"cannot create data directory {directory}: {e}") from e
