"""Per-user data file location."""

import os
import sys
from pathlib import Path

DB_FILENAME = "lunch.db"


def default_data_dir() -> Path:
    """Return the platform application data directory for the current user."""
    try:
        home = Path.home()
    except RuntimeError:
        return Path(".")

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "Lunch"
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / "lunch"

    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else home / ".local" / "share"
    return base / "lunch"


def default_database_path(data_dir: Path | None = None) -> Path:
    """Return the path of the database file inside the data directory."""
    return (data_dir or default_data_dir()) / DB_FILENAME


def database_url_for(path: Path) -> str:
    """Build a SQLite URL for a database file."""
    return f"sqlite:///{path}"
