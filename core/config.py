"""Configuration and constants for PDFer."""
import json
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Any

from .fs import atomic_write_text

logger = logging.getLogger(__name__)

# Basic path helpers needed for config loading
def get_app_data_dir() -> Path:
    """Get the application data directory for the current platform."""
    home = Path.home()
    if sys.platform == "win32":
        return Path(os.getenv("APPDATA") or home / "AppData" / "Roaming") / "pdfer"
    elif sys.platform == "darwin":
        return home / "Library" / "Application Support" / "pdfer"
    return Path(os.getenv("XDG_CONFIG_HOME") or home / ".config") / "pdfer"

APP_DATA_DIR = get_app_data_dir()
APP_DATA_DIR.mkdir(parents=True, exist_ok=True)

# _TOOL_DIR is relative to this file (core/config.py) -> parent (core) -> parent (pdfer)
_TOOL_DIR = Path(__file__).parent.parent.resolve()

SETTINGS_FILENAME = "settings.json"
DEFAULT_SETTINGS_FILENAME = "default_settings.json"
SETTINGS_PATH = APP_DATA_DIR / SETTINGS_FILENAME
DEFAULT_SETTINGS_PATH = _TOOL_DIR / DEFAULT_SETTINGS_FILENAME

# Snapshot of the recent documents, relative to the working directory
DEFAULT_DATABASE_PATH = "database.json"

MIN_FONT_SIZE = 1
MAX_FONT_SIZE = 256


def load_json_file(path: Path | str, default: Any = None) -> Any:
    """Load a JSON file safely."""
    try:
        p = Path(path)
        if p.exists():
            with open(p, "r", encoding="utf-8") as f:
                return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load JSON {path}: {e}")
    return default


def save_json_file(path: Path | str, data: Any, indent: int = 2) -> bool:
    """Save data to a JSON file safely."""
    try:
        atomic_write_text(path, json.dumps(data, indent=indent))
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save JSON {path}: {e}")
        return False


def _load_settings() -> dict:
    """Load settings from settings.json."""
    if not SETTINGS_PATH.exists() and DEFAULT_SETTINGS_PATH.exists():
        try:
            shutil.copy2(DEFAULT_SETTINGS_PATH, SETTINGS_PATH)
        except OSError:
            pass

    data = load_json_file(SETTINGS_PATH)
    if isinstance(data, dict): return data

    data = load_json_file(DEFAULT_SETTINGS_PATH)
    return data if isinstance(data, dict) else {}


def _save_settings(settings: dict) -> None:
    """Save settings to settings.json."""
    save_json_file(SETTINGS_PATH, settings)


_settings = _load_settings()


class PdferConfig:
    """User settings for PDFer."""

    def __init__(self):
        self.theme = _settings.get("theme", "light")
        self.database_path = _settings.get("database_path", DEFAULT_DATABASE_PATH)
        self.render_width = _settings.get("render_width", 2000)
        self.render_max_height = _settings.get("render_max_height", 2000)
        self.max_name_len = _settings.get("max_name_len", 15)
        self.note_font_size = _settings.get("note_font_size", 16)

    def set_theme(self, theme: str) -> None:
        self.theme = theme
        _settings["theme"] = theme
        _save_settings(_settings)

    def set_database_path(self, path: str) -> None:
        self.database_path = path
        _settings["database_path"] = path
        _save_settings(_settings)

    def set_render_size(self, width: int, max_height: int) -> None:
        self.render_width = width
        self.render_max_height = max_height
        _settings["render_width"] = width
        _settings["render_max_height"] = max_height
        _save_settings(_settings)

    def set_max_name_len(self, length: int) -> None:
        self.max_name_len = length
        _settings["max_name_len"] = length
        _save_settings(_settings)

    def set_note_font_size(self, size: int) -> None:
        self.note_font_size = size
        _settings["note_font_size"] = size
        _save_settings(_settings)

config = PdferConfig()
