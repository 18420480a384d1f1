"""Application state and data structures."""
import logging
import queue
from collections import deque
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from typing import Any

from core import APP_DATA_DIR, config


@dataclass
class AppState:
    """GUI view state.

    The recent documents and the open session live in the library handle,
    not here; this only tracks what the panels are showing.
    """
    gui_queue: queue.Queue = field(default_factory=queue.Queue)
    logs: deque = field(default_factory=lambda: deque(maxlen=2000))
    log_level: str = "INFO"  # lowest level shown in the Logs panel
    frame_count: int = 0

    # File dialogs (portable_file_dialogs instances while open)
    pdf_dialog: Any = None
    note_open_dialog: Any = None
    note_save_dialog: Any = None

    # Viewer
    page_key: tuple | None = None  # (path, page) currently rasterized
    page_image: Any = None
    page_count: int = 0
    page_dirty: bool = False
    render_error: str = ""

    # Library popups
    show_rename_popup: bool = False
    rename_target: str | None = None
    rename_input: str = ""
    show_delete_popup: bool = False
    delete_target: str | None = None

    # Notes
    note_path: str = ""
    note_text: str = ""
    note_dirty: bool = False
    note_font_size: int = field(default_factory=lambda: config.note_font_size)
    font_size_input: str = field(default_factory=lambda: str(config.note_font_size))

# Global state instance
state: AppState = AppState()

def init_app_state():
    """Initialize or reset the global app state."""
    # Reset the existing state object in-place to preserve references
    # held by other modules (gui, cli)
    new_state = AppState()
    state.__dict__.clear()
    state.__dict__.update(new_state.__dict__)

def invalidate_page():
    """Force the viewer to rasterize the current page again."""
    state.page_key = None
    state.page_dirty = True

def begin_rename(filepath: str, current_name: str):
    state.rename_target = filepath
    state.rename_input = current_name
    state.show_rename_popup = True

def begin_delete(filepath: str):
    state.delete_target = filepath
    state.show_delete_popup = True

def log_message(text: str) -> None:
    """Log a message using standard logging."""
    logging.info(text)

class GuiLogHandler(logging.Handler):
    """Pushes logs to the GUI queue."""
    def emit(self, record):
        try:
            msg = self.format(record)
            if state and state.gui_queue:
                state.gui_queue.put({
                    "type": "log_entry",
                    "level": record.levelname,
                    "message": msg,
                    "timestamp": record.created
                })
        except Exception:
            self.handleError(record)

def setup_logging(enable_gui=True):
    """Configure application logging to file and GUI."""
    log_dir = APP_DATA_DIR / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "pdfer.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Silence noisy libraries
    for lib in ["PIL", "fitz"]:
        logging.getLogger(lib).setLevel(logging.WARNING)

    # Remove existing handlers to avoid duplicates on restart
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)

    # File Handler
    file_handler = RotatingFileHandler(log_file, maxBytes=1024*1024*5, backupCount=3, encoding='utf-8')
    file_fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_fmt)
    root_logger.addHandler(file_handler)

    # GUI Handler
    if enable_gui:
        gui_handler = GuiLogHandler()
        gui_fmt = logging.Formatter('%(message)s')
        gui_handler.setFormatter(gui_fmt)
        root_logger.addHandler(gui_handler)
