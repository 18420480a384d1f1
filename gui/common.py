"""Shared logic and queue handling for the GUI."""
import logging
import queue
import time
from pathlib import Path

from imgui_bundle import imgui, portable_file_dialogs as pfd

from core import SharedStateHandle, NotFoundError, derive_display_name
from application_state import state, invalidate_page, log_message

logger = logging.getLogger(__name__)

PDF_FILTERS = ["PDF Files", "*.pdf", "All Files", "*"]


def render_tooltip(text: str):
    """Render a tooltip."""
    if imgui.is_item_hovered():
        item_max = imgui.get_item_rect_max()
        imgui.set_next_window_pos(item_max, imgui.Cond_.always, imgui.ImVec2(1.0, 0.0))
        if imgui.begin_tooltip():
            imgui.push_text_wrap_pos(min(imgui.get_font_size() * 30, 400.0))
            imgui.text_wrapped(text)
            imgui.pop_text_wrap_pos()
            imgui.end_tooltip()


def process_queue():
    """Process events from the GUI queue."""
    while not state.gui_queue.empty():
        try:
            event = state.gui_queue.get_nowait()
            handle_queue_event(event)
        except queue.Empty:
            break


def handle_queue_event(event: dict):
    """Handle a single queue event."""
    event_type = event.get("type")

    if event_type == "log_entry":
        state.logs.append({
            "level": event.get("level"),
            "msg": event.get("message"),
            "time": event.get("timestamp")
        })

    elif event_type == "status":
        msg = event.get("message", "").rstrip()
        if msg:
            state.logs.append({
                "level": "INFO",
                "msg": msg,
                "time": time.time()
            })


def open_new_document(library: SharedStateHandle, path: str):
    """Register a document picked from disk and make it the active one."""
    filepath = str(Path(path).resolve())
    library.open_new(filepath, derive_display_name(filepath))
    invalidate_page()


def open_recent_document(library: SharedStateHandle, filepath: str):
    library.open_recent(filepath)
    invalidate_page()


def close_document(library: SharedStateHandle):
    """Store the page of the open document and go back to the library."""
    if not library.close_and_persist():
        log_message("Library could not be saved; changes are kept in memory.")
    invalidate_page()
    state.page_image = None
    state.page_count = 0


def rename_document(library: SharedStateHandle, filepath: str, new_name: str) -> bool:
    new_name = new_name.strip()
    if not new_name:
        return False
    try:
        library.rename(filepath, new_name)
    except NotFoundError as e:
        logger.warning(str(e))
        return False
    log_message(f"Renamed to '{new_name}'")
    return True


def delete_document(library: SharedStateHandle, filepath: str) -> bool:
    try:
        library.delete(filepath)
    except NotFoundError as e:
        logger.warning(str(e))
        return False
    return True


def open_pdf_dialog():
    """Show the native file picker unless one is already open."""
    if state.pdf_dialog is None:
        state.pdf_dialog = pfd.open_file("Open PDF", str(Path.cwd()), PDF_FILTERS)


def poll_file_dialogs(library: SharedStateHandle):
    """Pick up the result of a finished file picker."""
    dialog = state.pdf_dialog
    if dialog is None or not dialog.ready():
        return
    state.pdf_dialog = None
    files = dialog.result()
    if files:
        open_new_document(library, files[0])
