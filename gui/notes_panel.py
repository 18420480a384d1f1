"""Plain-text notes panel."""
from pathlib import Path
from imgui_bundle import imgui, portable_file_dialogs as pfd

from core import config, load_note, save_note, parse_font_size, get_display_path
from application_state import state
from styles import STYLE
from .common import render_tooltip

TEXT_FILTERS = ["Text Files", "*.txt", "All Files", "*"]


def open_note(path: str):
    state.note_path = path
    state.note_text = load_note(path)
    state.note_dirty = False


def save_current_note(path: str | None = None) -> bool:
    """Write the editor contents to path, or to the open note."""
    target = path or state.note_path
    if not target:
        return False
    if not save_note(target, state.note_text):
        return False
    state.note_path = target
    state.note_dirty = False
    return True


def apply_font_size():
    size = parse_font_size(state.font_size_input, state.note_font_size)
    state.note_font_size = size
    state.font_size_input = str(size)
    if size != config.note_font_size:
        config.set_note_font_size(size)


def poll_note_dialogs():
    dialog = state.note_open_dialog
    if dialog is not None and dialog.ready():
        state.note_open_dialog = None
        files = dialog.result()
        if files:
            open_note(files[0])

    dialog = state.note_save_dialog
    if dialog is not None and dialog.ready():
        state.note_save_dialog = None
        target = dialog.result()
        if target:
            save_current_note(target)


def render_notes_panel():
    poll_note_dialogs()

    if imgui.button("Open Note..."):
        if state.note_open_dialog is None:
            state.note_open_dialog = pfd.open_file("Open Note", str(Path.cwd()), TEXT_FILTERS)
    imgui.same_line()
    if imgui.button("Save"):
        if state.note_path:
            save_current_note()
        elif state.note_save_dialog is None:
            state.note_save_dialog = pfd.save_file("Save Note", str(Path.cwd() / "notes.txt"), TEXT_FILTERS)
    imgui.same_line()
    if imgui.button("Save As..."):
        if state.note_save_dialog is None:
            default = state.note_path or str(Path.cwd() / "notes.txt")
            state.note_save_dialog = pfd.save_file("Save Note", default, TEXT_FILTERS)

    imgui.same_line()
    imgui.set_next_item_width(50)
    changed, state.font_size_input = imgui.input_text("Size", state.font_size_input, imgui.InputTextFlags_.enter_returns_true)
    if changed or imgui.is_item_deactivated_after_edit():
        apply_font_size()
    render_tooltip("Font size of the note editor (1-256).")

    title = get_display_path(state.note_path) if state.note_path else "Untitled"
    if state.note_dirty:
        title += " *"
    imgui.text_colored(STYLE.get_imvec4("fg_dim"), title)

    imgui.push_font(None, float(state.note_font_size))
    changed, state.note_text = imgui.input_text_multiline("##note", state.note_text, imgui.ImVec2(-1, -1))
    imgui.pop_font()
    if changed:
        state.note_dirty = True
