import sys
from unittest.mock import MagicMock

# Mock imgui_bundle before importing gui
# This ensures tests run even if GUI dependencies are missing
sys.modules["imgui_bundle"] = MagicMock()
sys.modules["imgui_bundle.imgui"] = MagicMock()
sys.modules["imgui_bundle.hello_imgui"] = MagicMock()
sys.modules["imgui_bundle.immapp"] = MagicMock()
sys.modules["imgui_bundle.immvision"] = MagicMock()
sys.modules["imgui_bundle.portable_file_dialogs"] = MagicMock()

import pytest
from unittest.mock import patch

import core
from application_state import state, init_app_state, begin_rename, begin_delete
from core import RenderedPage, RenderError, load_registry
from gui import common as gui_common
from gui import logs_panel, notes_panel, popups, viewer_panel


class FakeDialog:
    """Stands in for a portable_file_dialogs picker."""
    def __init__(self, result, ready=True):
        self._result = result
        self._ready = ready

    def ready(self, timeout=0):
        return self._ready

    def result(self):
        return self._result

@pytest.fixture(autouse=True)
def clean_state():
    init_app_state()
    yield
    init_app_state()

def test_handle_log_entry():
    gui_common.handle_queue_event({"type": "log_entry", "level": "WARNING", "message": "careful", "timestamp": 1.0})
    assert list(state.logs) == [{"level": "WARNING", "msg": "careful", "time": 1.0}]

def test_handle_status_ignores_blank():
    gui_common.handle_queue_event({"type": "status", "message": "   "})
    assert len(state.logs) == 0

    gui_common.handle_queue_event({"type": "status", "message": "Saved\n"})
    assert state.logs[0]["msg"] == "Saved"
    assert state.logs[0]["level"] == "INFO"

def test_process_queue_drains_events():
    for i in range(3):
        state.gui_queue.put({"type": "log_entry", "level": "INFO", "message": str(i), "timestamp": i})
    gui_common.process_queue()
    assert [e["msg"] for e in state.logs] == ["0", "1", "2"]
    assert state.gui_queue.empty()

def test_poll_file_dialog_opens_document(library, temp_cwd):
    pdf = temp_cwd / "paper.pdf"
    pdf.touch()
    state.pdf_dialog = FakeDialog([str(pdf)])

    gui_common.poll_file_dialogs(library)

    assert state.pdf_dialog is None
    assert library.current().path == str(pdf.resolve())
    assert library.list_recent()[0].display_name == "paper.pdf"
    assert state.page_dirty

def test_poll_file_dialog_waits_and_handles_cancel(library):
    pending = FakeDialog(["/docs/a.pdf"], ready=False)
    state.pdf_dialog = pending
    gui_common.poll_file_dialogs(library)
    assert state.pdf_dialog is pending

    state.pdf_dialog = FakeDialog([])
    gui_common.poll_file_dialogs(library)
    assert state.pdf_dialog is None
    assert library.count_recent() == 0

def test_open_recent_invalidates_page(library):
    library.open_new("/docs/a.pdf", "a")
    state.page_key = ("/docs/a.pdf", 0)
    gui_common.open_recent_document(library, "/docs/a.pdf")
    assert state.page_key is None

def test_close_document_persists(library, tmp_path):
    library.open_new("/docs/a.pdf", "a")
    library.go_to_page(2, 5)
    state.page_count = 5
    state.page_image = object()

    gui_common.close_document(library)

    assert library.current() is None
    assert state.page_image is None
    assert state.page_count == 0
    assert load_registry(tmp_path / "database.json").get("/docs/a.pdf").page_num == 2

def test_rename_document_rules(library):
    library.open_new("/docs/a.pdf", "a")
    assert gui_common.rename_document(library, "/docs/a.pdf", "   ") is False
    assert gui_common.rename_document(library, "/docs/missing.pdf", "x") is False
    assert gui_common.rename_document(library, "/docs/a.pdf", "  Chapter 1 ") is True
    assert library.list_recent()[0].display_name == "Chapter 1"

def test_confirm_rename_and_delete(library, tmp_path):
    library.open_new("/docs/a.pdf", "a")
    library.open_new("/docs/b.pdf", "b")

    begin_rename("/docs/a.pdf", "a")
    state.rename_input = "Intro"
    popups.confirm_rename(library)
    assert state.rename_target is None
    assert load_registry(tmp_path / "database.json").get("/docs/a.pdf").display_name == "Intro"

    begin_delete("/docs/b.pdf")
    assert state.show_delete_popup
    popups.confirm_delete(library)
    assert state.delete_target is None
    assert [r.filepath for r in library.list_recent()] == ["/docs/a.pdf"]
    assert load_registry(tmp_path / "database.json").count() == 1

def test_confirm_delete_unknown_target(library):
    begin_delete("/docs/missing.pdf")
    popups.confirm_delete(library)
    assert state.delete_target is None
    assert not library.snapshot_path.exists()

def test_open_and_save_note(tmp_path):
    note = tmp_path / "notes.txt"
    note.write_text("hello", encoding="utf-8")

    notes_panel.open_note(str(note))
    assert state.note_text == "hello"
    assert not state.note_dirty

    state.note_text = "hello again"
    state.note_dirty = True
    assert notes_panel.save_current_note() is True
    assert note.read_text(encoding="utf-8") == "hello again"
    assert not state.note_dirty

def test_save_untitled_note_needs_path(tmp_path):
    state.note_text = "draft"
    assert notes_panel.save_current_note() is False

    target = tmp_path / "draft.txt"
    state.note_save_dialog = FakeDialog(str(target))
    notes_panel.poll_note_dialogs()

    assert state.note_save_dialog is None
    assert state.note_path == str(target)
    assert target.read_text(encoding="utf-8") == "draft"

def test_apply_font_size(monkeypatch):
    monkeypatch.setattr(core.config, "note_font_size", 16)
    state.note_font_size = 16

    state.font_size_input = "abc"
    notes_panel.apply_font_size()
    assert state.note_font_size == 16
    assert state.font_size_input == "16"

    state.font_size_input = "500"
    notes_panel.apply_font_size()
    assert state.note_font_size == 256
    assert core.config.note_font_size == 256

def test_page_to_array_drops_row_padding():
    # 2x2 page with one byte of padding per row
    samples = bytes([1, 2, 3, 4, 5, 6, 0,
                     7, 8, 9, 10, 11, 12, 0])
    page = RenderedPage(samples=samples, width=2, height=2, stride=7, page_count=1)
    arr = viewer_panel.page_to_array(page)
    assert arr.shape == (2, 2, 3)
    assert arr[1, 1].tolist() == [10, 11, 12]

def test_refresh_page_only_renders_changes(library):
    renderer = MagicMock()
    renderer.page_count.return_value = 4
    renderer.render_page.return_value = RenderedPage(samples=bytes(3), width=1, height=1, stride=3, page_count=4)
    library.open_new("/docs/a.pdf", "a")

    viewer_panel.refresh_page(library, renderer)
    viewer_panel.refresh_page(library, renderer)
    assert renderer.render_page.call_count == 1
    assert state.page_count == 4

    library.navigate_next(state.page_count)
    viewer_panel.refresh_page(library, renderer)
    renderer.render_page.assert_called_with("/docs/a.pdf", 1)

def test_refresh_page_reports_render_error(library):
    renderer = MagicMock()
    renderer.page_count.side_effect = RenderError("cannot open")
    library.open_new("/docs/a.pdf", "a")

    viewer_panel.refresh_page(library, renderer)

    assert state.render_error == "cannot open"
    assert state.page_image is None
    assert state.page_count == 0

def test_exit_requests_runner_stop():
    params = MagicMock()
    with patch("gui.popups.hello_imgui.get_runner_params", return_value=params):
        popups.try_exit_app()
    assert params.app_shall_exit is True

def test_logs_filtered_by_level():
    for level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        state.logs.append({"level": level, "msg": level.lower(), "time": 0})

    assert [e["msg"] for e in logs_panel.visible_entries("INFO")] == ["info", "warning", "error"]
    assert [e["msg"] for e in logs_panel.visible_entries("ERROR")] == ["error"]
    assert len(logs_panel.visible_entries("DEBUG")) == 4

    text = logs_panel.format_entries(logs_panel.visible_entries("WARNING"))
    assert text.splitlines()[0].endswith("[WARNING] warning")

def test_refresh_page_clamps_stored_page_to_shorter_document(library):
    library.open_new("/docs/a.pdf", "a")
    library.go_to_page(7, 10)
    library.close_and_persist()
    library.open_recent("/docs/a.pdf")
    assert library.current().page == 7

    # The file now has only three pages
    renderer = MagicMock()
    renderer.page_count.return_value = 3
    renderer.render_page.return_value = RenderedPage(samples=bytes(3), width=1, height=1, stride=3, page_count=3)

    viewer_panel.refresh_page(library, renderer)

    renderer.render_page.assert_called_once_with("/docs/a.pdf", 2)
    assert library.current().page == 2
    assert state.page_count == 3
    assert state.render_error == ""
    assert library.page_label(state.page_count) == "3 of 3"

    viewer_panel.refresh_page(library, renderer)
    assert renderer.render_page.call_count == 1
