"""Logs panel."""
import logging
import time
from datetime import datetime
from imgui_bundle import imgui

from application_state import state
from styles import STYLE

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

_LEVEL_COLORS = {
    "DEBUG": "fg_dim",
    "WARNING": "warn",
    "ERROR": "link_err",
    "CRITICAL": "link_err",
}


def visible_entries(min_level: str) -> list[dict]:
    threshold = logging.getLevelName(min_level)
    return [e for e in list(state.logs)
            if logging.getLevelName(e.get("level") or "INFO") >= threshold]


def format_entries(entries: list[dict]) -> str:
    lines = []
    for e in entries:
        ts = datetime.fromtimestamp(e.get("time") or time.time()).strftime("%H:%M:%S")
        lines.append(f"{ts} [{e.get('level')}] {e.get('msg')}")
    return "\n".join(lines)


def render_logs_panel():
    imgui.set_next_item_width(100)
    if imgui.begin_combo("Level", state.log_level):
        for level in LEVELS:
            if imgui.selectable(level, level == state.log_level)[0]:
                state.log_level = level
        imgui.end_combo()
    imgui.same_line()
    if imgui.button("Copy"):
        imgui.set_clipboard_text(format_entries(visible_entries(state.log_level)))
    imgui.same_line()
    if imgui.button("Clear"):
        state.logs.clear()
    imgui.separator()

    imgui.begin_child("logs_content", imgui.ImVec2(0, 0))
    for entry in visible_entries(state.log_level):
        color = STYLE.get_imvec4(_LEVEL_COLORS.get(entry.get("level"), "fg"))
        ts = datetime.fromtimestamp(entry.get("time") or time.time()).strftime("%H:%M:%S")
        imgui.text_colored(STYLE.get_imvec4("fg_dim"), ts)
        imgui.same_line()
        imgui.text_colored(color, entry.get("msg", ""))

    # Follow new entries unless the user scrolled up
    if imgui.get_scroll_y() >= imgui.get_scroll_max_y():
        imgui.set_scroll_here_y(1.0)
    imgui.end_child()
