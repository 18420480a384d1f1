"""Recent documents panel."""
from imgui_bundle import imgui

from core import SharedStateHandle, config, shorten_name, get_display_path, format_timestamp
from application_state import state, begin_rename, begin_delete
from styles import STYLE
from .common import open_pdf_dialog, open_recent_document, render_tooltip

CARD_WIDTH = 150
CARD_HEIGHT = 60


def render_library_panel(library: SharedStateHandle):
    if imgui.button("Open PDF...", imgui.ImVec2(120, 0)):
        open_pdf_dialog()
    render_tooltip("Pick a PDF from disk and add it to your library.")

    count = library.count_recent()
    imgui.same_line()
    imgui.text_colored(STYLE.get_imvec4("fg_dim"), f"{count} recent document{'s' if count != 1 else ''}")
    imgui.separator()

    if count == 0:
        imgui.text_colored(STYLE.get_imvec4("fg_dim"), "No documents yet. Open a PDF to get started.")
        return

    avail = imgui.get_content_region_avail().x
    per_row = max(1, int(avail // (CARD_WIDTH + 8)))

    imgui.push_style_color(imgui.Col_.button, STYLE.get_imvec4("card"))
    imgui.push_style_color(imgui.Col_.button_hovered, STYLE.get_imvec4("card_hov"))
    for i, record in enumerate(library.list_recent()):
        imgui.push_id(record.filepath)
        if i % per_row:
            imgui.same_line()

        label = shorten_name(record.display_name, config.max_name_len)
        if imgui.button(f"{label}\nPage {record.page_num + 1}", imgui.ImVec2(CARD_WIDTH, CARD_HEIGHT)):
            open_recent_document(library, record.filepath)

        if imgui.is_item_hovered():
            opened = format_timestamp(record.last_read)
            imgui.set_tooltip(f"{record.display_name}\n{get_display_path(record.filepath)}\nLast read: {opened}")

        if imgui.begin_popup_context_item("card_menu"):
            if imgui.menu_item("Rename...", "", False)[0]:
                begin_rename(record.filepath, record.display_name)
            if imgui.menu_item("Remove from library", "", False)[0]:
                begin_delete(record.filepath)
            imgui.end_popup()
        imgui.pop_id()
    imgui.pop_style_color(2)
