"""Library popups and exit handling."""
from imgui_bundle import imgui, hello_imgui

from core import SharedStateHandle
from application_state import state
from styles import STYLE
from .common import rename_document, delete_document


def try_exit_app():
    """Ask the runner to quit; the session is persisted in before_exit."""
    hello_imgui.get_runner_params().app_shall_exit = True


def confirm_rename(library: SharedStateHandle):
    if state.rename_target and rename_document(library, state.rename_target, state.rename_input):
        library.persist()
    state.rename_target = None
    state.rename_input = ""


def confirm_delete(library: SharedStateHandle):
    if state.delete_target and delete_document(library, state.delete_target):
        library.persist()
    state.delete_target = None


def render_rename_popup(library: SharedStateHandle):
    if state.show_rename_popup:
        imgui.open_popup("Rename Document")
        state.show_rename_popup = False

    if imgui.begin_popup_modal("Rename Document", None, imgui.WindowFlags_.always_auto_resize)[0]:
        imgui.text("Display name:")
        imgui.set_next_item_width(300)
        if imgui.is_window_appearing():
            imgui.set_keyboard_focus_here()
        entered, state.rename_input = imgui.input_text("##rename", state.rename_input, imgui.InputTextFlags_.enter_returns_true)
        imgui.separator()

        if imgui.button("Rename", imgui.ImVec2(100, 0)) or entered:
            confirm_rename(library)
            imgui.close_current_popup()
        imgui.same_line()
        if imgui.button("Cancel", imgui.ImVec2(100, 0)):
            state.rename_target = None
            imgui.close_current_popup()
        imgui.end_popup()


def render_delete_popup(library: SharedStateHandle):
    if state.show_delete_popup:
        imgui.open_popup("Remove Document")
        state.show_delete_popup = False

    if imgui.begin_popup_modal("Remove Document", None, imgui.WindowFlags_.always_auto_resize)[0]:
        imgui.text("Remove this document from the library?")
        imgui.text_colored(STYLE.get_imvec4("fg_dim"), state.delete_target or "")
        imgui.text("The file itself is not deleted.")
        imgui.separator()

        imgui.push_style_color(imgui.Col_.button, STYLE.get_imvec4("btn_cncl"))
        if imgui.button("Remove", imgui.ImVec2(100, 0)):
            confirm_delete(library)
            imgui.close_current_popup()
        imgui.pop_style_color()
        imgui.same_line()
        if imgui.button("Keep", imgui.ImVec2(100, 0)):
            state.delete_target = None
            imgui.close_current_popup()
        imgui.end_popup()
