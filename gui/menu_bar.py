"""Menu bar logic."""
from imgui_bundle import imgui, hello_imgui

from core import SharedStateHandle, config
from styles import STYLE, apply_imgui_theme
from .common import open_pdf_dialog, close_document
from .popups import try_exit_app


def toggle_theme():
    """Toggle between light and dark theme."""
    new_theme = "light" if STYLE.dark else "dark"
    config.set_theme(new_theme)
    STYLE.load(new_theme)
    apply_imgui_theme(STYLE.dark)


def render_menu_bar(library: SharedStateHandle):
    if imgui.begin_menu("File"):
        if imgui.menu_item("Open PDF...", "Ctrl+O", False)[0]:
            open_pdf_dialog()
        if imgui.menu_item("Close Document", "Ctrl+W", False, library.current() is not None)[0]:
            close_document(library)
        imgui.separator()
        if imgui.menu_item("Exit", "Alt+F4", False)[0]:
            try_exit_app()
        imgui.end_menu()

    if imgui.begin_menu("View"):
        runner_params = hello_imgui.get_runner_params()
        if imgui.menu_item("Restore Defaults", "", False)[0]:
            for window in runner_params.docking_params.dockable_windows:
                window.is_visible = True
            runner_params.docking_params.layout_reset = True

        imgui.separator()
        for window in runner_params.docking_params.dockable_windows:
            _, window.is_visible = imgui.menu_item(window.label, "", window.is_visible)
        imgui.separator()
        if imgui.menu_item("Toggle Theme", "", False)[0]:
            toggle_theme()
        imgui.end_menu()
