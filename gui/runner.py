"""Main GUI runner."""
import logging
from functools import partial
from imgui_bundle import imgui, hello_imgui, immapp, immvision

from core import APP_DATA_DIR, config, DocumentRenderer, SharedStateHandle, open_library
from application_state import state, init_app_state, setup_logging
from styles import STYLE, apply_imgui_theme

# Panels
from .common import process_queue, poll_file_dialogs, open_pdf_dialog, close_document
from .library_panel import render_library_panel
from .viewer_panel import render_viewer_panel
from .notes_panel import render_notes_panel
from .logs_panel import render_logs_panel
from .menu_bar import render_menu_bar
from .popups import render_rename_popup, render_delete_popup

logger = logging.getLogger(__name__)


def create_docking_layout(library: SharedStateHandle, renderer: DocumentRenderer) -> tuple:
    splits = []

    s1 = hello_imgui.DockingSplit()
    s1.initial_dock = "MainDockSpace"
    s1.new_dock = "NotesSpace"
    s1.direction = imgui.Dir.right
    s1.ratio = 0.4
    splits.append(s1)

    s2 = hello_imgui.DockingSplit()
    s2.initial_dock = "MainDockSpace"
    s2.new_dock = "LogsSpace"
    s2.direction = imgui.Dir.down
    s2.ratio = 0.15
    splits.append(s2)

    windows = []

    library_win = hello_imgui.DockableWindow()
    library_win.label = "Library"
    library_win.dock_space_name = "MainDockSpace"
    library_win.gui_function = partial(render_library_panel, library.share())
    windows.append(library_win)

    viewer_win = hello_imgui.DockableWindow()
    viewer_win.label = "Viewer"
    viewer_win.dock_space_name = "MainDockSpace"
    viewer_win.gui_function = partial(render_viewer_panel, library.share(), renderer)
    windows.append(viewer_win)

    notes_win = hello_imgui.DockableWindow()
    notes_win.label = "Notes"
    notes_win.dock_space_name = "NotesSpace"
    notes_win.gui_function = render_notes_panel
    windows.append(notes_win)

    logs_win = hello_imgui.DockableWindow()
    logs_win.label = "Logs"
    logs_win.dock_space_name = "LogsSpace"
    logs_win.gui_function = render_logs_panel
    windows.append(logs_win)

    return splits, windows


def post_init():
    immvision.use_rgb_color_order()
    apply_imgui_theme(STYLE.dark)


def before_exit(library: SharedStateHandle, renderer: DocumentRenderer):
    if not library.close_and_persist():
        logger.error("Recent documents were not saved on exit.")
    renderer.close()


def main_gui(library: SharedStateHandle):
    """Main GUI function called each frame."""
    state.frame_count += 1

    io = imgui.get_io()
    if io.key_ctrl:
        if imgui.is_key_pressed(imgui.Key.o):
            open_pdf_dialog()
        if imgui.is_key_pressed(imgui.Key.w) and library.current() is not None:
            close_document(library)

    process_queue()
    poll_file_dialogs(library)

    render_rename_popup(library)
    render_delete_popup(library)


def run_gui():
    """Run the GUI application."""
    init_app_state()
    setup_logging()

    STYLE.load(config.theme)

    library = open_library(config.database_path)
    logger.info(f"Library: {library.count_recent()} recent documents")
    renderer = DocumentRenderer(config.render_width, config.render_max_height)

    runner_params = hello_imgui.RunnerParams()
    runner_params.ini_filename = str(APP_DATA_DIR / "imgui.ini")
    runner_params.app_window_params.window_title = "PDFer"
    runner_params.app_window_params.window_geometry.size = (1260, 945)
    runner_params.app_window_params.restore_previous_geometry = True

    runner_params.imgui_window_params.default_imgui_window_type = (
        hello_imgui.DefaultImGuiWindowType.provide_full_screen_dock_space
    )
    runner_params.imgui_window_params.show_menu_bar = True
    runner_params.imgui_window_params.show_menu_app = False
    runner_params.imgui_window_params.show_menu_view = False
    runner_params.imgui_window_params.show_status_bar = False

    if config.theme == "light":
        runner_params.imgui_window_params.tweaked_theme.theme = hello_imgui.ImGuiTheme_.imgui_colors_light
    else:
        runner_params.imgui_window_params.tweaked_theme.theme = hello_imgui.ImGuiTheme_.imgui_colors_dark

    runner_params.fps_idling.enable_idling = True

    splits, windows = create_docking_layout(library, renderer)
    runner_params.docking_params.docking_splits = splits
    runner_params.docking_params.dockable_windows = windows

    runner_params.callbacks.post_init = post_init
    runner_params.callbacks.before_exit = partial(before_exit, library, renderer)
    runner_params.callbacks.show_gui = partial(main_gui, library)
    runner_params.callbacks.show_menus = partial(render_menu_bar, library)

    immapp.run(runner_params, immapp.AddOnsParams())
