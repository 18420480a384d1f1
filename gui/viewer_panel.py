"""Document viewer panel."""
import logging

import numpy as np
from imgui_bundle import imgui, immvision

from core import SharedStateHandle, DocumentRenderer, RenderError, RenderedPage, derive_display_name
from application_state import state
from styles import STYLE
from .common import close_document, open_pdf_dialog

logger = logging.getLogger(__name__)


def page_to_array(page: RenderedPage) -> np.ndarray:
    """View the RGB samples as an (height, width, 3) array, dropping row padding."""
    rows = np.frombuffer(page.samples, dtype=np.uint8).reshape(page.height, page.stride)
    return np.ascontiguousarray(rows[:, :page.width * 3].reshape(page.height, page.width, 3))


def refresh_page(library: SharedStateHandle, renderer: DocumentRenderer):
    """Rasterize the current page if it changed since the last frame."""
    current = library.current()
    if current is None:
        state.page_key = None
        state.page_image = None
        return
    key = (current.path, current.page)
    if key == state.page_key:
        return

    state.page_key = key
    try:
        # The file may have shrunk since the page was stored
        total = renderer.page_count(current.path)
        index = library.go_to_page(current.page, total)
        page = renderer.render_page(current.path, index)
    except RenderError as e:
        logger.error(str(e))
        state.render_error = str(e)
        state.page_image = None
        state.page_count = 0
        return
    state.page_key = (current.path, index)
    state.render_error = ""
    state.page_image = page_to_array(page)
    state.page_count = page.page_count
    state.page_dirty = True


def render_viewer_panel(library: SharedStateHandle, renderer: DocumentRenderer):
    refresh_page(library, renderer)
    current = library.current()

    if current is None:
        imgui.text_colored(STYLE.get_imvec4("fg_dim"), "No document open.")
        if imgui.button("Open PDF..."):
            open_pdf_dialog()
        return

    if imgui.button("<##prev", imgui.ImVec2(30, 0)):
        library.navigate_previous()
    imgui.same_line()
    imgui.text(library.page_label(state.page_count))
    imgui.same_line()
    if imgui.button(">##next", imgui.ImVec2(30, 0)):
        library.navigate_next(state.page_count)
    imgui.same_line()
    imgui.text_colored(STYLE.get_imvec4("fg_dim"), derive_display_name(current.path))
    imgui.same_line()
    if imgui.button("Close"):
        close_document(library)
        return

    if imgui.is_window_focused():
        if imgui.is_key_pressed(imgui.Key.left_arrow) or imgui.is_key_pressed(imgui.Key.page_up):
            library.navigate_previous()
        if imgui.is_key_pressed(imgui.Key.right_arrow) or imgui.is_key_pressed(imgui.Key.page_down):
            library.navigate_next(state.page_count)

    imgui.separator()

    if state.render_error:
        imgui.text_colored(STYLE.get_imvec4("link_err"), state.render_error)
        return
    if state.page_image is None:
        return

    # Fit the page to the panel width, keep aspect ratio
    avail = imgui.get_content_region_avail()
    img_h, img_w = state.page_image.shape[:2]
    scale = min(avail.x / img_w, 1.0) if img_w else 1.0
    size = (int(img_w * scale), int(img_h * scale))

    imgui.push_style_color(imgui.Col_.child_bg, STYLE.get_imvec4("page_bg"))
    imgui.begin_child("page_area", imgui.ImVec2(0, 0))
    immvision.image_display("##page", state.page_image, image_display_size=size, refresh_image=state.page_dirty)
    imgui.end_child()
    imgui.pop_style_color()
    state.page_dirty = False
