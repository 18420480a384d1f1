"""UI Styles and Theme management for imgui-bundle."""
from imgui_bundle import imgui
from core import config


def hex_to_imvec4(hex_color: str, alpha: float = 1.0) -> imgui.ImVec4:
    """Convert hex color string to ImVec4 (0-1 range)."""
    hex_color = hex_color.lstrip('#')
    r = int(hex_color[0:2], 16) / 255.0
    g = int(hex_color[2:4], 16) / 255.0
    b = int(hex_color[4:6], 16) / 255.0
    return imgui.ImVec4(r, g, b, alpha)


class AppStyle:
    def __init__(self, mode="light"):
        self.c = {}
        self.dark = False
        self.load(mode)

    def load(self, mode):
        self.dark = mode == "dark"
        # Define palette: (light_val, dark_val)
        palette = {
            "bg": ("#f0f0f0", "#2b2b2b"), "bg_cont": ("#ffffff", "#333333"),
            "fg": ("#000000", "#e0e0e0"), "fg_dim": ("#555555", "#aaaaaa"),
            "bg_in": ("#ffffff", "#1e1e1e"), "bd": ("#888888", "#555555"),
            "page_bg": ("#d6d6d6", "#1a1a1a"),
            "card": ("#e3f2fd", "#263238"), "card_hov": ("#bbdefb", "#37474f"),
            "btn_std": ("#f0f0f0", "#424242"), "btn_act": ("#e1f5fe", "#00695c"),
            "btn_cncl": ("#ffebee", "#c62828"), "btn_suc": ("#e8f5e9", "#2e7d32"),
            "warn": ("#ff9800", "#ff9800"), "txt_suc": ("#2e7d32", "#4CAF50"),
            "link_err": ("#d32f2f", "#e57373"),
            "sel_bg": ("#0078d7", "#0050a0"), "icon_chk": ("#000000", "#ffffff"),
            "scrollbar": ("#dcdcdc", "#424242")
        }
        self.c = {k: v[1] if self.dark else v[0] for k, v in palette.items()}

    def __getitem__(self, k):
        return self.c.get(k, "#ff00ff")

    def get_imvec4(self, k, alpha: float = 1.0) -> imgui.ImVec4:
        """Get color as ImVec4 for imgui styling."""
        return hex_to_imvec4(self[k], alpha)


STYLE = AppStyle(config.theme)


def apply_imgui_theme(dark: bool) -> None:
    """Apply dark or light theme to imgui."""
    style = imgui.get_style()

    if dark:
        imgui.style_colors_dark(style)
    else:
        imgui.style_colors_light(style)

    def set_color(col_enum, key, alpha=1.0):
        style.set_color_(col_enum, STYLE.get_imvec4(key, alpha))

    # Window
    set_color(imgui.Col_.window_bg, "bg")
    set_color(imgui.Col_.child_bg, "bg_cont", 0.0)
    set_color(imgui.Col_.popup_bg, "bg_cont", 0.95)

    # Text
    set_color(imgui.Col_.text, "fg")
    set_color(imgui.Col_.text_disabled, "fg_dim")
    set_color(imgui.Col_.border, "bd", 0.5)

    # Inputs (font size box, note editor)
    set_color(imgui.Col_.frame_bg, "bg_in", 0.54)
    set_color(imgui.Col_.frame_bg_hovered, "sel_bg", 0.4)
    set_color(imgui.Col_.frame_bg_active, "sel_bg", 0.67)

    set_color(imgui.Col_.title_bg, "bg")
    set_color(imgui.Col_.title_bg_active, "sel_bg")

    # Buttons (page navigation, library cards)
    set_color(imgui.Col_.button, "btn_std")
    set_color(imgui.Col_.button_hovered, "btn_act")
    set_color(imgui.Col_.button_active, "sel_bg")

    set_color(imgui.Col_.header, "card")
    set_color(imgui.Col_.header_hovered, "card_hov")
    set_color(imgui.Col_.header_active, "sel_bg")

    set_color(imgui.Col_.tab, "btn_std")
    set_color(imgui.Col_.tab_hovered, "sel_bg", 0.8)
    set_color(imgui.Col_.tab_selected, "sel_bg")

    set_color(imgui.Col_.check_mark, "icon_chk")
    set_color(imgui.Col_.scrollbar_bg, "bg", 0.2)
    set_color(imgui.Col_.scrollbar_grab, "scrollbar")

    style.window_rounding = 4.0
    style.frame_rounding = 3.0
    style.scrollbar_rounding = 3.0
    style.tab_rounding = 4.0
    style.window_border_size = 1.0
    style.frame_border_size = 0.0
