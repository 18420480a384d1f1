"""imgui-bundle front end for PDFer."""

from .runner import run_gui
