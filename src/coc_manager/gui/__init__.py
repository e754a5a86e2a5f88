"""GUI module using CustomTkinter.

Components:
    MainWindow: Application window with Open and Save menus built from the
                scanned save directories
    TkFilePicker: Native open/save dialogs used by Import and Export

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
"""

from .main_window import MainWindow
from .file_dialogs import TkFilePicker

__all__ = [
    "MainWindow",
    "TkFilePicker",
]
