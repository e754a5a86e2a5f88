"""Native file pickers for Import and Export"""

import tkinter as tk
from pathlib import Path
from tkinter import filedialog
from typing import Optional

from ..config.manager import ConfigurationManager
from ..core.catalog import EXPORT_FILETYPES, SerializationFormat
from ..logging_config import get_logger

logger = get_logger("file_dialogs")

OPEN_FILETYPES = [
    ("Flash objects (.sol)", "*.sol"),
    ("All files", "*.*"),
]


class TkFilePicker:
    """File picker backed by tkinter dialogs.

    Remembers the last used directories in the application settings.
    """

    def __init__(self, parent, config_manager: ConfigurationManager):
        self.parent = parent
        self.config_manager = config_manager

    @property
    def settings(self):
        return self.config_manager.config.settings

    def ask_open_path(self) -> Optional[Path]:
        """Ask for a save file to import.

        Returns:
            Chosen file, or None if the dialog was cancelled
        """
        initial_dir = self.settings.last_import_dir
        selected = filedialog.askopenfilename(
            parent=self.parent,
            title="Import Save",
            filetypes=OPEN_FILETYPES,
            defaultextension=".sol",
            initialdir=str(initial_dir) if initial_dir else None,
        )
        if not selected:
            return None

        path = Path(selected)
        self.settings.last_import_dir = path.parent
        self._save_settings()
        return path

    def ask_save_target(self) -> Optional[tuple[Path, SerializationFormat]]:
        """Ask for an export destination and format.

        Returns:
            Chosen file and format, or None if the dialog was cancelled
        """
        initial_dir = self.settings.last_export_dir
        type_var = tk.StringVar(self.parent, value=self.settings.export_format.filter_name)
        selected = filedialog.asksaveasfilename(
            parent=self.parent,
            title="Export Save",
            filetypes=EXPORT_FILETYPES,
            defaultextension=".sol",
            initialdir=str(initial_dir) if initial_dir else None,
            typevariable=type_var,
        )
        if not selected:
            return None

        path = Path(selected)
        fmt = SerializationFormat.from_filter_name(type_var.get(), path)
        self.settings.last_export_dir = path.parent
        self.settings.export_format = fmt
        self._save_settings()
        return path, fmt

    def _save_settings(self):
        try:
            self.config_manager.save()
        except OSError as e:
            logger.warning("Could not save settings: %s", e)
