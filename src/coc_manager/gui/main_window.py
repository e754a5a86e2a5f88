"""Main application window with the Open and Save menus."""

import tkinter as tk
from tkinter import messagebox
from typing import Optional, Union

import customtkinter as ctk
from PIL import ImageTk

from .. import __app_name__, __version__
from ..assets.icons import create_app_icon, create_error_icon
from ..config.manager import ConfigurationManager
from ..core.catalog import DirectoryCatalog
from ..core.dispatch import DispatchRouter
from ..core.editor import EditorError, SaveBuffer
from ..core.menus import (
    DirectoryRoot,
    ExportRoot,
    ImportRoot,
    LeafAction,
    MenuLeaf,
    MenuRoot,
    build_open_menu,
    build_save_menu,
)
from ..core.scanner import SaveScanner
from ..logging_config import get_logger
from .file_dialogs import TkFilePicker
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES

logger = get_logger("main_window")


class MainWindow(ctk.CTk):
    """Main application window.

    Layout:
    - Title and the currently loaded save
    - Open / Save / Refresh buttons; Open and Save pop up menus built
      from the latest scan
    - Status line
    """

    def __init__(
        self,
        config_manager: ConfigurationManager,
        scanner: SaveScanner,
        editor: SaveBuffer,
    ):
        super().__init__()

        self.config_manager = config_manager
        self.scanner = scanner
        self.editor = editor
        self.router = DispatchRouter(editor, TkFilePicker(self, config_manager))
        self.catalogs: list[DirectoryCatalog] = []

        # Image references must outlive the menus that show them
        self._error_icon = ImageTk.PhotoImage(create_error_icon(16))
        self._app_icon = ImageTk.PhotoImage(create_app_icon(64))
        self._menu: Optional[tk.Menu] = None

        # Window setup
        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["main"]
        min_width, min_height = WINDOW_SIZES["min_main"]
        self.geometry(f"{width}x{height}")
        self.minsize(min_width, min_height)
        self._set_app_icon()

        self._create_ui()
        self._refresh()

    def _set_app_icon(self):
        try:
            self.iconphoto(True, self._app_icon)
        except tk.TclError as e:
            logger.debug("Could not set app icon: %s", e)

    def _create_ui(self):
        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=PADDING["medium"], pady=PADDING["medium"])

        title = ctk.CTkLabel(container, text=__app_name__, font=FONTS["title"])
        title.pack(anchor="w", padx=PADDING["small"], pady=(PADDING["small"], 0))

        self.loaded_label = ctk.CTkLabel(container, text="No save loaded", font=FONTS["body"], text_color="gray")
        self.loaded_label.pack(anchor="w", padx=PADDING["small"], pady=(0, PADDING["medium"]))

        buttons = ctk.CTkFrame(container, fg_color="transparent")
        buttons.pack(fill="x", padx=PADDING["small"])

        self.open_btn = ctk.CTkButton(
            buttons,
            text="Open",
            width=100,
            command=lambda: self._show_menu(self.open_btn, build_open_menu(self.catalogs)),
        )
        self.open_btn.pack(side="left")

        self.save_btn = ctk.CTkButton(
            buttons,
            text="Save",
            width=100,
            command=lambda: self._show_menu(self.save_btn, build_save_menu(self.catalogs)),
        )
        self.save_btn.pack(side="left", padx=(PADDING["small"], 0))

        refresh_btn = ctk.CTkButton(
            buttons,
            text="Refresh",
            width=80,
            fg_color=COLORS["muted"],
            command=self._refresh,
        )
        refresh_btn.pack(side="right")

        self.status_label = ctk.CTkLabel(container, text="", font=FONTS["small"], text_color="gray")
        self.status_label.pack(side="bottom", anchor="w", padx=PADDING["small"], pady=PADDING["small"])

    def _refresh(self):
        """Rescan all save locations."""
        self.catalogs = self.scanner.scan()
        count = sum(len(c.files) for c in self.catalogs)
        self._set_status(f"Found {count} save files")
        self.save_btn.configure(state="normal" if self.editor.is_loaded else "disabled")

    def _show_menu(self, anchor: ctk.CTkButton, roots: list[MenuRoot]):
        if self._menu is not None:
            self._menu.destroy()
        self._menu = self._build_menu(roots)

        x = anchor.winfo_rootx()
        y = anchor.winfo_rooty() + anchor.winfo_height()
        try:
            self._menu.tk_popup(x, y)
        finally:
            self._menu.grab_release()

    def _build_menu(self, roots: list[MenuRoot]) -> tk.Menu:
        menu = tk.Menu(self, tearoff=0)
        for root in roots:
            if not root.is_visible:
                continue
            if root.has_separator_before:
                menu.add_separator()

            foreground = COLORS["muted"] if root.is_muted else COLORS["text"]
            if isinstance(root, DirectoryRoot):
                submenu = tk.Menu(menu, tearoff=0)
                for leaf in root.children:
                    self._add_leaf(submenu, leaf)
                menu.add_cascade(label=root.label, menu=submenu, foreground=foreground)
            else:
                menu.add_command(
                    label=root.label,
                    foreground=foreground,
                    command=lambda r=root: self._activate(r),
                )
        return menu

    def _add_leaf(self, menu: tk.Menu, leaf: MenuLeaf):
        options = {
            "label": leaf.label,
            "accelerator": leaf.sub_label,
            "foreground": COLORS["muted"] if leaf.is_muted else COLORS["text"],
            "command": lambda: self._activate(leaf),
        }
        if leaf.has_error:
            options["image"] = self._error_icon
            options["compound"] = "left"
        menu.add_command(**options)

    def _activate(self, item: Union[MenuLeaf, MenuRoot]):
        try:
            dispatched = self.router.activate(item)
        except (EditorError, OSError) as e:
            logger.error("Action failed for %s: %s", item.label, e)
            messagebox.showerror("Error", str(e), parent=self)
            self._set_status(f"Failed: {e}", error=True)
            return

        if not dispatched:
            return

        if isinstance(item, ImportRoot):
            self.scanner.import_file(self.editor.source_path)

        self.loaded_label.configure(text=f"Loaded: {self.editor.source_path.name}")
        self._refresh()

        if isinstance(item, ExportRoot) or getattr(item, "action", None) is LeafAction.SAVE:
            path, fmt = self.editor.last_saved
            self._set_status(f"Saved {path.name} ({fmt.name.lower()})")
        else:
            self._set_status(f"Loaded {self.editor.source_path.name}")

    def _set_status(self, message: str, error: bool = False):
        self.status_label.configure(
            text=message,
            text_color=COLORS["danger"] if error else "gray",
        )
