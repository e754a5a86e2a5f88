"""Dispatch of selected menu items to the editor.

DispatchRouter is the single place where a menu selection turns into a
load or save call. It performs no validation and no retries; whatever the
editor raises propagates to the caller unchanged.
"""

from pathlib import Path
from typing import Optional, Protocol, Union

from .catalog import SerializationFormat
from .menus import (
    DirectoryRoot,
    EmptySlotLeaf,
    ExportRoot,
    FileLeaf,
    ImportRoot,
    LeafAction,
    MenuLeaf,
    MenuRoot,
)
from ..logging_config import get_logger

logger = get_logger("dispatch")


class DispatchError(Exception):
    """Raised when an item cannot be dispatched"""
    pass


class Editor(Protocol):
    """Load/save target for dispatched actions."""

    def load(self, path: Path) -> None:
        ...

    def save(self, path: Path, format: SerializationFormat) -> None:
        ...


class FilePicker(Protocol):
    """Native file pickers used by Import and Export."""

    def ask_open_path(self) -> Optional[Path]:
        """Return the chosen file, or None if cancelled."""
        ...

    def ask_save_target(self) -> Optional[tuple[Path, SerializationFormat]]:
        """Return the chosen destination and format, or None if cancelled."""
        ...


class DispatchRouter:
    """Route menu selections to editor load/save operations."""

    def __init__(self, editor: Editor, picker: Optional[FilePicker] = None):
        self.editor = editor
        self.picker = picker

    def activate(self, item: Union[MenuLeaf, MenuRoot]) -> bool:
        """Perform the action of a menu item.

        Args:
            item: A leaf, or an Import/Export root

        Returns:
            True if a load or save was dispatched, False for a no-op
            (directory root, cancelled picker)

        Raises:
            DispatchError: If Import/Export is activated without a picker
        """
        if isinstance(item, FileLeaf):
            if item.action is LeafAction.LOAD:
                return self._load(item.path)
            return self._save(item.path, item.format)

        if isinstance(item, EmptySlotLeaf):
            return self._save(item.path, SerializationFormat.SLOT)

        if isinstance(item, ImportRoot):
            path = self._require_picker().ask_open_path()
            if path is None:
                logger.debug("Import cancelled")
                return False
            return self._load(path)

        if isinstance(item, ExportRoot):
            target = self._require_picker().ask_save_target()
            if target is None:
                logger.debug("Export cancelled")
                return False
            path, fmt = target
            return self._save(path, fmt)

        if isinstance(item, DirectoryRoot):
            return False

        raise DispatchError(f"Unknown menu item: {item!r}")

    def _require_picker(self) -> FilePicker:
        if self.picker is None:
            raise DispatchError("No file picker configured")
        return self.picker

    def _load(self, path: Path) -> bool:
        logger.info("Loading %s", path)
        self.editor.load(path)
        return True

    def _save(self, path: Path, fmt: SerializationFormat) -> bool:
        logger.info("Saving %s as %s", path, fmt.name)
        self.editor.save(path, fmt)
        return True
