"""Open and Save menu assembly.

Both menus are built from the catalogs of one scan. Roots are a closed set
of variants (DirectoryRoot, ImportRoot, ExportRoot) and so are leaves
(FileLeaf, EmptySlotLeaf). Items are plain data; acting on them is the job
of DispatchRouter.

Open menu:
    One root per catalog listing every file as a load leaf, hidden when the
    catalog is empty, followed by Import.

Save menu:
    One root per catalog. External catalogs list their files, managed
    catalogs list the ten slots, catalogs without a directory list nothing.
    Followed by Export.

Assembly performs no I/O and may be repeated over the same catalogs.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from .catalog import DirectoryCatalog, FileCatalogEntry, SerializationFormat
from .slots import EmptySlot, resolve
from ..logging_config import get_logger

logger = get_logger("menus")

IMPORT_LABEL = "Import"
EXPORT_LABEL = "Export"


class LeafAction(Enum):
    """What activating a leaf does"""
    LOAD = "load"
    SAVE = "save"


def format_elapsed(capture_date: datetime, now: datetime) -> str:
    """Describe how long ago a save was made.

    Args:
        capture_date: When the save was made
        now: Reference time

    Returns:
        'N days ago', 'N hours ago', 'N minutes ago' or '1 minute ago'
    """
    seconds = (now - capture_date).total_seconds()
    if seconds / 86400 > 1:
        return f"{int(seconds / 86400)} days ago"
    if seconds / 3600 > 1:
        return f"{int(seconds / 3600)} hours ago"
    if seconds / 60 > 1:
        return f"{int(seconds / 60)} minutes ago"
    return "1 minute ago"


@dataclass(frozen=True)
class FileLeaf:
    """A leaf bound to an existing save file."""
    entry: FileCatalogEntry
    action: LeafAction
    label: str
    sub_label: str = ""
    has_error: bool = False
    is_muted: bool = False

    @property
    def path(self) -> Path:
        return self.entry.file_path

    @property
    def format(self) -> SerializationFormat:
        return self.entry.format


@dataclass(frozen=True)
class EmptySlotLeaf:
    """A save leaf bound to an unoccupied slot."""
    slot: EmptySlot
    sub_label: str = ""
    has_error: bool = False
    is_muted: bool = True

    @property
    def label(self) -> str:
        return self.slot.label

    @property
    def action(self) -> LeafAction:
        return LeafAction.SAVE

    @property
    def path(self) -> Path:
        return self.slot.path

    @property
    def format(self) -> SerializationFormat:
        return SerializationFormat.SLOT


MenuLeaf = Union[FileLeaf, EmptySlotLeaf]


@dataclass(frozen=True)
class DirectoryRoot:
    """A menu group backed by one catalog."""
    catalog: DirectoryCatalog
    children: tuple[MenuLeaf, ...]
    is_visible: bool
    is_muted: bool = False

    @property
    def label(self) -> str:
        return self.catalog.name

    @property
    def has_separator_before(self) -> bool:
        return self.catalog.has_separator_before


@dataclass(frozen=True)
class ImportRoot:
    """Load from a path chosen in a file picker."""
    label: str = IMPORT_LABEL
    children: tuple = ()
    is_visible: bool = True
    is_muted: bool = False
    has_separator_before: bool = False


@dataclass(frozen=True)
class ExportRoot:
    """Save to a path and format chosen in a file picker."""
    label: str = EXPORT_LABEL
    children: tuple = ()
    is_visible: bool = True
    is_muted: bool = False
    has_separator_before: bool = False


MenuRoot = Union[DirectoryRoot, ImportRoot, ExportRoot]


def file_leaf(
    entry: FileCatalogEntry,
    action: LeafAction,
    is_external: bool,
    now: datetime,
) -> FileLeaf:
    """Build the leaf for a discovered file.

    Entries that failed to parse show their raw filename and no sub label.

    Args:
        entry: The catalog entry
        action: LOAD for the open menu, SAVE for the save menu
        is_external: True if the entry comes from an external catalog
        now: Reference time for the elapsed text

    Returns:
        FileLeaf with presentation fields filled in
    """
    if entry.has_error:
        return FileLeaf(entry=entry, action=action, label=entry.filename, has_error=True)

    label = entry.file_path.stem if is_external else entry.display_name
    parts = [entry.short, f"{entry.days} days"]
    if entry.capture_date is not None:
        parts.append(format_elapsed(entry.capture_date, now))

    return FileLeaf(
        entry=entry,
        action=action,
        label=label,
        sub_label=" - ".join(parts),
    )


def _open_root(catalog: DirectoryCatalog, now: datetime) -> DirectoryRoot:
    children = tuple(
        file_leaf(entry, LeafAction.LOAD, catalog.is_external, now)
        for entry in catalog.files
    )
    return DirectoryRoot(
        catalog=catalog,
        children=children,
        is_visible=catalog.has_files,
    )


def _save_children(catalog: DirectoryCatalog, now: datetime) -> tuple[MenuLeaf, ...]:
    if catalog.is_external:
        return tuple(
            file_leaf(entry, LeafAction.SAVE, True, now)
            for entry in catalog.files
        )

    # Directory not found
    if not catalog.has_path:
        return ()

    leaves: list[MenuLeaf] = []
    for view in resolve(catalog):
        if view.entry is not None:
            leaves.append(file_leaf(view.entry, LeafAction.SAVE, False, now))
        else:
            leaves.append(EmptySlotLeaf(slot=view.empty))
    return tuple(leaves)


def _save_root(catalog: DirectoryCatalog, now: datetime) -> DirectoryRoot:
    return DirectoryRoot(
        catalog=catalog,
        children=_save_children(catalog, now),
        is_visible=catalog.has_files or catalog.has_path,
        is_muted=not catalog.has_files,
    )


def build_open_menu(
    catalogs: Iterable[DirectoryCatalog],
    now: Optional[datetime] = None,
) -> list[MenuRoot]:
    """Build the roots of the Open menu.

    Args:
        catalogs: Scanned catalogs in display order
        now: Reference time for elapsed text, defaults to the current time

    Returns:
        One DirectoryRoot per catalog followed by ImportRoot
    """
    now = now or datetime.now()
    roots: list[MenuRoot] = [_open_root(catalog, now) for catalog in catalogs]
    roots.append(ImportRoot())
    logger.debug("Built open menu with %d roots", len(roots))
    return roots


def build_save_menu(
    catalogs: Iterable[DirectoryCatalog],
    now: Optional[datetime] = None,
) -> list[MenuRoot]:
    """Build the roots of the Save menu.

    Args:
        catalogs: Scanned catalogs in display order
        now: Reference time for elapsed text, defaults to the current time

    Returns:
        One DirectoryRoot per catalog followed by ExportRoot
    """
    now = now or datetime.now()
    roots: list[MenuRoot] = [_save_root(catalog, now) for catalog in catalogs]
    roots.append(ExportRoot())
    logger.debug("Built save menu with %d roots", len(roots))
    return roots
