"""Catalog data models for discovered save files.

A scan produces one DirectoryCatalog per save location. Each catalog holds
the FileCatalogEntry records found there, in scan order. Catalogs are
immutable and rebuilt from scratch on every scan.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class CatalogError(ValueError):
    """Raised when a catalog would break its one-entry-per-path invariant"""
    pass


class SerializationFormat(Enum):
    """Format a save file must be written back in.

    Values match the 1-based filter index of the Export file picker.
    """
    SLOT = 1
    EXPORTED = 2

    @classmethod
    def from_filter_index(cls, index: int) -> "SerializationFormat":
        """Map a picker filter index to a format.

        Args:
            index: 1-based filter index reported by the save dialog

        Returns:
            The matching format, EXPORTED for any unknown index
        """
        for fmt in cls:
            if fmt.value == index:
                return fmt
        return cls.EXPORTED

    @classmethod
    def from_filter_name(cls, filter_name: str, path: Path) -> "SerializationFormat":
        """Map the filter chosen in the Export picker to a format.

        Falls back to the extension when the platform does not report
        the filter.

        Args:
            filter_name: Filter label reported by the save dialog, may be empty
            path: Chosen destination

        Returns:
            The matching format
        """
        for index, (name, _pattern) in enumerate(EXPORT_FILETYPES, start=1):
            if name == filter_name:
                return cls.from_filter_index(index)
        if path.suffix.lower() == ".sol":
            return cls.SLOT
        return cls.EXPORTED

    @property
    def filter_name(self) -> str:
        return EXPORT_FILETYPES[self.value - 1][0]


# Export picker filters; the 1-based position is the SerializationFormat value
EXPORT_FILETYPES = [
    ("CoC slot (.sol)", "*.sol"),
    ("CoC exported file", "*.*"),
]


@dataclass(frozen=True)
class FileCatalogEntry:
    """One discovered save file."""
    file_path: Path
    display_name: str
    capture_date: Optional[datetime] = None
    format: SerializationFormat = SerializationFormat.SLOT
    error_text: str = ""  # Empty when the file parsed cleanly
    short: str = ""  # Short character description
    days: str = ""  # In-game days elapsed

    @property
    def filename(self) -> str:
        return self.file_path.name

    @property
    def has_error(self) -> bool:
        return bool(self.error_text)


@dataclass(frozen=True)
class DirectoryCatalog:
    """A named save location and the entries found in it.

    A path of None means the directory was not found or the source has no
    fixed backing directory (external imports).
    """
    name: str
    path: Optional[Path] = None
    is_external: bool = False
    has_separator_before: bool = False
    files: tuple[FileCatalogEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of entries but store a tuple
        object.__setattr__(self, "files", tuple(self.files))

        seen: set[Path] = set()
        for entry in self.files:
            if entry.file_path in seen:
                raise CatalogError(
                    f"Duplicate entry for {entry.file_path} in catalog '{self.name}'"
                )
            seen.add(entry.file_path)

    @property
    def has_files(self) -> bool:
        return len(self.files) != 0

    @property
    def has_path(self) -> bool:
        return self.path is not None
