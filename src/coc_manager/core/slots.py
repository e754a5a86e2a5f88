"""Slot resolution for managed save directories.

The game stores its saves in ten fixed slots named Coc_1.sol .. Coc_10.sol.
A managed directory is reconciled against those slots: each slot is bound
either to the file already occupying it or to an EmptySlot placeholder
carrying the path a new save would be written to.

Matching is a case-insensitive suffix match on the full file path. When two
files end with the same slot name the first one in catalog order wins.
Files matching no slot are not part of the slot view.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .catalog import DirectoryCatalog, FileCatalogEntry, SerializationFormat
from ..logging_config import get_logger

logger = get_logger("slots")

SLOT_COUNT = 10
SLOT_PREFIX = "Coc_"
SLOT_EXTENSION = ".sol"


def slot_label(number: int) -> str:
    """Get the label for a slot (e.g., 'Coc_3')."""
    return f"{SLOT_PREFIX}{number}"


def slot_filename(number: int) -> str:
    """Get the canonical filename for a slot (e.g., 'Coc_3.sol')."""
    return f"{slot_label(number)}{SLOT_EXTENSION}"


def _matches_slot(path: Path | str, number: int) -> bool:
    return str(path).lower().endswith(slot_filename(number).lower())


def slot_number(path: Path | str) -> Optional[int]:
    """Get the slot a file path occupies.

    Args:
        path: Path of a save file

    Returns:
        Slot number 1..10, or None if the path matches no slot
    """
    for number in range(1, SLOT_COUNT + 1):
        if _matches_slot(path, number):
            return number
    return None


@dataclass(frozen=True)
class EmptySlot:
    """Placeholder for a slot with no file in the directory yet."""
    number: int
    path: Path
    label: str

    @property
    def is_occupied(self) -> bool:
        return False

    @property
    def format(self) -> SerializationFormat:
        return SerializationFormat.SLOT


@dataclass(frozen=True)
class SlotView:
    """A slot bound to either an existing entry or an EmptySlot."""
    number: int
    entry: Optional[FileCatalogEntry] = None
    empty: Optional[EmptySlot] = None

    def __post_init__(self):
        if (self.entry is None) == (self.empty is None):
            raise ValueError("SlotView needs exactly one of entry or empty")

    @property
    def is_occupied(self) -> bool:
        return self.entry is not None

    @property
    def path(self) -> Path:
        if self.entry is not None:
            return self.entry.file_path
        return self.empty.path

    @property
    def format(self) -> SerializationFormat:
        if self.entry is not None:
            return self.entry.format
        return self.empty.format

    @property
    def label(self) -> str:
        if self.entry is not None:
            return self.entry.display_name
        return self.empty.label


def resolve(catalog: DirectoryCatalog) -> tuple[SlotView, ...]:
    """Compute the ten-slot view of a managed directory.

    Args:
        catalog: A non-external catalog with a directory path

    Returns:
        Ten SlotView objects ordered by slot number

    Raises:
        ValueError: If the catalog is external or has no path
    """
    if catalog.is_external:
        raise ValueError(f"Catalog '{catalog.name}' is external and has no slots")
    if not catalog.has_path:
        raise ValueError(f"Catalog '{catalog.name}' has no directory path")

    views = []
    for number in range(1, SLOT_COUNT + 1):
        entry = next(
            (f for f in catalog.files if _matches_slot(f.file_path, number)),
            None,
        )
        if entry is not None:
            views.append(SlotView(number=number, entry=entry))
        else:
            views.append(SlotView(
                number=number,
                empty=EmptySlot(
                    number=number,
                    path=catalog.path / slot_filename(number),
                    label=slot_label(number),
                ),
            ))

    occupied = sum(1 for v in views if v.is_occupied)
    logger.debug("Resolved %s: %d of %d slots occupied", catalog.name, occupied, SLOT_COUNT)
    return tuple(views)
