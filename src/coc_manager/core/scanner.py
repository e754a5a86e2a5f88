"""Discovery of save files in Flash shared-object directories.

Flash keeps shared objects under a per-install random directory:

    #SharedObjects/
        ABCD1234/
            localhost/
                CoC_1.sol
                CoC_2.sol
            www.fenoxo.com/
                CoC_1.sol

Each known location becomes one DirectoryCatalog. Files imported by the
user during the session are listed in a final "External" catalog.

The save body is not decoded here. The default reader only checks the
shared-object header to tell slot files from exported ones; damaged
files are flagged instead of dropped.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..config.paths import AppPaths
from ..logging_config import get_logger
from .catalog import DirectoryCatalog, FileCatalogEntry, SerializationFormat
from .slots import SLOT_EXTENSION, slot_number

logger = get_logger("scanner")

EXTERNAL_NAME = "External"

# Flash shared object header: 0x00 0xBF, 4-byte length, "TCSO"
_SOL_MAGIC = b"\x00\xbf"
_SOL_SIGNATURE = b"TCSO"

EntryReader = Callable[[Path], FileCatalogEntry]


def read_entry(file_path: Path) -> FileCatalogEntry:
    """Build a catalog entry for a save file.

    The format comes from the header: a shared-object header means a slot
    file, anything else is an exported file. Unreadable, empty and
    truncated files still get an entry, with error_text describing the
    problem.

    Args:
        file_path: Path to the save file

    Returns:
        FileCatalogEntry for the file
    """
    try:
        with open(file_path, "rb") as f:
            header = f.read(10)
        capture_date = datetime.fromtimestamp(file_path.stat().st_mtime)
    except OSError as e:
        logger.warning("Error reading save %s: %s", file_path, e)
        # Header unknown, guess from the name
        fmt = SerializationFormat.SLOT if slot_number(file_path) else SerializationFormat.EXPORTED
        return FileCatalogEntry(
            file_path=file_path,
            display_name=file_path.stem,
            format=fmt,
            error_text=str(e),
        )

    error_text = ""
    if not header:
        fmt = SerializationFormat.EXPORTED
        error_text = "Empty file"
        logger.warning("Empty save file %s", file_path)
    elif header.startswith(_SOL_MAGIC):
        fmt = SerializationFormat.SLOT
        if len(header) < 10 or header[6:10] != _SOL_SIGNATURE:
            error_text = "Truncated shared object header"
            logger.warning("Truncated save header in %s", file_path)
    else:
        fmt = SerializationFormat.EXPORTED

    return FileCatalogEntry(
        file_path=file_path,
        display_name=file_path.stem,
        capture_date=capture_date,
        format=fmt,
        error_text=error_text,
    )


class SaveSource:
    """A managed location that may contain slot saves.

    Args:
        name: Label shown as the menu root
        root: #SharedObjects directory to search
        host: Host directory name under the random install directory
        has_separator_before: Draw a divider before this group
    """

    def __init__(self, name: str, root: Path, host: str, has_separator_before: bool = False):
        self.name = name
        self.root = root
        self.host = host
        self.has_separator_before = has_separator_before

    def locate(self) -> Optional[Path]:
        """Find the host directory under the shared-objects root.

        Returns:
            First matching directory in name order, or None if not found
        """
        if not self.root.is_dir():
            return None

        candidates = sorted(p for p in self.root.glob(f"*/{self.host}") if p.is_dir())
        return candidates[0] if candidates else None

    def __repr__(self) -> str:
        return f"SaveSource({self.name!r}, {self.root!r}, {self.host!r})"


def default_sources() -> list[SaveSource]:
    """Get the standard game save locations."""
    return [
        SaveSource("Local", AppPaths.FLASH_SHARED_OBJECTS, AppPaths.LOCAL_HOST),
        SaveSource("Online", AppPaths.FLASH_SHARED_OBJECTS, AppPaths.ONLINE_HOST),
        SaveSource("Chrome", AppPaths.CHROME_SHARED_OBJECTS, AppPaths.LOCAL_HOST),
    ]


class SaveScanner:
    """Produce directory catalogs from save locations and session imports."""

    def __init__(
        self,
        sources: Optional[Iterable[SaveSource]] = None,
        reader: EntryReader = read_entry,
    ):
        self.sources = list(sources) if sources is not None else default_sources()
        self.reader = reader
        self._imported: list[Path] = []

    @property
    def imported_paths(self) -> list[Path]:
        return list(self._imported)

    def import_file(self, file_path: Path) -> None:
        """Remember an external file for the rest of the session.

        Args:
            file_path: File chosen by the user
        """
        file_path = Path(file_path)
        if file_path in self._imported:
            return
        self._imported.append(file_path)
        logger.info("Imported external file %s", file_path)

    def scan(self) -> list[DirectoryCatalog]:
        """Scan all sources.

        Returns:
            One catalog per source followed by the external catalog
        """
        catalogs = [self._scan_source(source) for source in self.sources]
        catalogs.append(self._scan_external())
        logger.debug(
            "Scan complete: %d catalogs, %d files",
            len(catalogs),
            sum(len(c.files) for c in catalogs),
        )
        return catalogs

    def _scan_source(self, source: SaveSource) -> DirectoryCatalog:
        directory = source.locate()
        if directory is None:
            logger.debug("Save directory not found for %s", source.name)
            return DirectoryCatalog(
                name=source.name,
                path=None,
                has_separator_before=source.has_separator_before,
            )

        files = sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() == SLOT_EXTENSION
        )
        return DirectoryCatalog(
            name=source.name,
            path=directory,
            has_separator_before=source.has_separator_before,
            files=tuple(self.reader(p) for p in files),
        )

    def _scan_external(self) -> DirectoryCatalog:
        existing = [p for p in self._imported if p.is_file()]
        return DirectoryCatalog(
            name=EXTERNAL_NAME,
            path=None,
            is_external=True,
            has_separator_before=True,
            files=tuple(self.reader(p) for p in existing),
        )
