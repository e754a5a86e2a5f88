"""In-memory save buffer used as the load/save target.

SaveBuffer holds the raw bytes of the last loaded save so it can be
written to another slot or exported. Converting between slot and exported
encodings belongs to the save codec and is not done here; the requested
format is recorded with each write.
"""

from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .catalog import SerializationFormat

logger = get_logger("editor")


class EditorError(Exception):
    """Exception raised for load/save failures"""
    pass


class SaveBuffer:
    """Holds one loaded save file.

    save() writes the loaded bytes unchanged whatever format is requested:
    exporting does not re-encode a slot file and saving to a slot does not
    re-encode an exported file. The format is only recorded in last_saved
    and the log.
    """

    def __init__(self):
        self.data: Optional[bytes] = None
        self.source_path: Optional[Path] = None
        self.last_saved: Optional[tuple[Path, SerializationFormat]] = None

    @property
    def is_loaded(self) -> bool:
        return self.data is not None

    def load(self, path: Path) -> None:
        """Read a save file into the buffer.

        Args:
            path: File to load

        Raises:
            EditorError: If the file cannot be read
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error("Failed to load %s: %s", path, e)
            raise EditorError(f"Failed to load {path.name}: {e}") from e

        self.data = data
        self.source_path = path
        logger.info("Loaded %s (%d bytes)", path, len(data))

    def save(self, path: Path, format: SerializationFormat) -> None:
        """Write the buffer to a file.

        Args:
            path: Destination file, parent directories are created
            format: Requested format, recorded but not applied

        Raises:
            EditorError: If nothing is loaded or the write fails
        """
        if self.data is None:
            raise EditorError("No save loaded")

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.data)
        except OSError as e:
            logger.error("Failed to save %s: %s", path, e)
            raise EditorError(f"Failed to save {path.name}: {e}") from e

        self.last_saved = (path, format)
        logger.info("Saved %s as %s", path, format.name)
