"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.catalog import SerializationFormat


@dataclass
class Settings:
    """Application settings.

    Only picker state is remembered between sessions; the set of scanned
    save directories is fixed by the scanner.
    """
    last_import_dir: Optional[Path] = None
    last_export_dir: Optional[Path] = None
    export_format: SerializationFormat = SerializationFormat.SLOT


@dataclass
class AppConfiguration:
    """Complete application configuration"""
    settings: Settings = field(default_factory=Settings)
