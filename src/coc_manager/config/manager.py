"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import AppPaths
from .schema import AppConfiguration, Settings
from ..core.catalog import SerializationFormat
from ..logging_config import get_logger

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving configuration to XML format.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or AppPaths.CONFIG_FILE
        self.config: Optional[AppConfiguration] = None

    def load(self) -> AppConfiguration:
        """Load configuration from XML file.

        Returns:
            AppConfiguration object with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ET.ParseError: If XML is malformed
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        tree = ET.parse(self.config_path)
        root = tree.getroot()

        settings_elem = root.find("Settings")
        if settings_elem is not None:
            settings = Settings(
                last_import_dir=self._parse_path(settings_elem, "LastImportDir"),
                last_export_dir=self._parse_path(settings_elem, "LastExportDir"),
                export_format=self._parse_format(settings_elem, "ExportFormat"),
            )
        else:
            # Missing Settings element - use all defaults
            settings = Settings()

        self.config = AppConfiguration(settings=settings)
        return self.config

    def load_or_default(self) -> AppConfiguration:
        """Load configuration, falling back to defaults.

        Returns:
            Loaded configuration, or a default one if the file is
            missing or corrupted
        """
        if not self.config_path.exists():
            return self.create_default()

        try:
            return self.load()
        except (ET.ParseError, OSError) as e:
            # Corrupted config = start from defaults
            logger.warning(f"Could not load config, using defaults: {e}")
            return self.create_default()

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        if self.config is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        settings = self.config.settings
        root = ET.Element("CoCManager", version="1.0")

        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "LastImportDir").text = str(settings.last_import_dir) if settings.last_import_dir else ""
        ET.SubElement(settings_elem, "LastExportDir").text = str(settings.last_export_dir) if settings.last_export_dir else ""
        ET.SubElement(settings_elem, "ExportFormat").text = settings.export_format.name.lower()

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.config_path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> AppConfiguration:
        """Create a default configuration.

        Returns:
            New AppConfiguration with default values
        """
        self.config = AppConfiguration(settings=Settings())
        return self.config

    # Helper methods for XML parsing
    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return AppPaths.expand_path(elem.text.strip())
        return None

    @staticmethod
    def _parse_format(parent: ET.Element, tag: str) -> SerializationFormat:
        """Parse a serialization format name from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text:
            try:
                return SerializationFormat[elem.text.strip().upper()]
            except KeyError:
                logger.warning(f"Unknown export format '{elem.text}', using slot")
        return SerializationFormat.SLOT
