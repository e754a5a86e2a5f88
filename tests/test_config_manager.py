"""Tests for XML settings persistence."""

import pytest

from coc_manager.config.manager import ConfigurationManager
from coc_manager.core.catalog import SerializationFormat


class TestConfigurationManager:

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigurationManager(tmp_path / "configuration.xml")

        config = manager.load_or_default()

        assert config.settings.last_import_dir is None
        assert config.settings.export_format is SerializationFormat.SLOT

    def test_save_and_load(self, tmp_path):
        config_path = tmp_path / "cfg" / "configuration.xml"
        manager = ConfigurationManager(config_path)
        settings = manager.create_default().settings
        settings.last_import_dir = tmp_path / "imports"
        settings.last_export_dir = tmp_path / "exports"
        settings.export_format = SerializationFormat.EXPORTED
        manager.save()

        loaded = ConfigurationManager(config_path).load().settings

        assert loaded.last_import_dir == tmp_path / "imports"
        assert loaded.last_export_dir == tmp_path / "exports"
        assert loaded.export_format is SerializationFormat.EXPORTED

    def test_corrupted_file_gives_defaults(self, tmp_path):
        config_path = tmp_path / "configuration.xml"
        config_path.write_text("<CoCManager><Settings>", encoding="utf-8")

        config = ConfigurationManager(config_path).load_or_default()

        assert config.settings.last_export_dir is None

    def test_unknown_format_falls_back_to_slot(self, tmp_path):
        config_path = tmp_path / "configuration.xml"
        config_path.write_text(
            "<CoCManager><Settings><ExportFormat>zip</ExportFormat></Settings></CoCManager>",
            encoding="utf-8",
        )

        settings = ConfigurationManager(config_path).load().settings

        assert settings.export_format is SerializationFormat.SLOT
        assert settings.last_import_dir is None

    def test_missing_settings_element(self, tmp_path):
        config_path = tmp_path / "configuration.xml"
        config_path.write_text("<CoCManager/>", encoding="utf-8")

        settings = ConfigurationManager(config_path).load().settings

        assert settings.export_format is SerializationFormat.SLOT

    def test_save_without_config_raises(self, tmp_path):
        with pytest.raises(ValueError):
            ConfigurationManager(tmp_path / "configuration.xml").save()
