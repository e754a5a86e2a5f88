"""Tests for catalog data models."""

import pytest

from coc_manager.core.catalog import (
    EXPORT_FILETYPES,
    CatalogError,
    DirectoryCatalog,
    SerializationFormat,
)


class TestSerializationFormat:

    def test_filter_index_mapping(self):
        assert SerializationFormat.from_filter_index(1) is SerializationFormat.SLOT
        assert SerializationFormat.from_filter_index(2) is SerializationFormat.EXPORTED

    def test_unknown_filter_index_is_exported(self):
        assert SerializationFormat.from_filter_index(7) is SerializationFormat.EXPORTED

    @pytest.mark.parametrize("filter_name,filename,expected", [
        ("CoC slot (.sol)", "hero.sol", SerializationFormat.SLOT),
        ("CoC slot (.sol)", "hero.txt", SerializationFormat.SLOT),
        ("CoC exported file", "hero.sol", SerializationFormat.EXPORTED),
        ("CoC exported file", "hero.coc", SerializationFormat.EXPORTED),
    ])
    def test_filter_name_mapping(self, tmp_path, filter_name, filename, expected):
        assert SerializationFormat.from_filter_name(filter_name, tmp_path / filename) is expected

    @pytest.mark.parametrize("filename,expected", [
        ("hero.sol", SerializationFormat.SLOT),
        ("HERO.SOL", SerializationFormat.SLOT),
        ("hero.coc", SerializationFormat.EXPORTED),
        ("hero", SerializationFormat.EXPORTED),
    ])
    def test_unreported_filter_falls_back_to_extension(self, tmp_path, filename, expected):
        assert SerializationFormat.from_filter_name("", tmp_path / filename) is expected

    def test_filter_names_match_filetypes(self):
        assert [fmt.filter_name for fmt in SerializationFormat] == [name for name, _ in EXPORT_FILETYPES]


class TestFileCatalogEntry:

    def test_error_flag(self, tmp_path, make_entry):
        assert not make_entry(tmp_path / "Coc_1.sol").has_error
        assert make_entry(tmp_path / "Coc_1.sol", error_text="bad header").has_error

    def test_entries_are_immutable(self, tmp_path, make_entry):
        entry = make_entry(tmp_path / "Coc_1.sol")
        with pytest.raises(AttributeError):
            entry.display_name = "Other"


class TestDirectoryCatalog:

    def test_files_stored_as_tuple(self, tmp_path, make_entry):
        catalog = DirectoryCatalog(name="Local", path=tmp_path, files=[make_entry(tmp_path / "Coc_1.sol")])

        assert isinstance(catalog.files, tuple)
        assert catalog.has_files
        assert catalog.has_path

    def test_duplicate_paths_rejected(self, tmp_path, make_entry):
        entry = make_entry(tmp_path / "Coc_1.sol")
        with pytest.raises(CatalogError):
            DirectoryCatalog(name="Local", path=tmp_path, files=(entry, entry))

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)

    def test_missing_directory(self):
        catalog = DirectoryCatalog(name="Chrome")

        assert not catalog.has_path
        assert not catalog.has_files
        assert not catalog.is_external
