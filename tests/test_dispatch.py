"""Tests for the dispatch router."""

from pathlib import Path

import pytest

from coc_manager.core.catalog import SerializationFormat
from coc_manager.core.dispatch import DispatchError, DispatchRouter
from coc_manager.core.menus import (
    EmptySlotLeaf,
    ExportRoot,
    FileLeaf,
    ImportRoot,
    build_open_menu,
    build_save_menu,
)


class RecordingEditor:
    """Editor that records calls and optionally fails."""

    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    def load(self, path):
        self.calls.append(("load", path))
        if self.error:
            raise self.error

    def save(self, path, format):
        self.calls.append(("save", path, format))
        if self.error:
            raise self.error


class StubPicker:
    def __init__(self, open_path=None, save_target=None):
        self.open_path = open_path
        self.save_target = save_target

    def ask_open_path(self):
        return self.open_path

    def ask_save_target(self):
        return self.save_target


@pytest.fixture
def editor():
    return RecordingEditor()


class TestLeafDispatch:

    def test_open_leaf_loads(self, editor, managed_catalog, now):
        leaf = build_open_menu([managed_catalog], now)[0].children[0]

        assert DispatchRouter(editor).activate(leaf) is True
        assert editor.calls == [("load", managed_catalog.files[0].file_path)]

    def test_existing_slot_saves_with_entry_format(self, editor, managed_catalog, now):
        leaf = build_save_menu([managed_catalog], now)[0].children[2]
        assert isinstance(leaf, FileLeaf)

        DispatchRouter(editor).activate(leaf)

        assert editor.calls == [("save", managed_catalog.files[0].file_path, SerializationFormat.SLOT)]

    def test_external_file_saves_with_its_format(self, editor, external_catalog, now):
        leaf = build_save_menu([external_catalog], now)[0].children[0]

        DispatchRouter(editor).activate(leaf)

        assert editor.calls == [("save", external_catalog.files[0].file_path, SerializationFormat.EXPORTED)]

    def test_empty_slot_saves_as_slot(self, editor, managed_catalog, save_dir, now):
        leaf = build_save_menu([managed_catalog], now)[0].children[0]
        assert isinstance(leaf, EmptySlotLeaf)

        DispatchRouter(editor).activate(leaf)

        assert editor.calls == [("save", save_dir / "Coc_1.sol", SerializationFormat.SLOT)]

    def test_directory_root_is_noop(self, editor, managed_catalog, now):
        root = build_open_menu([managed_catalog], now)[0]

        assert DispatchRouter(editor).activate(root) is False
        assert editor.calls == []

    def test_unknown_item_rejected(self, editor):
        with pytest.raises(DispatchError):
            DispatchRouter(editor).activate("Coc_1.sol")


class TestPickerDispatch:

    def test_import_loads_chosen_path(self, editor):
        picker = StubPicker(open_path=Path("/saves/hero.sol"))

        assert DispatchRouter(editor, picker).activate(ImportRoot()) is True
        assert editor.calls == [("load", Path("/saves/hero.sol"))]

    def test_cancelled_import_is_noop(self, editor):
        assert DispatchRouter(editor, StubPicker()).activate(ImportRoot()) is False
        assert editor.calls == []

    def test_export_saves_with_chosen_format(self, editor):
        picker = StubPicker(save_target=(Path("/saves/hero.txt"), SerializationFormat.EXPORTED))

        assert DispatchRouter(editor, picker).activate(ExportRoot()) is True
        assert editor.calls == [("save", Path("/saves/hero.txt"), SerializationFormat.EXPORTED)]

    def test_cancelled_export_is_noop(self, editor):
        assert DispatchRouter(editor, StubPicker()).activate(ExportRoot()) is False
        assert editor.calls == []

    def test_picker_required(self, editor):
        with pytest.raises(DispatchError):
            DispatchRouter(editor).activate(ImportRoot())
        with pytest.raises(DispatchError):
            DispatchRouter(editor).activate(ExportRoot())


class TestFailures:

    def test_editor_errors_propagate(self, managed_catalog, now):
        editor = RecordingEditor(error=OSError("disk full"))
        leaf = build_save_menu([managed_catalog], now)[0].children[0]

        with pytest.raises(OSError, match="disk full"):
            DispatchRouter(editor).activate(leaf)
        assert len(editor.calls) == 1

    def test_failure_leaves_menus_intact(self, managed_catalog, now):
        before = build_save_menu([managed_catalog], now)
        editor = RecordingEditor(error=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            DispatchRouter(editor).activate(before[0].children[0])

        assert build_save_menu([managed_catalog], now) == before
