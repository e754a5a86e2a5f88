"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from coc_manager.core.catalog import DirectoryCatalog, FileCatalogEntry, SerializationFormat

# Header of a Flash shared object: magic, length, signature
SOL_HEADER = b"\x00\xbf\x00\x00\x00\x20TCSO\x00\x04\x00\x00\x00\x00"

NOW = datetime(2026, 10, 18, 12, 0, 0)


# ---------------------------------------------------------------------------
# Catalog Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_entry():
    """Factory for catalog entries."""
    def _make(
        path,
        display_name: str = "Champion",
        capture_date: datetime | None = NOW,
        format: SerializationFormat = SerializationFormat.SLOT,
        error_text: str = "",
        short: str = "",
        days: str = "",
    ) -> FileCatalogEntry:
        return FileCatalogEntry(
            file_path=Path(path),
            display_name=display_name,
            capture_date=capture_date,
            format=format,
            error_text=error_text,
            short=short,
            days=days,
        )
    return _make


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "localhost"
    directory.mkdir()
    return directory


@pytest.fixture
def managed_catalog(save_dir: Path, make_entry) -> DirectoryCatalog:
    """Managed catalog with slots 3 and 7 occupied plus one foreign file."""
    return DirectoryCatalog(
        name="Local",
        path=save_dir,
        files=(
            make_entry(save_dir / "CoC_3.sol", display_name="Slot three"),
            make_entry(save_dir / "notes.sol", display_name="Notes"),
            make_entry(save_dir / "CoC_7.sol", display_name="Slot seven"),
        ),
    )


@pytest.fixture
def external_catalog(tmp_path: Path, make_entry) -> DirectoryCatalog:
    return DirectoryCatalog(
        name="External",
        path=None,
        is_external=True,
        has_separator_before=True,
        files=(
            make_entry(tmp_path / "backups" / "my_hero.sol", display_name="Hero",
                       format=SerializationFormat.EXPORTED),
        ),
    )


def write_sol(path: Path, body: bytes = b"") -> Path:
    """Write a file with a valid shared-object header."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(SOL_HEADER + body)
    return path


@pytest.fixture(name="write_sol")
def write_sol_fixture():
    return write_sol
