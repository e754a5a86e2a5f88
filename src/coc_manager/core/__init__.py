"""Core business logic module.

This module contains save discovery, slot reconciliation and the menu model.

Submodules:
    catalog: FileCatalogEntry, DirectoryCatalog and SerializationFormat
    slots: Slot resolver mapping catalog files onto Coc_1.sol .. Coc_10.sol
    menus: Open/Save menu assembly with presentation hints
    dispatch: DispatchRouter turning a selected menu item into load/save calls
    scanner: SaveScanner producing catalogs from disk and session imports
    editor: SaveBuffer, the load/save target used by the application

Only the catalog types are re-exported here; the other submodules depend on
logging_config and are imported directly.
"""

from .catalog import CatalogError, DirectoryCatalog, FileCatalogEntry, SerializationFormat

__all__ = [
    "CatalogError",
    "DirectoryCatalog",
    "FileCatalogEntry",
    "SerializationFormat",
]
