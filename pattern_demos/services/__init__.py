"""Services package."""

from pattern_demos.services.storage import (
    CatalogStorageInterface,
    FlatFileCatalogStorage,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

__all__ = [
    "CatalogStorageInterface",
    "FlatFileCatalogStorage",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
]
