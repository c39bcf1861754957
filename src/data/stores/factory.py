"""Pick a store backend from settings."""

from typing import Optional

from ...config.settings import Settings, settings as default_settings
from .base import ConfigStore, StoreError
from .duckdb_store import DuckDBConfigStore
from .ini_store import IniConfigStore


def open_store(settings: Optional[Settings] = None) -> ConfigStore:
    """Open the store named by GRAPHS_STORE_BACKEND.

    Args:
        settings: Settings to read (defaults to the global instance)

    Returns:
        IniConfigStore or DuckDBConfigStore

    Raises:
        StoreError: If the backend name is unknown
    """
    settings = settings or default_settings
    backend = settings.GRAPHS_STORE_BACKEND

    if backend == "ini":
        return IniConfigStore(settings.GRAPHS_INI_PATH)
    if backend == "duckdb":
        return DuckDBConfigStore(settings.DUCKDB_PATH)

    raise StoreError(f"Unknown store backend: {backend}")
