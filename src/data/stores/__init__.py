"""Configuration stores for graph sections."""

from .base import ConfigStore, MemoryConfigStore, StoreError
from .ini_store import IniConfigStore
from .duckdb_store import DuckDBConfigStore
from .factory import open_store

__all__ = [
    "ConfigStore",
    "MemoryConfigStore",
    "StoreError",
    "IniConfigStore",
    "DuckDBConfigStore",
    "open_store",
]
