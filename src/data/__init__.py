"""Storage for graph sections."""

from .db import connect, create_schema, load_sections, replace_sections
from .stores import (
    ConfigStore,
    MemoryConfigStore,
    StoreError,
    IniConfigStore,
    DuckDBConfigStore,
    open_store,
)

__all__ = [
    "connect",
    "create_schema",
    "load_sections",
    "replace_sections",
    "ConfigStore",
    "MemoryConfigStore",
    "StoreError",
    "IniConfigStore",
    "DuckDBConfigStore",
    "open_store",
]
