"""DuckDB-backed store for graph sections."""

import logging
from typing import Optional

import duckdb

from ..db import connect, create_schema, load_sections, replace_sections
from .base import MemoryConfigStore

logger = logging.getLogger(__name__)


class DuckDBConfigStore(MemoryConfigStore):
    """Sections kept in the config_sections table of a DuckDB database.

    The table is read once on construction; ``save()`` replaces its contents
    with the staged sections inside one transaction.
    """

    def __init__(
        self,
        db_path: Optional[str] = None,
        conn: Optional[duckdb.DuckDBPyConnection] = None,
    ):
        super().__init__()
        self._owns_conn = conn is None
        self.conn = conn if conn is not None else connect(db_path)
        create_schema(self.conn)
        self._sections = load_sections(self.conn)
        logger.debug("Loaded %d sections from DuckDB", len(self._sections))

    def save(self) -> bool:
        try:
            replace_sections(self.conn, self._sections)
        except duckdb.Error as e:
            logger.error("Could not save sections to DuckDB: %s", e)
            return False

        logger.info("Saved %d sections to DuckDB", len(self._sections))
        return True

    def close(self) -> None:
        """Close the connection if this store opened it."""
        if self._owns_conn:
            self.conn.close()
