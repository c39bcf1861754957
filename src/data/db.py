"""DuckDB database operations."""

import duckdb
from pathlib import Path
from typing import Dict, Mapping, Optional

from ..config.settings import settings


def connect(db_path: Optional[str] = None) -> duckdb.DuckDBPyConnection:
    """Create and return a DuckDB connection.

    Args:
        db_path: Database path, ":memory:" for a throwaway database
            (defaults to settings.DUCKDB_PATH)

    Returns:
        DuckDB connection to the configured database path
    """
    db_path = db_path or settings.DUCKDB_PATH
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(str(db_path))


def create_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the section table.

    Args:
        conn: DuckDB connection
    """
    # One row per key of a section; position keeps section order stable
    conn.execute("""
        CREATE TABLE IF NOT EXISTS config_sections (
            section VARCHAR NOT NULL,
            position INTEGER NOT NULL,
            key VARCHAR NOT NULL,
            value VARCHAR NOT NULL,
            PRIMARY KEY (section, key)
        )
    """)

    conn.commit()


def load_sections(conn: duckdb.DuckDBPyConnection) -> Dict[str, Dict[str, str]]:
    """Read every section from config_sections.

    Args:
        conn: DuckDB connection

    Returns:
        Mapping of section name to its key/value pairs, in stored order
    """
    rows = conn.execute("""
        SELECT section, key, value
        FROM config_sections
        ORDER BY position, key
    """).fetchall()

    sections: Dict[str, Dict[str, str]] = {}
    for section, key, value in rows:
        sections.setdefault(section, {})[key] = value
    return sections


def replace_sections(
    conn: duckdb.DuckDBPyConnection,
    sections: Mapping[str, Mapping[str, str]]
) -> None:
    """Replace the stored sections with the given ones in a single transaction.

    Args:
        conn: DuckDB connection
        sections: Mapping of section name to key/value pairs

    Raises:
        duckdb.Error: If any statement fails; the transaction is rolled back
    """
    data = [
        (section, position, key, value)
        for position, (section, values) in enumerate(sections.items())
        for key, value in values.items()
    ]

    conn.execute("BEGIN TRANSACTION")
    try:
        conn.execute("DELETE FROM config_sections")
        for row in data:
            conn.execute("""
                INSERT INTO config_sections
                (section, position, key, value)
                VALUES (?, ?, ?, ?)
            """, row)
    except duckdb.Error:
        conn.rollback()
        raise

    conn.commit()
