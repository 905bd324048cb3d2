"""Read-only access to the master.mdb SQLite snapshot."""

import logging
import sqlite3
from pathlib import Path

from umasync.log import VERBOSE

logger = logging.getLogger(__name__)

TEXT_QUERY = 'SELECT text FROM text_data WHERE category = ? AND "index" = ?'


class MasterDatabase:
    """Thin wrapper around a read-only sqlite3 connection.

    Rows come back as plain dicts in column order.
    """

    def __init__(self, conn):
        conn.row_factory = sqlite3.Row
        self.conn = conn

    @classmethod
    def open(cls, path):
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Database file not found: {path}")
        logger.log(VERBOSE, "=> Initializing sqlitedb client…")
        conn = sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
        conn.set_trace_callback(logger.debug)
        return cls(conn)

    def query(self, sql, params=()):
        return [dict(row) for row in self.conn.execute(sql, params)]

    def query_one(self, sql, params=()):
        row = self.conn.execute(sql, params).fetchone()
        return dict(row) if row is not None else None

    def text(self, category, index):
        """Localized string for ``(category, index)`` or "" when absent."""
        row = self.conn.execute(TEXT_QUERY, (int(category), int(index))).fetchone()
        if row is None or row["text"] is None:
            return ""
        return row["text"]

    def close(self):
        self.conn.close()
