"""SQLite persistence for the cached menu snapshot."""

from __future__ import annotations

import logging
import sqlite3
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from little_lemon.config import DB_PATH
from little_lemon.errors import StorageError
from little_lemon.models import MenuRecord

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _like_pattern(substring: str) -> str:
    escaped = (
        substring.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _row_to_record(row: sqlite3.Row) -> MenuRecord:
    return MenuRecord(
        id=row["uuid"],
        title=row["title"],
        price=Decimal(row["price"]),
        category=row["category"],
    )


class MenuStore:
    """A single table of menu records behind one long-lived connection."""

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open menu store at {self.db_path}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row

    def __enter__(self) -> MenuStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def ensure_schema(self) -> None:
        """Create the menu table if it does not already exist."""
        try:
            with self._conn:
                self._conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS menuitems (
                        id INTEGER PRIMARY KEY NOT NULL,
                        uuid TEXT,
                        title TEXT NOT NULL,
                        price TEXT NOT NULL,
                        category TEXT NOT NULL
                    )
                    """
                )
        except sqlite3.Error as exc:
            raise StorageError(f"cannot create menu table: {exc}") from exc

    def load_all(self) -> list[MenuRecord]:
        """Return every persisted record, in no particular order."""
        rows = self._fetch("SELECT uuid, title, price, category FROM menuitems")
        return [_row_to_record(row) for row in rows]

    def count(self) -> int:
        rows = self._fetch("SELECT COUNT(*) AS n FROM menuitems")
        return int(rows[0]["n"])

    def bulk_insert(self, records: Iterable[MenuRecord]) -> None:
        """Persist a full snapshot in one transaction."""
        rows = []
        for record in records:
            if record.is_placeholder:
                raise ValueError("Cannot persist the fetch error placeholder")
            rows.append((record.id, record.title, str(record.price), record.category))
        if not rows:
            return

        try:
            with self._conn:
                self._conn.executemany(
                    "INSERT INTO menuitems (uuid, title, price, category) VALUES (?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as exc:
            raise StorageError(f"cannot save menu items: {exc}") from exc
        logger.info("bulk_insert rows=%d", len(rows))

    def query_filtered(self, substring: str, active_categories: Iterable[str]) -> list[MenuRecord]:
        """Records whose title contains ``substring`` and whose category is active.

        Title matching is case-insensitive. An empty category set matches nothing.
        """
        categories = list(dict.fromkeys(active_categories))
        if not categories:
            return []

        placeholders = ",".join("?" for _ in categories)
        rows = self._fetch(
            f"""
            SELECT uuid, title, price, category FROM menuitems
            WHERE title LIKE ? ESCAPE '{_LIKE_ESCAPE}' AND category IN ({placeholders})
            """,
            (_like_pattern(substring), *categories),
        )
        logger.debug("query_filtered query=%r categories=%r rows=%d", substring, categories, len(rows))
        return [_row_to_record(row) for row in rows]

    def _fetch(self, sql: str, params: tuple[object, ...] = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"menu query failed: {exc}") from exc
