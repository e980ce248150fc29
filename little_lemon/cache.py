"""Startup fetch-or-load orchestration for the menu cache."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Sequence

from little_lemon.config import FETCH_ALERT_MESSAGE, MENU_CATEGORIES
from little_lemon.models import MenuRecord, MenuSection
from little_lemon.persistence import MenuStore
from little_lemon.query import FilterSelection, MenuQuery, group_sections
from little_lemon.remote import MenuSource

logger = logging.getLogger(__name__)


class CacheState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class MenuCache:
    """Owns the store and decides whether the remote menu is needed.

    The remote source is contacted only while the store is empty, so the
    snapshot is imported at most once per store lifetime.
    """

    def __init__(
        self,
        store: MenuStore,
        source: MenuSource,
        categories: Sequence[str] = MENU_CATEGORIES,
        on_alert: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.source = source
        self.categories = tuple(categories)
        self.on_alert = on_alert
        self.state = CacheState.UNINITIALIZED
        self.records: list[MenuRecord] = []
        self.menu_query = MenuQuery(store, self.categories)

    async def start(self) -> list[MenuRecord]:
        """Run the startup sequence once and return the records to display.

        StorageError propagates and leaves the cache in LOADING.
        """
        if self.state is not CacheState.UNINITIALIZED:
            raise RuntimeError(f"menu cache already started (state={self.state.value})")
        self.state = CacheState.LOADING

        self.store.ensure_schema()
        records = self.store.load_all()
        if records:
            logger.info("start source=store rows=%d", len(records))
        else:
            snapshot = await self.source.fetch_snapshot()
            records = snapshot.records
            if snapshot.failed:
                logger.warning("start source=remote failed error=%s", snapshot.error)
                self._alert(FETCH_ALERT_MESSAGE)
            else:
                self.store.bulk_insert(records)
                logger.info("start source=remote rows=%d", len(records))

        self.records = records
        self.state = CacheState.READY
        return records

    def initial_sections(self) -> list[MenuSection]:
        """Sections for the startup records, without another store query."""
        self._require_ready()
        return group_sections(self.records)

    def sections(self, query: str = "", selection: FilterSelection | None = None) -> list[MenuSection]:
        """Sections for a search and filter change, read from the store."""
        self._require_ready()
        return self.menu_query.filter(query, selection)

    def _require_ready(self) -> None:
        if self.state is not CacheState.READY:
            raise RuntimeError("menu cache is not ready")

    def _alert(self, message: str) -> None:
        if self.on_alert is None:
            logger.warning("alert message=%r", message)
            return
        self.on_alert(message)
