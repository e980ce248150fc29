"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Sequence

from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.timer import Timer
from textual.widgets import Button, Header, Input, Static

from little_lemon.cache import CacheState, MenuCache
from little_lemon.config import MENU_CATEGORIES, SEARCH_DEBOUNCE_SECONDS
from little_lemon.errors import StorageError
from little_lemon.models import MenuSection
from little_lemon.persistence import MenuStore
from little_lemon.query import FilterSelection
from little_lemon.remote import MenuSource
from little_lemon.rendering import filter_variant, format_sections

logger = logging.getLogger(__name__)


class LittleLemonApp(App):
    """A Textual app for browsing, searching and filtering the menu."""

    TITLE = "Little Lemon"
    SUB_TITLE = "Menu"

    CSS = """
    Screen {
        layout: vertical;
        background: #495e57;
    }

    #search-bar {
        margin: 1 1 0 1;
    }

    #filters {
        height: auto;
        margin: 1 1;
    }

    #filters Button {
        width: 1fr;
    }

    #menu-pane {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "clear_search", "Clear search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: MenuStore | None = None,
        source: MenuSource | None = None,
        categories: Sequence[str] = MENU_CATEGORIES,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
    ) -> None:
        super().__init__()
        self._owns_store = store is None
        self.store = MenuStore() if store is None else store
        self.cache = MenuCache(
            self.store,
            MenuSource() if source is None else source,
            categories,
            on_alert=self._alert,
        )
        self.filter_selection = FilterSelection(tuple(categories))
        self.search_query = ""
        self.sections: list[MenuSection] = []
        self.debounce_seconds = debounce_seconds
        self._search_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search", id="search-bar")
        with Horizontal(id="filters"):
            for idx, category in enumerate(self.filter_selection.categories):
                yield Button(category, id=f"filter-{idx}", variant=filter_variant(False))
        with VerticalScroll(id="menu-pane"):
            yield Static(id="menu")

    def on_mount(self) -> None:
        self.query_one("#menu", Static).update("Loading menu...")
        self.run_worker(self._load_menu(), name="load_menu", group="startup", exclusive=True)

    async def _load_menu(self) -> None:
        try:
            await self.cache.start()
            cached = self.store.count()
        except StorageError as exc:
            logger.exception("load_menu startup_failed")
            self._alert(str(exc))
            return

        self.sub_title = f"Menu - {cached} cached items"
        logger.debug("load_menu state=%s cached=%d", self.cache.state.value, cached)
        if self.search_query or any(self.filter_selection.selected):
            # Filters changed while the menu was still loading.
            self._run_query()
            return
        self.sections = self.cache.initial_sections()
        self._refresh_menu()

    def on_unmount(self) -> None:
        if self._search_timer is not None:
            self._search_timer.stop()
        if self._owns_store:
            self.store.close()

    def on_input_changed(self, event: Input.Changed) -> None:
        if self._search_timer is not None:
            self._search_timer.stop()
        value = event.value
        self._search_timer = self.set_timer(self.debounce_seconds, lambda: self._apply_search(value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("filter-"):
            return

        idx = int(button_id.removeprefix("filter-"))
        self.filter_selection = self.filter_selection.toggle(idx)
        event.button.variant = filter_variant(self.filter_selection.selected[idx])
        self._run_query()

    def action_clear_search(self) -> None:
        self.query_one("#search-bar", Input).value = ""

    def _apply_search(self, value: str) -> None:
        self._search_timer = None
        if value == self.search_query:
            return
        self.search_query = value
        self._run_query()

    def _run_query(self) -> None:
        if self.cache.state is not CacheState.READY:
            return
        try:
            self.sections = self.cache.sections(self.search_query, self.filter_selection)
        except StorageError as exc:
            logger.exception("query_failed query=%r", self.search_query)
            self._alert(str(exc))
            return
        logger.debug(
            "query query=%r active=%r sections=%d",
            self.search_query,
            self.filter_selection.active_categories(),
            len(self.sections),
        )
        self._refresh_menu()

    def _refresh_menu(self) -> None:
        self.query_one("#menu", Static).update(format_sections(self.sections))

    def _alert(self, message: str) -> None:
        self.notify(message, title="Little Lemon", severity="error")
