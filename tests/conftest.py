from decimal import Decimal
from typing import Any, Callable

import httpx
import pytest

from little_lemon.models import MenuRecord, Snapshot
from little_lemon.persistence import MenuStore
from little_lemon.remote import MenuSource

CATEGORIES = ("Appetizers", "Salads", "Beverages")

SNAPSHOT_PAYLOAD: dict[str, Any] = {
    "menu": [
        {"id": 1, "title": "Greek Salad", "price": 12.5, "category": {"title": "Salads"}},
        {"id": 2, "title": "Bruschetta", "price": 7, "category": {"title": "Appetizers"}},
    ]
}


class FakeSource:
    """Stands in for MenuSource and counts fetches."""

    def __init__(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.calls = 0

    async def fetch_snapshot(self) -> Snapshot:
        self.calls += 1
        return self.snapshot


@pytest.fixture
def store(tmp_path) -> MenuStore:
    s = MenuStore(tmp_path / "menu.db")
    yield s
    s.close()


@pytest.fixture
def records() -> list[MenuRecord]:
    return [
        MenuRecord(id="1", title="Greek Salad", price=Decimal("12.5"), category="Salads"),
        MenuRecord(id="2", title="Bruschetta", price=Decimal("7"), category="Appetizers"),
        MenuRecord(id="3", title="Lemonade", price=Decimal("3.25"), category="Beverages"),
        MenuRecord(id="4", title="Caesar Salad", price=Decimal("9"), category="Salads"),
    ]


@pytest.fixture
def seeded_store(store: MenuStore, records: list[MenuRecord]) -> MenuStore:
    store.ensure_schema()
    store.bulk_insert(records)
    return store


@pytest.fixture
def make_source() -> Callable[[Callable[[httpx.Request], httpx.Response]], MenuSource]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> MenuSource:
        return MenuSource("https://menu.test/menu.json", transport=httpx.MockTransport(handler))

    return factory
