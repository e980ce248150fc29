from decimal import Decimal

import httpx
import pytest

from conftest import SNAPSHOT_PAYLOAD
from little_lemon.errors import DataShapeError, FetchError
from little_lemon.models import MenuRecord, error_record
from little_lemon.remote import normalize_item, parse_snapshot


@pytest.mark.asyncio
async def test_fetch_snapshot_flattens_category(make_source) -> None:
    source = make_source(lambda request: httpx.Response(200, json=SNAPSHOT_PAYLOAD))

    snapshot = await source.fetch_snapshot()

    assert not snapshot.failed
    assert snapshot.records == [
        MenuRecord(id="1", title="Greek Salad", price=Decimal("12.5"), category="Salads"),
        MenuRecord(id="2", title="Bruschetta", price=Decimal("7"), category="Appetizers"),
    ]


@pytest.mark.parametrize("payload", ({}, {"menu": "soup"}, {"menu": None}, ["not", "a", "document"]))
@pytest.mark.asyncio
async def test_fetch_snapshot_bad_shape(make_source, payload) -> None:
    source = make_source(lambda request: httpx.Response(200, json=payload))

    snapshot = await source.fetch_snapshot()

    assert isinstance(snapshot.error, DataShapeError)
    assert snapshot.records == [error_record("Data not in expected format")]
    assert snapshot.records[0].id == "error"
    assert snapshot.records[0].category == "Error"
    assert snapshot.records[0].price == 0


@pytest.mark.asyncio
async def test_fetch_snapshot_non_json_body(make_source) -> None:
    source = make_source(lambda request: httpx.Response(200, text="<html>oops</html>"))

    snapshot = await source.fetch_snapshot()

    assert isinstance(snapshot.error, FetchError)
    assert snapshot.records == [error_record("Error fetching data")]


@pytest.mark.asyncio
async def test_fetch_snapshot_server_error(make_source) -> None:
    source = make_source(lambda request: httpx.Response(503, text="unavailable"))

    snapshot = await source.fetch_snapshot()

    assert isinstance(snapshot.error, FetchError)
    assert snapshot.records[0].title == "Error fetching data"


@pytest.mark.asyncio
async def test_fetch_snapshot_transport_failure(make_source) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    snapshot = await make_source(handler).fetch_snapshot()

    assert isinstance(snapshot.error, FetchError)
    assert snapshot.records == [error_record("Error fetching data")]


def test_parse_snapshot_rejects_item_without_category_title() -> None:
    with pytest.raises(DataShapeError):
        parse_snapshot({"menu": [{"id": 1, "title": "Soup", "price": 4, "category": "Soups"}]})


def test_normalize_item_keeps_price_text_exact() -> None:
    record = normalize_item({"id": "a7", "title": "Pasta", "price": "10.10", "category": {"title": "Mains"}})

    assert record == MenuRecord(id="a7", title="Pasta", price=Decimal("10.10"), category="Mains")
    assert str(record.price) == "10.10"


@pytest.mark.parametrize(
    "raw",
    (
        {"id": 1, "price": 4, "category": {"title": "Soups"}},
        {"id": 1, "title": "Soup", "price": "cheap", "category": {"title": "Soups"}},
        {"id": 1, "title": "Soup", "price": True, "category": {"title": "Soups"}},
        "Soup",
    ),
)
def test_normalize_item_rejects_incomplete_entries(raw) -> None:
    with pytest.raises(DataShapeError):
        normalize_item(raw)
