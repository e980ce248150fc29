"""Remote menu snapshot download and normalisation."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

import httpx

from little_lemon.config import FETCH_TIMEOUT_SECONDS, MENU_API_URL
from little_lemon.errors import DataShapeError, FetchError, SnapshotError
from little_lemon.models import MenuRecord, Snapshot

logger = logging.getLogger(__name__)


def normalize_item(raw: Any) -> MenuRecord:
    """Flatten one raw menu entry; its nested category keeps only the title."""
    if not isinstance(raw, dict):
        raise DataShapeError(f"menu entry is not an object: {raw!r}")

    category = raw.get("category")
    if not isinstance(category, dict) or not isinstance(category.get("title"), str):
        raise DataShapeError(f"menu entry has no category title: {raw!r}")

    missing = [key for key in ("id", "title", "price") if raw.get(key) is None]
    if missing:
        raise DataShapeError(f"menu entry missing {', '.join(missing)}: {raw!r}")

    price = raw["price"]
    if isinstance(price, bool) or not isinstance(price, (int, str, Decimal)):
        raise DataShapeError(f"menu entry has a non-numeric price: {raw!r}")
    try:
        price = Decimal(str(price))
    except ArithmeticError as exc:
        raise DataShapeError(f"menu entry has a non-numeric price: {raw!r}") from exc

    return MenuRecord(
        id=str(raw["id"]),
        title=str(raw["title"]),
        price=price,
        category=category["title"],
    )


def parse_snapshot(payload: Any) -> list[MenuRecord]:
    """Turn a decoded menu document into records, or raise DataShapeError."""
    if not isinstance(payload, dict) or not isinstance(payload.get("menu"), list):
        raise DataShapeError("Menu data is not available or not in the expected format")
    return [normalize_item(item) for item in payload["menu"]]


class MenuSource:
    """Fetches the one-off menu snapshot over HTTP."""

    def __init__(
        self,
        url: str = MENU_API_URL,
        *,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch_snapshot(self) -> Snapshot:
        """Download and normalise the menu.

        Never raises for network or shape problems; those come back as a
        failed Snapshot holding the placeholder record.
        """
        logger.info("fetch_snapshot url=%s", self.url)
        try:
            payload = await self._download()
            records = parse_snapshot(payload)
        except SnapshotError as exc:
            logger.error("fetch_snapshot failed kind=%s error=%s", type(exc).__name__, exc)
            return Snapshot.from_error(exc)

        logger.info("fetch_snapshot ok rows=%d", len(records))
        return Snapshot(records=records)

    async def _download(self) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
                return resp.json(parse_float=Decimal)
        except (httpx.HTTPError, ValueError) as exc:
            raise FetchError(str(exc) or type(exc).__name__) from exc
