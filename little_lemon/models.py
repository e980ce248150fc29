"""Domain models for the Little Lemon menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from little_lemon.errors import DataShapeError, FetchError, SnapshotError

ERROR_ID = "error"
ERROR_CATEGORY = "Error"
_PLACEHOLDER_TITLES = frozenset({FetchError.title, DataShapeError.title})


@dataclass(frozen=True)
class MenuRecord:
    """One dish as fetched from the remote menu or loaded from the store."""

    id: str
    title: str
    price: Decimal
    category: str

    @property
    def is_placeholder(self) -> bool:
        """True only for the record standing in for a failed snapshot."""
        return (
            self.id == ERROR_ID
            and self.category == ERROR_CATEGORY
            and self.price == 0
            and self.title in _PLACEHOLDER_TITLES
        )


@dataclass(frozen=True)
class MenuEntry:
    """A record inside a section; the category is the section key."""

    id: str
    title: str
    price: Decimal


@dataclass(frozen=True)
class MenuSection:
    """A display group of entries sharing one category."""

    title: str
    data: list[MenuEntry] = field(default_factory=list)


def error_record(title: str) -> MenuRecord:
    """Build the placeholder record shown in place of a failed snapshot."""
    return MenuRecord(id=ERROR_ID, title=title, price=Decimal(0), category=ERROR_CATEGORY)


@dataclass(frozen=True)
class Snapshot:
    """Result of one remote fetch.

    A failed snapshot carries its error and a single placeholder record so the
    UI can still render an "Error" section.
    """

    records: list[MenuRecord]
    error: SnapshotError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def from_error(cls, error: SnapshotError) -> Snapshot:
        return cls(records=[error_record(error.title)], error=error)
