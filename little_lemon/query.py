"""Section grouping and filtered menu queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from little_lemon.models import MenuEntry, MenuRecord, MenuSection
from little_lemon.persistence import MenuStore


def group_sections(records: Iterable[MenuRecord]) -> list[MenuSection]:
    """Group records by category, sections in first-appearance order."""
    grouped: dict[str, list[MenuEntry]] = {}
    for record in records:
        grouped.setdefault(record.category, []).append(
            MenuEntry(id=record.id, title=record.title, price=record.price)
        )
    return [MenuSection(title=title, data=entries) for title, entries in grouped.items()]


@dataclass(frozen=True)
class FilterSelection:
    """Per-category on/off flags, parallel to the known categories."""

    categories: tuple[str, ...]
    selected: tuple[bool, ...] = ()

    def __post_init__(self) -> None:
        if not self.selected:
            object.__setattr__(self, "selected", tuple(False for _ in self.categories))
        if len(self.selected) != len(self.categories):
            raise ValueError("selection must have one flag per category")

    @classmethod
    def from_flags(cls, categories: Sequence[str], flags: Sequence[bool]) -> FilterSelection:
        return cls(categories=tuple(categories), selected=tuple(bool(flag) for flag in flags))

    def toggle(self, index: int) -> FilterSelection:
        flags = list(self.selected)
        flags[index] = not flags[index]
        return FilterSelection(categories=self.categories, selected=tuple(flags))

    def active_categories(self) -> list[str]:
        """Selected categories, or all of them when nothing is selected."""
        if not any(self.selected):
            return list(self.categories)
        return [category for category, on in zip(self.categories, self.selected) if on]


class MenuQuery:
    """Runs search + category filters against the store."""

    def __init__(self, store: MenuStore, categories: Sequence[str]) -> None:
        self.store = store
        self.categories = tuple(categories)

    def filter(self, query: str = "", selection: FilterSelection | None = None) -> list[MenuSection]:
        if selection is None:
            selection = FilterSelection(self.categories)
        records = self.store.query_filtered(query, selection.active_categories())
        return group_sections(records)
