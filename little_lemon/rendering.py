"""Rendering helpers for menu sections and filter toggles."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from little_lemon.models import ERROR_CATEGORY, MenuSection


def header_style(title: str) -> str:
    """Return a consistent style for section headers."""
    if title == ERROR_CATEGORY:
        return "bold #ffffff on #b23a48"
    return "bold #fbdabb"


def format_price(price: Decimal) -> str:
    return f"${price}"


def format_sections(sections: list[MenuSection], width: int = 40) -> Text:
    """Render sections as a header line followed by one line per dish."""
    text = Text()
    if not sections:
        text.append("No results", style="dim")
        return text

    for idx, section in enumerate(sections):
        if idx > 0:
            text.append("\n\n")
        text.append(section.title, style=header_style(section.title))
        for entry in section.data:
            price = format_price(entry.price)
            gap = max(1, width - len(entry.title) - len(price))
            text.append("\n")
            text.append(entry.title)
            text.append(" " * gap)
            text.append(price, style="bold")
    return text


def filter_variant(selected: bool) -> str:
    """Button variant for a filter toggle."""
    return "warning" if selected else "default"
