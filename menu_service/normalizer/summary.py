from __future__ import annotations

from typing import Any

import pandas as pd

from .models import MenuDocument


def _price_or_none(value: Any) -> float | None:
    if pd.isna(value):
        return None
    return float(value)


def summarize_menu(document: MenuDocument) -> dict[str, Any]:
    """Per-section item counts and price ranges for a normalized menu."""
    rows = [
        {"key": key, "price": item.price}
        for key, section in document.menu.items()
        for item in section.items
    ]
    df = pd.DataFrame(rows, columns=["key", "price"])
    # Non-numeric prices are left out of the min/max.
    df["price"] = pd.to_numeric(df["price"], errors="coerce")

    sections = []
    for key, section in document.menu.items():
        prices = df.loc[df["key"] == key, "price"]
        sections.append({
            "key": key,
            "name": section.name.model_dump(),
            "item_count": len(section.items),
            "min_price": _price_or_none(prices.min()),
            "max_price": _price_or_none(prices.max()),
        })

    return {
        "sections": sections,
        "total_items": len(df),
        "currency": document.config.currency,
    }
