"""Aggregate statistics over the item collection."""

from datetime import datetime
from typing import Any


def empty_stats(now: datetime) -> dict[str, Any]:
    return {
        "total": 0,
        "averagePrice": 0,
        "categories": {},
        "priceRange": {"min": 0, "max": 0},
        "lastUpdated": now.isoformat(),
    }


def calculate_stats(items: list[dict], now: datetime) -> dict[str, Any]:
    """Compute the stats snapshot for *items* in a single pass.

    Args:
        items: Item dicts with ``price`` and ``category``.
        now: Timestamp recorded as ``lastUpdated``.

    Returns:
        Dict with ``total``, ``averagePrice``, ``categories`` (count per
        category), ``priceRange`` (min/max) and ``lastUpdated``.  An empty
        collection gives zeros and an empty mapping.
    """
    if not items:
        return empty_stats(now)

    total_price = 0.0
    low = high = None
    categories: dict[str, int] = {}
    for item in items:
        price = item["price"]
        total_price += price
        low = price if low is None or price < low else low
        high = price if high is None or price > high else high
        category = item["category"]
        categories[category] = categories.get(category, 0) + 1

    return {
        "total": len(items),
        "averagePrice": total_price / len(items),
        "categories": categories,
        "priceRange": {"min": low, "max": high},
        "lastUpdated": now.isoformat(),
    }
