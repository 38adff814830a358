"""Item query engine: search, pagination, lookup and creation.

All functions work on the plain list of item dicts returned by
``ItemStore.load_all()``; the caller decides when to read the store.
"""

import math
import time
from typing import Any, Callable

from utils.config import DEFAULT_PAGE_SIZE
from utils.errors import InvalidArgumentError, NotFoundError, ValidationError
from utils.store import ItemStore
from utils.validation import validate_item_candidate


def filter_items(items: list[dict], q: str | None) -> list[dict]:
    """Return items whose name or category contains *q* (case-insensitive).

    A missing or blank *q* returns *items* unchanged.
    """
    if not q or not q.strip():
        return items
    term = q.strip().lower()
    return [
        item for item in items
        if term in str(item.get("name", "")).lower()
        or term in str(item.get("category", "")).lower()
    ]


def build_pagination(total: int, page: int, page_size: int) -> dict[str, Any]:
    """Pagination metadata for *total* results viewed *page_size* at a time.

    ``hasPrev`` only says whether a lower page number exists; it stays true
    for pages past the end.
    """
    start = (page - 1) * page_size
    return {
        "total": total,
        "page": page,
        "pageSize": page_size,
        "totalPages": math.ceil(total / page_size),
        "hasNext": start + page_size < total,
        "hasPrev": page > 1,
    }


def find_items(
    items: list[dict],
    q: str | None = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """Search then paginate *items*.

    Args:
        items: Full collection, in insertion order.
        q: Optional search text matched against name and category.
        page: 1-based page number.
        page_size: Items per page.

    Returns:
        ``{"items": [...], "pagination": {...}}``.  A page past the end
        yields an empty ``items`` list.

    Raises:
        ValidationError: *page* or *page_size* is below 1.
    """
    if page < 1:
        raise ValidationError("page must be a positive integer.")
    if page_size < 1:
        raise ValidationError("limit must be a positive integer.")

    results = filter_items(items, q)
    start = (page - 1) * page_size
    return {
        "items": results[start:start + page_size],
        "pagination": build_pagination(len(results), page, page_size),
    }


def parse_item_id(raw: Any) -> int:
    """Parse a path/query argument into an item id.

    Raises:
        InvalidArgumentError: *raw* is not an optionally signed run of
            ASCII digits.
    """
    if isinstance(raw, bool):
        raise InvalidArgumentError("Invalid item ID")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    digits = text[1:] if text.startswith("-") else text
    # int() alone would also take "1_000" and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidArgumentError("Invalid item ID")
    return int(text)


def find_item_by_id(items: list[dict], item_id: int) -> dict:
    """Return the first item carrying *item_id*.

    Raises:
        NotFoundError: no item has that id.
    """
    for item in items:
        if item.get("id") == item_id:
            return item
    raise NotFoundError("Item not found")


def create_item(
    store: ItemStore,
    candidate: dict[str, Any] | None,
    clock: Callable[[], float] = time.time,
) -> dict[str, Any]:
    """Validate *candidate*, assign an id and append it to *store*.

    The id is the current time in milliseconds; two items created within
    the same millisecond get the same id.

    Raises:
        ValidationError: the payload is invalid.
        StorageError: the store cannot be read or written.
    """
    fields = validate_item_candidate(candidate)
    item = {"id": int(clock() * 1000), **fields}
    return store.append(item)
