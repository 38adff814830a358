"""
View models for browsing the mirrored item list.

ItemListView holds the list page state (search text, current page) over the
items a CatalogClient has fetched.  VirtualWindow works out which rows of a
fixed-row-height list are on screen so long lists render only those rows.
"""

from __future__ import annotations

import math

PAGE_SIZE = 10
ITEM_HEIGHT = 100
LIST_HEIGHT = 400


class ItemListView:
    """Client-side search and pagination over a list of items."""

    def __init__(self, items: list[dict] | None = None, page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.search_term = ""
        self.current_page = 1
        self._items: list[dict] = list(items or [])

    @property
    def items(self) -> list[dict]:
        return self._items

    @items.setter
    def items(self, items: list[dict]) -> None:
        self._items = list(items)
        self._clamp_page()

    def set_search(self, term: str) -> None:
        """Change the search text; always returns to the first page."""
        self.search_term = term
        self.current_page = 1

    def go_to(self, page: int) -> None:
        self.current_page = max(1, page)
        self._clamp_page()

    @property
    def filtered(self) -> list[dict]:
        term = self.search_term.strip().lower()
        if not term:
            return self._items
        return [
            item for item in self._items
            if term in item["name"].lower() or term in item["category"].lower()
        ]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.filtered) / self.page_size)

    @property
    def page_items(self) -> list[dict]:
        start = (self.current_page - 1) * self.page_size
        return self.filtered[start:start + self.page_size]

    def summary(self) -> str:
        count = len(self.filtered)
        if self.search_term:
            return f'Found {count} item(s) matching "{self.search_term}"'
        return f"Showing {count} item(s)"

    def _clamp_page(self) -> None:
        # Back to page 1 once the results shrink below the current page
        total = self.total_pages
        if total > 0 and self.current_page > total:
            self.current_page = 1


class VirtualWindow:
    """Visible-row arithmetic for a fixed-row-height scrolling list.

    Usage::

        window = VirtualWindow(len(items))
        for index in window.visible_range(scroll_offset=250):
            render(items[index])
    """

    def __init__(self, item_count: int, item_height: int = ITEM_HEIGHT,
                 height: int = LIST_HEIGHT, overscan: int = 1) -> None:
        if item_height <= 0 or height <= 0:
            raise ValueError("item_height and height must be positive")
        self.item_count = max(0, item_count)
        self.item_height = item_height
        self.height = height
        self.overscan = max(0, overscan)

    @property
    def scroll_height(self) -> int:
        """Total pixel height of the list content."""
        return self.item_count * self.item_height

    def max_offset(self) -> int:
        return max(0, self.scroll_height - self.height)

    def visible_range(self, scroll_offset: int = 0) -> range:
        """Indexes of rows intersecting the viewport, plus ``overscan`` rows."""
        if self.item_count == 0:
            return range(0)
        offset = min(max(0, scroll_offset), self.max_offset())
        first = offset // self.item_height
        last = (offset + self.height - 1) // self.item_height
        start = max(0, first - self.overscan)
        stop = min(self.item_count, last + 1 + self.overscan)
        return range(start, stop)

    def row_offset(self, index: int) -> int:
        """Pixel offset of row *index* from the top of the list."""
        return index * self.item_height
