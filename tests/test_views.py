"""
Tests for client/views.py — list page state and virtual scrolling window.
"""
import pytest

from client.views import ItemListView, VirtualWindow


def _items(n, category="Misc"):
    return [{"id": i, "name": f"Item {i}", "category": category, "price": i} for i in range(1, n + 1)]


class TestItemListView:
    def test_first_page_of_ten(self):
        view = ItemListView(_items(25))
        assert [i["id"] for i in view.page_items] == list(range(1, 11))
        assert view.total_pages == 3

    def test_go_to_last_page(self):
        view = ItemListView(_items(25))
        view.go_to(3)
        assert [i["id"] for i in view.page_items] == list(range(21, 26))

    def test_go_to_clamps(self):
        view = ItemListView(_items(25))
        view.go_to(0)
        assert view.current_page == 1
        view.go_to(99)
        assert view.current_page == 1

    def test_search_resets_page(self, seed_items):
        view = ItemListView(seed_items, page_size=2)
        view.go_to(2)
        view.set_search("furniture")
        assert view.current_page == 1
        assert [i["name"] for i in view.page_items] == ["Ergonomic Chair", "Standing Desk"]

    def test_search_matches_name_case_insensitively(self, seed_items):
        view = ItemListView(seed_items)
        view.set_search("LAPTOP")
        assert [i["id"] for i in view.filtered] == [1]

    def test_summary(self, seed_items):
        view = ItemListView(seed_items)
        assert view.summary() == "Showing 5 item(s)"
        view.set_search("electronics")
        assert view.summary() == 'Found 3 item(s) matching "electronics"'

    def test_shrinking_items_returns_to_first_page(self):
        view = ItemListView(_items(25))
        view.go_to(3)
        view.items = _items(5)
        assert view.current_page == 1

    def test_empty(self):
        view = ItemListView()
        assert view.page_items == []
        assert view.total_pages == 0
        assert view.summary() == "Showing 0 item(s)"

    def test_rejects_bad_page_size(self):
        with pytest.raises(ValueError):
            ItemListView(page_size=0)


class TestVirtualWindow:
    def test_scroll_height(self):
        assert VirtualWindow(25).scroll_height == 2500

    def test_top_of_list(self):
        assert VirtualWindow(25).visible_range(0) == range(0, 5)

    def test_mid_scroll_includes_partial_rows(self):
        # rows 2..6 intersect [250, 650), plus one overscan row each side
        assert VirtualWindow(25).visible_range(250) == range(1, 8)

    def test_offset_clamped_to_end(self):
        window = VirtualWindow(25)
        assert window.max_offset() == 2100
        assert window.visible_range(10_000) == range(20, 25)

    def test_negative_offset_treated_as_top(self):
        assert VirtualWindow(25, overscan=0).visible_range(-50) == range(0, 4)

    def test_short_list(self):
        window = VirtualWindow(2)
        assert window.max_offset() == 0
        assert window.visible_range(300) == range(0, 2)

    def test_empty_list(self):
        assert list(VirtualWindow(0).visible_range(0)) == []

    def test_row_offset(self):
        assert VirtualWindow(10).row_offset(3) == 300

    def test_rejects_non_positive_dimensions(self):
        with pytest.raises(ValueError):
            VirtualWindow(10, item_height=0)
