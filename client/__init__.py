"""
Catalog client package.

Re-exports the data facade and the list view models so callers can write
``from client import CatalogClient``.
"""

from client.data import CatalogClient
from client.views import ItemListView, VirtualWindow

__all__ = ["CatalogClient", "ItemListView", "VirtualWindow"]
