"""
Store and stats-cache wiring for the API.

``create_app()`` builds one ItemStore and one StatsCache per application and
keeps them on ``app.state``; routes receive them through the dependencies
below, which keeps every app instance (and every test) isolated.
"""

from fastapi import Request

from utils.cache import StatsCache
from utils.store import ItemStore


def get_store(request: Request) -> ItemStore:
    """FastAPI dependency: the application's ItemStore.

    Usage in a route::

        @router.get("/example")
        def example(store: ItemStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def get_stats_cache(request: Request) -> StatsCache:
    """FastAPI dependency: the application's StatsCache."""
    return request.app.state.stats_cache
