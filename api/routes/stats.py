"""
GET /api/stats endpoint.

Serves the aggregate snapshot from the application's StatsCache, which is
recomputed only when the data file's modification fingerprint changes.
"""

from fastapi import APIRouter, Depends

from api.models import ErrorResponse, StatsOut
from api.storage import get_stats_cache
from utils.cache import StatsCache

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "",
    response_model=StatsOut,
    summary="Catalog statistics",
    responses={500: {"model": ErrorResponse, "description": "Data file could not be read"}},
)
def get_stats(cache: StatsCache = Depends(get_stats_cache)) -> dict:
    """Return item count, average price, per-category counts and price range."""
    return cache.get()
