"""
/api/items endpoints.

GET  /api/items        search + paginate the collection
GET  /api/items/{id}   single item lookup
POST /api/items        validate and append a new item

The collection is read from the store on every request.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, status

from api.models import ErrorResponse, ItemCreate, ItemListResponse, ItemOut
from api.storage import get_store
from utils.query import create_item, find_item_by_id, find_items, parse_item_id
from utils.store import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid id, paging parameter or payload"},
    500: {"model": ErrorResponse, "description": "Data file could not be read or written"},
}


@router.get(
    "",
    response_model=ItemListResponse,
    summary="List items",
    responses=_ERRORS,
)
def list_items(
    request: Request,
    limit: int | None = Query(None, description="Items per page (default from APP_DEFAULT_PAGE_SIZE)"),
    page: int = Query(1, description="1-based page number"),
    q: str | None = Query(None, description="Case-insensitive search over name and category"),
    store: ItemStore = Depends(get_store),
) -> dict:
    """Return one page of items, optionally filtered by ``q``."""
    page_size = limit if limit is not None else request.app.state.config.default_page_size
    return find_items(store.load_all(), q=q, page=page, page_size=page_size)


@router.get(
    "/{item_id}",
    response_model=ItemOut,
    summary="Get single item",
    responses={
        **_ERRORS,
        404: {"model": ErrorResponse, "description": "No item with this id"},
    },
)
def get_item(
    item_id: str,
    store: ItemStore = Depends(get_store),
) -> dict:
    """Return the item whose id equals ``item_id``."""
    parsed = parse_item_id(item_id)
    return find_item_by_id(store.load_all(), parsed)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ItemOut,
    summary="Create item",
    responses=_ERRORS,
)
def post_item(
    request: Request,
    candidate: ItemCreate | None = None,
    store: ItemStore = Depends(get_store),
) -> dict:
    """Validate the payload, assign an id and persist the new item."""
    payload = candidate.model_dump() if candidate is not None else {}
    item = create_item(store, payload, clock=request.app.state.id_clock)
    logger.info("item created id=%s category=%s", item["id"], item["category"])
    return item
