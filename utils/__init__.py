"""Shared utilities for the catalog API and its clients."""

# Errors
from utils.errors import (
    CatalogError,
    HttpError,
    InvalidArgumentError,
    NotFoundError,
    ProtocolError,
    StorageError,
    ValidationError,
)

# Storage and queries
from utils.store import ItemStore
from utils.query import create_item, find_item_by_id, find_items, parse_item_id

# Stats
from utils.stats import calculate_stats
from utils.cache import StatsCache

# Validation utilities
from utils.validation import is_valid_price, validate_item_candidate

__all__ = [
    "CatalogError",
    "HttpError",
    "InvalidArgumentError",
    "NotFoundError",
    "ProtocolError",
    "StorageError",
    "ValidationError",
    "ItemStore",
    "create_item",
    "find_item_by_id",
    "find_items",
    "parse_item_id",
    "calculate_stats",
    "StatsCache",
    "is_valid_price",
    "validate_item_candidate",
]
