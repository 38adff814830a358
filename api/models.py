"""
Pydantic request/response models for the catalog API.

Field names follow the JSON the client consumes (camelCase for pagination
and stats), so no alias generator is needed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ── Item models ───────────────────────────────────────────────────────────────

class ItemOut(BaseModel):
    """A single catalog item."""
    id: int = Field(..., description="Creation timestamp in milliseconds, used as the id", examples=[1718035200000])
    name: str = Field(..., description="Display name", examples=["Laptop Pro"])
    category: str = Field(..., description="Free-text category", examples=["Electronics"])
    price: float = Field(..., ge=0, description="Non-negative price", examples=[2499])


class ItemCreate(BaseModel):
    """Body for POST /api/items.

    Fields are optional here so that missing values reach the catalog
    validator and produce its message; the price type is still checked
    strictly so numeric strings are rejected.
    """
    name: str | None = Field(None, description="Item name; surrounding whitespace is trimmed")
    category: str | None = Field(None, description="Item category; surrounding whitespace is trimmed")
    price: float | None = Field(
        None, strict=True, allow_inf_nan=False, description="Finite, non-negative price"
    )


# ── Paginated list ────────────────────────────────────────────────────────────

class PaginationOut(BaseModel):
    """Pagination metadata computed against the filtered result count."""
    total: int = Field(..., description="Matching items before pagination", examples=[5])
    page: int = Field(..., description="1-based page number", examples=[1])
    pageSize: int = Field(..., description="Page size used", examples=[50])
    totalPages: int = Field(..., description="ceil(total / pageSize)", examples=[1])
    hasNext: bool = Field(..., description="More items follow this page")
    hasPrev: bool = Field(..., description="page > 1")


class ItemListResponse(BaseModel):
    """Response body for GET /api/items."""
    items: list[ItemOut] = Field(..., description="Items on this page")
    pagination: PaginationOut


# ── Stats ─────────────────────────────────────────────────────────────────────

class PriceRange(BaseModel):
    min: float = Field(..., examples=[399])
    max: float = Field(..., examples=[2499])


class StatsOut(BaseModel):
    """Aggregate statistics snapshot."""
    total: int = Field(..., description="Number of items", examples=[5])
    averagePrice: float = Field(..., description="Mean price, 0 when empty", examples=[1179.0])
    categories: dict[str, int] = Field(..., description="Item count per category")
    priceRange: PriceRange
    lastUpdated: str | None = Field(None, description="ISO-8601 time the snapshot was computed")


# ── Error model ───────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Standard error response body."""
    error: str = Field(..., description="Short error category", examples=["Bad request"])
    message: str = Field(..., description="Human-readable explanation", examples=["Invalid item ID"])
    status_code: int = Field(..., ge=400, le=599, description="HTTP status code", examples=[400])
    detail: Any | None = Field(None, description="Field-level validation errors, when any")
