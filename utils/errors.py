"""Error taxonomy shared by the catalog API, query engine and client.

Each error carries the HTTP status it maps to so the API layer can turn it
into a JSON error body without a lookup table.

    CatalogError
    ├── ValidationError        400  bad input shape or values
    │   └── InvalidArgumentError  400  unparseable path/query argument
    ├── NotFoundError          404  no item carries the requested id
    ├── StorageError           500  data file unreadable/unwritable
    ├── ProtocolError          502  server answered with an unexpected shape
    └── HttpError              <status>  non-success HTTP response
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status_code: int = 500
    category: str = "Internal server error"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {
            "error": self.category,
            "message": self.message,
            "status_code": self.status_code,
        }


class ValidationError(CatalogError):
    status_code = 400
    category = "Bad request"


class InvalidArgumentError(ValidationError):
    pass


class NotFoundError(CatalogError):
    status_code = 404
    category = "Not found"


class StorageError(CatalogError):
    status_code = 500
    category = "Storage error"


class ProtocolError(CatalogError):
    status_code = 502
    category = "Unexpected response"


class HttpError(CatalogError):
    """Non-success HTTP response (``status`` is None for network failures)."""

    category = "HTTP error"

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message, status_code=status if status is not None else 503)
        self.status = status
