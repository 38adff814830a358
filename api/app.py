"""
FastAPI application factory for the catalog API.

Usage:
    python -m api.app                              # Dev server on port 3001
    APP_DATA_PATH=/data/items.json python -m api.app

OpenAPI docs available at http://localhost:3001/docs after starting.

Routes are mounted under ``/api``:
    GET  /api/items, GET /api/items/{id}, POST /api/items, GET /api/stats
plus ``/health`` and ``/health/detailed`` for monitoring.

Structured JSON logging is enabled with APP_LOG_FORMAT=json; CORS origins
come from APP_CORS_ORIGINS.
"""

import json
import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import items, stats
from utils.cache import StatsCache
from utils.config import AppConfig
from utils.errors import CatalogError, StorageError
from utils.store import ItemStore

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


_logger = logging.getLogger("catalog_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)

_SLOW_REQUEST_MS = 500


def _error_response(status_code: int, error: str, message: str, detail=None) -> JSONResponse:
    content = {"error": error, "message": message, "status_code": status_code}
    if detail is not None:
        content["detail"] = detail
    return JSONResponse(status_code=status_code, content=content)


def create_app(
    data_path: Path | None = None,
    clock: Callable[[], datetime] | None = None,
    id_clock: Callable[[], float] = time.time,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_path: Override the items JSON path (useful for testing).
        clock: Timestamp source for the stats ``lastUpdated`` field.
        id_clock: Seconds-since-epoch source used to assign item ids.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Catalog API",
        summary="Browse, search and extend a JSON-backed item catalog.",
        description=(
            "## Catalog API\n\n"
            "Serves items from a flat JSON file with server-side search and "
            "pagination, plus cached aggregate statistics.\n\n"
            "- **Search** (`q`) is a case-insensitive substring match on "
            "name or category.\n"
            "- **Pagination** uses `page` (1-based) and `limit`; the response "
            "carries `total`, `totalPages`, `hasNext` and `hasPrev`.\n"
            "- **Stats** are recomputed only when the data file changes."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "items", "description": "List, search, fetch and create items."},
            {"name": "stats", "description": "Aggregate statistics over the catalog."},
            {"name": "meta", "description": "Health check and operational metrics."},
        ],
    )

    store = ItemStore(data_path if data_path is not None else _cfg.data_path)
    app.state.config = _cfg
    app.state.store = store
    app.state.stats_cache = (
        StatsCache(store, clock=clock) if clock is not None else StatsCache(store)
    )
    app.state.id_clock = id_clock
    app.state.started_at = time.time()
    app.state.metrics = {"request_count": 0, "error_count": 0}

    _logger.info("catalog api configured data_file=%s settings=%s",
                 store.path, _cfg.to_dict())
    if not store.exists():
        _logger.warning("data file not found at %s", store.path)

    # ── CORS middleware ───────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request, tag it with an id and record counters."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        path = request.url.path

        app.state.metrics["request_count"] += 1
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000

        if response.status_code >= 500:
            app.state.metrics["error_count"] += 1
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, path, response.status_code, duration_ms,
                request_id,
            )
        if duration_ms > _SLOW_REQUEST_MS:
            _logger.warning(
                "slow_request method=%s path=%s duration_ms=%.1f",
                request.method, path, duration_ms,
            )
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if exc.status_code >= 500:
            _logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed query parameters or body are a 400, like any bad input."""
        errors = exc.errors()
        first = errors[0] if errors else {}
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid {where}: {first.get('msg', 'invalid value')}" if where else (
            "Invalid payload. Name, category, and price are required."
        )
        return _error_response(400, "Bad request", message,
                               detail=[
                                   {"loc": list(e.get("loc", ())), "msg": e.get("msg"),
                                    "type": e.get("type")}
                                   for e in errors
                               ])

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of a traceback."""
        _logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "Internal server error", str(exc))

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health():
        """Return 200 OK if the API is running and can read the data file."""
        try:
            count = store.count()
        except StorageError as exc:
            return JSONResponse(
                status_code=503,
                content={"status": "degraded", "data_file": str(store.path),
                         "error": exc.message},
            )
        return {"status": "ok", "data_file": str(store.path), "items": count}

    @app.get(
        "/health/detailed",
        tags=["meta"],
        summary="Detailed health metrics",
        response_description="Operational metrics for monitoring dashboards",
    )
    def health_detailed():
        """Return uptime, request/error counters, data file size and cache stats.

        Counters reset on process restart.
        """
        try:
            count = store.count()
            size = store.path.stat().st_size
        except (StorageError, OSError) as exc:
            return JSONResponse(
                status_code=503,
                content={"status": "degraded", "error": str(exc)},
            )
        return {
            "status": "ok",
            "uptime_seconds": round(time.time() - app.state.started_at, 2),
            "request_count": app.state.metrics["request_count"],
            "error_count": app.state.metrics["error_count"],
            "data_file_bytes": size,
            "items_count": count,
            "stats_cache": app.state.stats_cache.stats(),
        }

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api"
    app.include_router(items.router, prefix=prefix)
    app.include_router(stats.router, prefix=prefix)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
