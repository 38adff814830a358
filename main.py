#!/usr/bin/env python3
"""
Catalog API — launch the REST server.

Usage:
    python main.py                          # http://127.0.0.1:3001
    python main.py --port 9000              # http://127.0.0.1:9000
    python main.py --host 0.0.0.0           # listen on all interfaces
    python main.py --data /path/to/items.json
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from utils.config import DEFAULT_DATA_PATH


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Launch the catalog REST API.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "3001")),
        help="Port to listen on (default: 3001 or APP_PORT env var)",
    )
    parser.add_argument(
        "--data", type=Path, default=None,
        help="Path to the items JSON file (default: data/items.json or APP_DATA_PATH env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    args = parser.parse_args()

    # The app reads its data path from the environment at import time
    if args.data is not None:
        os.environ["APP_DATA_PATH"] = str(args.data)

    data_path = Path(os.getenv("APP_DATA_PATH", str(DEFAULT_DATA_PATH)))
    if not data_path.exists():
        print(f"Warning: data file not found at {data_path}")
        print("  Requests will fail with 500 until the file exists,")
        print("  or pass --data /path/to/items.json")
        print()

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn is not installed.")
        print("  pip install uvicorn[standard]")
        sys.exit(1)

    print(f"Starting Catalog API at http://{args.host}:{args.port}/api")
    print(f"Data file: {data_path}")
    print()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
