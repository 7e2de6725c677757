"""
Serve the interests API with uvicorn.

Host and port come from `API_HOST` / `API_PORT` (defaults `0.0.0.0:8000`).

Usage:
    python run.py
"""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    host = os.environ.get("API_HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = int(os.environ.get("API_PORT", "8000"))
    uvicorn.run("main:app", host=host, port=port, reload=False, log_level="info")


if __name__ == "__main__":
    main()
