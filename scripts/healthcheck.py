"""
Container health check for the CompetitorIQ API.
"""

from __future__ import annotations

import os

import requests


def main() -> int:
    host = os.getenv("API_HOST", "127.0.0.1")
    port = os.getenv("PORT", "8000")
    path = os.getenv("HEALTHCHECK_PATH", "/health")

    try:
        response = requests.get(f"http://{host}:{port}{path}", timeout=2)
    except requests.RequestException:
        return 1
    return 0 if response.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
