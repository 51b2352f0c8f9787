# backend/routers/http_cache.py
from fastapi import Response


def cache_for(response: Response, seconds: int) -> None:
    """Shared-cache header for public reads; the CDN/proxy does the caching."""
    response.headers["Cache-Control"] = f"public, s-maxage={seconds}, stale-while-revalidate={seconds * 2}"
