# backend/routers/stats_router.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from database.session import get_session_factory
from queries.stats_queries import collect_stats
from schemas.stats import StatsOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsOut)
async def homepage_stats(session_factory=Depends(get_session_factory)):
    try:
        stats = await collect_stats(session_factory)
    except Exception as e:
        logger.error(f"Stats query failed: {e}")
        # the homepage still renders, with zeros
        return JSONResponse(status_code=500, content=StatsOut().model_dump(by_alias=True))
    return JSONResponse(
        content=stats.model_dump(by_alias=True),
        headers={"Cache-Control": "public, s-maxage=60, stale-while-revalidate=120"},
    )
