"""Killfeed route (recent wound events)."""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from squadfeed.models import WoundEvent
from squadfeed.routes.deps import get_settings, get_wound_log
from squadfeed.services.killfeed_params import parse_last_n, parse_last_time
from squadfeed.settings import Settings
from squadfeed.store import WoundLog


def create_router(killfeed_path: str) -> APIRouter:
    """Build the killfeed router on the configured path."""
    router = APIRouter(tags=["killfeed"])
    
    @router.get(killfeed_path)
    async def get_killfeed(
        lasttime: Optional[str] = Query(None, description="Epoch-ms cursor; returns events after it"),
        lastn: Optional[str] = Query(None, description="Number of most recent events"),
        wound_log: WoundLog = Depends(get_wound_log),
        app_settings: Settings = Depends(get_settings),
    ) -> Optional[List[WoundEvent]]:
        """
        Get recent wound events.
        
        A usable lasttime takes precedence and lastn is ignored. Invalid
        parameters fall back to defaults instead of failing. A cursor newer
        than every stored event yields null rather than an empty list.
        """
        last_time = parse_last_time(lasttime)
        if last_time is not None:
            return wound_log.query_by_cursor(last_time)
        
        last_n = parse_last_n(lastn, app_settings.KILLFEED_DEFAULT_LASTN)
        return wound_log.query_by_count(last_n)
    
    return router
