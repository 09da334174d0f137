"""Roster routes (players and squad leaders)."""
from fastapi import APIRouter, Depends
from typing import List
from squadfeed.models import PlayerView
from squadfeed.routes.deps import get_session
from squadfeed.services.roster import get_players, get_leaders
from squadfeed.session import GameSession


def create_router(players_path: str, leaders_path: str) -> APIRouter:
    """Build the roster router on the configured paths."""
    router = APIRouter(tags=["roster"])
    
    @router.get(players_path)
    async def list_players(session: GameSession = Depends(get_session)) -> List[PlayerView]:
        """Get every connected player, in roster order."""
        return get_players(session.players)
    
    @router.get(leaders_path)
    async def list_leaders(session: GameSession = Depends(get_session)) -> List[PlayerView]:
        """Get squad leaders, ordered by squad ID."""
        return get_leaders(session.players)
    
    return router
