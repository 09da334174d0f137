"""Roster queries over the live player list."""
from typing import Iterable, List
from squadfeed.models import Player, PlayerView
from squadfeed.services.projector import format_player_info


def get_players(roster: Iterable[Player]) -> List[PlayerView]:
    """All connected players, in roster order."""
    return [format_player_info(player) for player in roster]


def get_leaders(roster: Iterable[Player]) -> List[PlayerView]:
    """Squad leaders sorted by squad ID (leaders without a squad ID go last)."""
    leaders = [format_player_info(player) for player in roster if player.is_leader]
    leaders.sort(key=lambda leader: (leader.squad_id is None, leader.squad_id or 0))
    return leaders
