"""Live game session state as seen by the API."""
from typing import Iterable, List
from squadfeed.models import Player


class GameSession:
    """Holds the current roster. Only the upstream connector replaces it."""
    
    def __init__(self):
        self._players: List[Player] = []
    
    @property
    def players(self) -> List[Player]:
        return list(self._players)
    
    def update_players(self, players: Iterable[Player]):
        """Replace the roster with a fresh list from the game server."""
        self._players = list(players)
