"""Upstream game-session connector (Socket.IO client)."""
import socketio
from socketio.exceptions import ConnectionError as UpstreamConnectionError
from pydantic import ValidationError
from typing import Any, Dict, List, Optional, Union
from squadfeed.models import Player, PlayerWounded
from squadfeed.session import GameSession
from squadfeed.settings import Settings
from squadfeed.store import WoundLog


class SessionConnector:
    """
    Feeds the game server's event stream into the API.
    
    Every wound notification goes through player_wounded(), in arrival order,
    on the event loop thread that also serves HTTP requests.
    """
    
    def __init__(self, session: GameSession, wound_log: WoundLog, app_settings: Settings):
        self.session = session
        self.wound_log = wound_log
        self.settings = app_settings
        self.sio: Optional[socketio.AsyncClient] = None
    
    def player_wounded(self, payload: Dict[str, Any]):
        """Record a wound notification in the log."""
        try:
            data = PlayerWounded.model_validate(payload)
        except ValidationError as e:
            print(f"[CONNECTOR] Skipping malformed wound payload ({e.error_count()} errors): {e}")
            return
        self.wound_log.append(data)
    
    def players_updated(self, payload: Union[List[Dict[str, Any]], Dict[str, Any]]):
        """
        Replace the roster. Accepts a player list or {"players": [...]}.

        Malformed players are left out; the rest of the roster still applies.
        """
        if isinstance(payload, dict):
            payload = payload.get("players") or []
        if not isinstance(payload, list):
            print(f"[CONNECTOR] Skipping roster payload of type {type(payload).__name__}")
            return

        players = []
        for item in payload:
            try:
                players.append(Player.model_validate(item))
            except ValidationError as e:
                print(f"[CONNECTOR] Skipping malformed player ({e.error_count()} errors): {e}")
        self.session.update_players(players)
    
    async def _on_player_wounded(self, data):
        self.player_wounded(data)
    
    async def _on_players_updated(self, data):
        self.players_updated(data)
    
    async def _on_connect(self):
        print(f"[CONNECTOR] Connected to game server at {self.settings.UPSTREAM_URL}")
    
    async def _on_disconnect(self, *args):
        print("[CONNECTOR] Disconnected from game server")
    
    async def connect(self):
        """Open the upstream connection, if one is configured."""
        if not self.settings.UPSTREAM_URL:
            print("[CONNECTOR] UPSTREAM_URL not set, serving without a live game session")
            return
        
        self.sio = socketio.AsyncClient(logger=False, engineio_logger=False)
        self.sio.on("connect", self._on_connect)
        self.sio.on("disconnect", self._on_disconnect)
        self.sio.on(self.settings.UPSTREAM_WOUND_EVENT, self._on_player_wounded)
        self.sio.on(self.settings.UPSTREAM_PLAYERS_EVENT, self._on_players_updated)
        
        auth = {"token": self.settings.UPSTREAM_TOKEN} if self.settings.UPSTREAM_TOKEN else None
        try:
            await self.sio.connect(self.settings.UPSTREAM_URL, auth=auth)
        except UpstreamConnectionError as e:
            print(f"[CONNECTOR] Could not connect to {self.settings.UPSTREAM_URL}: {e}")
    
    async def disconnect(self):
        """Close the upstream connection."""
        if self.sio is not None and self.sio.connected:
            await self.sio.disconnect()
        self.sio = None
