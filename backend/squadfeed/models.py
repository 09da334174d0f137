"""Pydantic models for the squad session API."""
from typing import Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Live session entities (as reported by the game server)
# ============================================================================

class Squad(BaseModel):
    """Squad a live player belongs to."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")
    
    squad_name: Optional[str] = Field(None, alias="squadName")


class Player(BaseModel):
    """Live player entity. Any field may be missing on partial updates."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")
    
    name: Optional[str] = None
    player_id: Optional[str] = Field(None, alias="playerID")
    steam_id: Optional[str] = Field(None, alias="steamID")  # Stable platform identity
    team_id: Optional[int] = Field(None, alias="teamID")
    squad_id: Optional[int] = Field(None, alias="squadID")
    squad: Optional[Squad] = None
    is_leader: bool = Field(False, alias="isLeader")
    role: Optional[str] = None


class PlayerWounded(BaseModel):
    """Raw "player wounded" notification from the game server."""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")
    
    time: datetime
    attacker: Optional[Player] = None
    victim: Optional[Player] = None
    damage: Union[int, float] = 0
    weapon: Optional[str] = None
    teamkill: bool = False


# ============================================================================
# Wire models (what dashboards receive)
# ============================================================================

class PlayerView(BaseModel):
    """Minimal, stable projection of a live player."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    name: Optional[str] = None
    player_id: Optional[str] = Field(None, alias="playerID")
    steam_id: Optional[str] = Field(None, alias="steamID")
    team_id: Optional[int] = Field(None, alias="teamID")
    squad_id: Optional[int] = Field(None, alias="squadID")
    squad_name: Optional[str] = Field(None, alias="squadName")  # None when not in a squad
    is_leader: bool = Field(False, alias="isLeader")
    role: Optional[str] = None


class WoundEvent(BaseModel):
    """Wound as recorded in the killfeed. Attacker/victim are frozen at wound time."""
    model_config = ConfigDict(frozen=True)
    
    time: int  # Epoch milliseconds
    attacker: PlayerView
    victim: PlayerView
    damage: Union[int, float]  # Passed through as sent (int stays int)
    weapon: Optional[str] = None
    teamkill: bool = False
    suicide: bool = False
