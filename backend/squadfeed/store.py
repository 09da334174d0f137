"""In-memory wound log backing the killfeed."""
from typing import List, Optional
from datetime import datetime, timedelta, timezone
from squadfeed.models import Player, PlayerWounded, WoundEvent
from squadfeed.services.projector import format_player_info

# Keep only the last 30 wound events
KILLFEED_CAPACITY = 30

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def _has_steam_id(player: Optional[Player]) -> bool:
    return player is not None and bool(player.steam_id)


class WoundLog:
    """
    Bounded, insertion-ordered log of wound events.
    
    Events are stored in arrival order. The game server emits wounds in time
    order, so the log is also ordered by time. When the log is full, each
    append evicts the single oldest event.
    """
    
    def __init__(self, capacity: int = KILLFEED_CAPACITY):
        self.capacity = capacity
        self._events: List[WoundEvent] = []
    
    def __len__(self) -> int:
        return len(self._events)
    
    def append(self, data: PlayerWounded):
        """Record a wound. Wounds without attacker and victim steam IDs are dropped."""
        if not _has_steam_id(data.attacker) or not _has_steam_id(data.victim):
            return
        
        self._events.append(WoundEvent(
            time=to_epoch_ms(data.time),
            attacker=format_player_info(data.attacker),
            victim=format_player_info(data.victim),
            damage=data.damage,
            weapon=data.weapon,
            teamkill=data.teamkill,
            suicide=data.attacker.steam_id == data.victim.steam_id,
        ))
        
        if len(self._events) > self.capacity:
            self._events.pop(0)
    
    def query_by_count(self, last_n: int) -> List[WoundEvent]:
        """
        Get the last_n most recent events, oldest first.
        
        last_n <= 0 returns the whole log (zero means "no limit").
        """
        if last_n <= 0:
            return list(self._events)
        return self._events[-last_n:]
    
    def query_by_cursor(self, last_time: int) -> Optional[List[WoundEvent]]:
        """
        Get the events after a time cursor.
        
        Finds the first event with time >= last_time and returns every event
        strictly after it; the matching event itself is not included. Returns
        None (not an empty list) when no event is at or after the cursor.
        
        Note: excluding the first match and the None/[] split both look
        accidental, but dashboards already rely on them.
        """
        for index, event in enumerate(self._events):
            if event.time >= last_time:
                return self._events[index + 1:]
        return None
    
    def clear(self):
        """Drop all recorded events."""
        self._events.clear()
