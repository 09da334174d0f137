"""Shared fixtures for squad session API tests."""
import pytest
from datetime import datetime, timedelta, timezone
from squadfeed.models import Player, PlayerWounded, Squad

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_player():
    """Factory for live players."""
    def _make_player(steam_id="76561198000000001", squad_id=None, squad_name=None, is_leader=False, **kwargs):
        squad = Squad(squad_name=squad_name) if squad_name is not None else None
        defaults = {
            "name": f"Player {steam_id}",
            "player_id": "1",
            "team_id": 1,
            "role": "USA_Rifleman_01",
        }
        defaults.update(kwargs)
        return Player(steam_id=steam_id, squad_id=squad_id, squad=squad, is_leader=is_leader, **defaults)
    return _make_player


@pytest.fixture
def make_wound(make_player):
    """Factory for wound notifications at a given epoch-ms time."""
    def _make_wound(time_ms, attacker=None, victim=None, **kwargs):
        defaults = {"damage": 35.5, "weapon": "BP_M4_M68", "teamkill": False}
        defaults.update(kwargs)
        return PlayerWounded(
            time=EPOCH + timedelta(milliseconds=time_ms),
            attacker=attacker if attacker is not None else make_player("76561198000000001"),
            victim=victim if victim is not None else make_player("76561198000000002"),
            **defaults,
        )
    return _make_wound
