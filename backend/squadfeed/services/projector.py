"""Projection of live players into the wire shape."""
from squadfeed.models import Player, PlayerView


def format_player_info(player: Player) -> PlayerView:
    """
    Project a live player into a PlayerView.
    
    Used both for roster listings and for freezing attacker/victim inside
    wound events, so a wound keeps the squad and role the player had when
    it happened.
    """
    squad_name = player.squad.squad_name if player.squad else None
    
    return PlayerView(
        name=player.name,
        player_id=player.player_id,
        steam_id=player.steam_id,
        team_id=player.team_id,
        squad_id=player.squad_id,
        squad_name=squad_name or None,
        is_leader=player.is_leader,
        role=player.role,
    )
