from dataclasses import dataclass
from datetime import datetime

from dugout.domain.player import PlayerID, PlayerRole, TeamID


@dataclass(frozen=True)
class AddedPlayerToRoster:
    team_id: TeamID
    player_id: PlayerID
    effective_at: datetime


@dataclass(frozen=True)
class RemovedPlayerFromRoster:
    team_id: TeamID
    player_id: PlayerID
    effective_at: datetime


@dataclass(frozen=True)
class ActivatedPlayerOnRoster:
    team_id: TeamID
    player_id: PlayerID
    role: PlayerRole
    effective_at: datetime


@dataclass(frozen=True)
class InactivatedPlayerOnRoster:
    team_id: TeamID
    player_id: PlayerID
    effective_at: datetime


type RosterEvent = AddedPlayerToRoster | RemovedPlayerFromRoster | ActivatedPlayerOnRoster | InactivatedPlayerOnRoster
