from dataclasses import dataclass

from dugout.domain.player import PlayerID, PlayerRole, TeamID


@dataclass(frozen=True)
class AddPlayer:
    team_id: TeamID
    player_id: PlayerID


@dataclass(frozen=True)
class RemovePlayer:
    team_id: TeamID
    player_id: PlayerID


@dataclass(frozen=True)
class ActivatePlayer:
    team_id: TeamID
    player_id: PlayerID
    role: PlayerRole


@dataclass(frozen=True)
class InactivatePlayer:
    team_id: TeamID
    player_id: PlayerID


type RosterCommand = AddPlayer | RemovePlayer | ActivatePlayer | InactivatePlayer
