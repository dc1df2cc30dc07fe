from dataclasses import dataclass
from enum import StrEnum

from dugout.domain.player import PlayerID, TeamID

MAX_ROSTER_SIZE = 26
MAX_ACTIVE_HITTERS = 12
MAX_ACTIVE_PITCHERS = 6


class RosterStatus(StrEnum):
    INACTIVE = "inactive"
    ACTIVE_HITTER = "active_hitter"
    ACTIVE_PITCHER = "active_pitcher"


@dataclass(frozen=True)
class RosterEntry:
    team_id: TeamID
    player_id: PlayerID
    status: RosterStatus
