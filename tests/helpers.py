from datetime import datetime
from zoneinfo import ZoneInfo

from dugout.domain.player import PlayerID, TeamID
from dugout.domain.roster_entry import MAX_ACTIVE_HITTERS, MAX_ACTIVE_PITCHERS, MAX_ROSTER_SIZE, RosterEntry, RosterStatus
from dugout.domain.roster_event import AddedPlayerToRoster, RosterEvent
from dugout.domain.roster_view import RosterView

NYC = ZoneInfo("America/New_York")

TEAM_A = TeamID(111)
TEAM_B = TeamID(222)

# Game 6 and Game 7 of the 1986 World Series.
TODAY_LOCK = datetime(1986, 10, 26, tzinfo=NYC)
TOMORROW_LOCK = datetime(1986, 10, 27, tzinfo=NYC)


def make_roster_view(team_id: TeamID, players: int, through: datetime = TODAY_LOCK) -> RosterView:
    """Build a view with ``players`` inactive entries, ids 1..players."""
    if not 0 <= players <= MAX_ROSTER_SIZE:
        raise ValueError(f"players must be between 0 and {MAX_ROSTER_SIZE}, got {players}")
    return RosterView(
        team_id=team_id,
        effective_through=through,
        entries=[
            RosterEntry(team_id=team_id, player_id=PlayerID(i), status=RosterStatus.INACTIVE)
            for i in range(1, players + 1)
        ],
    )


def activate_entries(view: RosterView, hitters: int, pitchers: int) -> RosterView:
    """Return a copy of ``view`` with its first entries activated as hitters, then pitchers."""
    if len(view.entries) < hitters + pitchers:
        raise ValueError("roster has fewer entries than requested activations")
    hitters = min(hitters, MAX_ACTIVE_HITTERS)
    pitchers = min(pitchers, MAX_ACTIVE_PITCHERS)
    statuses = [RosterStatus.ACTIVE_HITTER] * hitters + [RosterStatus.ACTIVE_PITCHER] * pitchers
    entries = [
        RosterEntry(team_id=e.team_id, player_id=e.player_id, status=statuses[i] if i < len(statuses) else e.status)
        for i, e in enumerate(view.entries)
    ]
    return RosterView(team_id=view.team_id, effective_through=view.effective_through, entries=entries)


def added_players(team_id: TeamID, players: int, effective_at: datetime = TODAY_LOCK) -> list[RosterEvent]:
    return [
        AddedPlayerToRoster(team_id=team_id, player_id=PlayerID(i), effective_at=effective_at)
        for i in range(1, players + 1)
    ]
