"""Roster business rules.

Each ``decide_*`` function checks a requested change against a projected
RosterView and returns the events that should be recorded, or the reason the
change is not allowed. Nothing here mutates the view; callers fold the
returned events with ``RosterView.apply`` or hand them to the event store.
"""

from datetime import datetime

from dugout.domain.errors import (
    ActiveHittersFull,
    ActivePitchersFull,
    PlayerAlreadyActive,
    PlayerAlreadyInactive,
    PlayerAlreadyOnRoster,
    PlayerNotOnRoster,
    RosterError,
    RosterFull,
    UnrecognizedPlayerRole,
    UnrecognizedRosterStatus,
)
from dugout.domain.player import PlayerID, PlayerRole
from dugout.domain.result import Err, Ok, Result
from dugout.domain.roster_command import ActivatePlayer, AddPlayer, InactivatePlayer, RemovePlayer, RosterCommand
from dugout.domain.roster_entry import (
    MAX_ACTIVE_HITTERS,
    MAX_ACTIVE_PITCHERS,
    MAX_ROSTER_SIZE,
    RosterStatus,
)
from dugout.domain.roster_event import (
    ActivatedPlayerOnRoster,
    AddedPlayerToRoster,
    InactivatedPlayerOnRoster,
    RemovedPlayerFromRoster,
    RosterEvent,
)
from dugout.domain.roster_view import RosterView

type Decision = Result[list[RosterEvent], RosterError]


def decide_add_player(view: RosterView, player_id: PlayerID, effective_at: datetime) -> Decision:
    if len(view.entries) >= MAX_ROSTER_SIZE:
        return Err(
            RosterFull(
                f"roster is already full ({MAX_ROSTER_SIZE} players)",
                team_id=view.team_id,
                player_id=player_id,
            )
        )
    if view.player_on_roster(player_id):
        return Err(PlayerAlreadyOnRoster("player already on roster", team_id=view.team_id, player_id=player_id))
    return Ok([AddedPlayerToRoster(team_id=view.team_id, player_id=player_id, effective_at=effective_at)])


def decide_remove_player(view: RosterView, player_id: PlayerID, effective_at: datetime) -> Decision:
    if not view.player_on_roster(player_id):
        return Err(PlayerNotOnRoster("player is not on the roster", team_id=view.team_id, player_id=player_id))
    return Ok([RemovedPlayerFromRoster(team_id=view.team_id, player_id=player_id, effective_at=effective_at)])


def decide_activate_player(
    view: RosterView, player_id: PlayerID, role: PlayerRole, effective_at: datetime
) -> Decision:
    """Activate an inactive player into the hitter or pitcher bucket.

    Membership and current status are checked before capacity, so an
    already-active player is reported as such even when the bucket has room.
    """
    entry = view.find_entry(player_id)
    if entry is None:
        return Err(PlayerNotOnRoster("player is not on the roster", team_id=view.team_id, player_id=player_id))
    match entry.status:
        case RosterStatus.ACTIVE_HITTER | RosterStatus.ACTIVE_PITCHER:
            return Err(PlayerAlreadyActive("player already activated", team_id=view.team_id, player_id=player_id))
        case RosterStatus.INACTIVE:
            pass
        case _:
            return Err(
                UnrecognizedRosterStatus(
                    f"unrecognized roster status {entry.status!r}",
                    team_id=view.team_id,
                    player_id=player_id,
                )
            )

    counts = view.counts()
    match role:
        case PlayerRole.HITTER:
            if counts.active_hitters >= MAX_ACTIVE_HITTERS:
                return Err(
                    ActiveHittersFull(
                        f"roster already has the maximum active hitters ({MAX_ACTIVE_HITTERS})",
                        team_id=view.team_id,
                        player_id=player_id,
                    )
                )
        case PlayerRole.PITCHER:
            if counts.active_pitchers >= MAX_ACTIVE_PITCHERS:
                return Err(
                    ActivePitchersFull(
                        f"roster already has the maximum active pitchers ({MAX_ACTIVE_PITCHERS})",
                        team_id=view.team_id,
                        player_id=player_id,
                    )
                )
        case _:
            return Err(
                UnrecognizedPlayerRole(
                    f"unrecognized player role {role!r}",
                    team_id=view.team_id,
                    player_id=player_id,
                )
            )
    return Ok(
        [
            ActivatedPlayerOnRoster(
                team_id=view.team_id,
                player_id=player_id,
                role=role,
                effective_at=effective_at,
            )
        ]
    )


def decide_inactivate_player(view: RosterView, player_id: PlayerID, effective_at: datetime) -> Decision:
    entry = view.find_entry(player_id)
    if entry is None:
        return Err(PlayerNotOnRoster("player is not on the roster", team_id=view.team_id, player_id=player_id))
    match entry.status:
        case RosterStatus.INACTIVE:
            return Err(PlayerAlreadyInactive("player already inactive", team_id=view.team_id, player_id=player_id))
        case RosterStatus.ACTIVE_HITTER | RosterStatus.ACTIVE_PITCHER:
            return Ok(
                [InactivatedPlayerOnRoster(team_id=view.team_id, player_id=player_id, effective_at=effective_at)]
            )
        case _:
            return Err(
                UnrecognizedRosterStatus(
                    f"unrecognized roster status {entry.status!r}",
                    team_id=view.team_id,
                    player_id=player_id,
                )
            )


def decide(view: RosterView, command: RosterCommand, effective_at: datetime) -> Decision:
    """Route a command to its decision function."""
    match command:
        case AddPlayer(player_id=player_id):
            return decide_add_player(view, player_id, effective_at)
        case RemovePlayer(player_id=player_id):
            return decide_remove_player(view, player_id, effective_at)
        case ActivatePlayer(player_id=player_id, role=role):
            return decide_activate_player(view, player_id, role, effective_at)
        case InactivatePlayer(player_id=player_id):
            return decide_inactivate_player(view, player_id, effective_at)
        case _:
            raise TypeError(f"unsupported roster command: {type(command).__name__}")
