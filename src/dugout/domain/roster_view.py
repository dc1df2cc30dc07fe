from dataclasses import dataclass, field, replace
from datetime import datetime

from dugout.domain.player import PlayerID, PlayerRole, TeamID
from dugout.domain.roster_entry import RosterEntry, RosterStatus
from dugout.domain.roster_event import (
    ActivatedPlayerOnRoster,
    AddedPlayerToRoster,
    InactivatedPlayerOnRoster,
    RemovedPlayerFromRoster,
    RosterEvent,
)
from dugout.exceptions import (
    EventOutsideViewWindowError,
    PlayerAlreadyOnRosterError,
    PlayerNotOnRosterError,
    UnrecognizedPlayerRoleError,
    UnrecognizedRosterEventError,
    UnrecognizedRosterStatusError,
    WrongTeamIDError,
)


@dataclass(frozen=True)
class RosterCounts:
    total: int = 0
    active_hitters: int = 0
    active_pitchers: int = 0
    inactive: int = 0


@dataclass
class RosterView:
    """A team's roster as it stood at ``effective_through``.

    Views are rebuilt from the event log whenever they are needed and are
    never the system of record. ``entries`` keeps insertion order.
    """

    team_id: TeamID
    effective_through: datetime
    entries: list[RosterEntry] = field(default_factory=list)

    def counts(self) -> RosterCounts:
        """Tabulate entries by status.

        Raises UnrecognizedRosterStatusError if any entry carries a status
        outside RosterStatus.
        """
        active_hitters = active_pitchers = inactive = 0
        for entry in self.entries:
            match entry.status:
                case RosterStatus.ACTIVE_HITTER:
                    active_hitters += 1
                case RosterStatus.ACTIVE_PITCHER:
                    active_pitchers += 1
                case RosterStatus.INACTIVE:
                    inactive += 1
                case _:
                    raise UnrecognizedRosterStatusError(f"player {entry.player_id} has status {entry.status!r}")
        return RosterCounts(
            total=len(self.entries),
            active_hitters=active_hitters,
            active_pitchers=active_pitchers,
            inactive=inactive,
        )

    def player_on_roster(self, player_id: PlayerID) -> bool:
        return self._index_of(player_id) is not None

    def find_entry(self, player_id: PlayerID) -> RosterEntry | None:
        index = self._index_of(player_id)
        return None if index is None else self.entries[index]

    def apply(self, event: RosterEvent) -> None:
        """Fold one event into the view in place.

        Removing an absent player and inactivating an inactive one are no-ops
        so that history can be replayed safely. Anything that would break a
        roster invariant raises an InvariantViolation and leaves the view
        untouched.
        """
        if event.team_id != self.team_id:
            raise WrongTeamIDError(f"event team {event.team_id}, view team {self.team_id}")
        if event.effective_at > self.effective_through:
            raise EventOutsideViewWindowError(
                f"event effective at {event.effective_at.isoformat()}, "
                f"view effective through {self.effective_through.isoformat()}"
            )

        match event:
            case AddedPlayerToRoster(player_id=player_id):
                self._add_player(player_id)
            case RemovedPlayerFromRoster(player_id=player_id):
                self._remove_player(player_id)
            case ActivatedPlayerOnRoster(player_id=player_id, role=role):
                self._activate_player(player_id, role)
            case InactivatedPlayerOnRoster(player_id=player_id):
                self._inactivate_player(player_id)
            case _:
                raise UnrecognizedRosterEventError(type(event).__name__)

    def _index_of(self, player_id: PlayerID) -> int | None:
        for i, entry in enumerate(self.entries):
            if entry.player_id == player_id:
                return i
        return None

    def _require_index(self, player_id: PlayerID) -> int:
        index = self._index_of(player_id)
        if index is None:
            raise PlayerNotOnRosterError(f"player {player_id} is not on team {self.team_id}")
        return index

    def _add_player(self, player_id: PlayerID) -> None:
        if self.player_on_roster(player_id):
            raise PlayerAlreadyOnRosterError(f"player {player_id} is already on team {self.team_id}")
        self.entries.append(RosterEntry(team_id=self.team_id, player_id=player_id, status=RosterStatus.INACTIVE))

    def _remove_player(self, player_id: PlayerID) -> None:
        index = self._index_of(player_id)
        if index is not None:
            del self.entries[index]

    def _activate_player(self, player_id: PlayerID, role: PlayerRole) -> None:
        index = self._require_index(player_id)
        match role:
            case PlayerRole.HITTER:
                status = RosterStatus.ACTIVE_HITTER
            case PlayerRole.PITCHER:
                status = RosterStatus.ACTIVE_PITCHER
            case _:
                raise UnrecognizedPlayerRoleError(f"player {player_id} has role {role!r}")
        self.entries[index] = replace(self.entries[index], status=status)

    def _inactivate_player(self, player_id: PlayerID) -> None:
        index = self._require_index(player_id)
        entry = self.entries[index]
        match entry.status:
            case RosterStatus.INACTIVE:
                return
            case RosterStatus.ACTIVE_HITTER | RosterStatus.ACTIVE_PITCHER:
                self.entries[index] = replace(entry, status=RosterStatus.INACTIVE)
            case _:
                raise UnrecognizedRosterStatusError(f"player {player_id} has status {entry.status!r}")
