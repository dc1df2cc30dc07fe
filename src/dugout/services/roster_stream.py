from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from dugout.domain.player import TeamID
from dugout.domain.recorded_event import RecordedEvent, Sequence
from dugout.domain.roster_event import RosterEvent
from dugout.domain.roster_view import RosterView
from dugout.exceptions import DuplicateRecordedEventSequenceError, WrongTeamIDError


@dataclass
class RosterStream:
    """One team's event history: what the store has committed plus locally staged events.

    Streams are built fresh from a store load for each command and are never
    persisted themselves.
    """

    team_id: TeamID
    committed: list[RecordedEvent[RosterEvent]] = field(default_factory=list)
    pending: list[RosterEvent] = field(default_factory=list)

    def stage(self, *events: RosterEvent) -> None:
        """Queue events behind the committed history.

        Raises WrongTeamIDError, staging nothing, if any event belongs to
        another team.
        """
        for event in events:
            if event.team_id != self.team_id:
                raise WrongTeamIDError(f"event team {event.team_id}, stream team {self.team_id}")
        self.pending.extend(events)

    def project_through(self, through: datetime) -> RosterView:
        """Rebuild the roster as it stood at ``through``.

        Committed events are folded in sequence order, then pending events in
        the order they were staged. Events effective after ``through`` are
        skipped wherever they appear.
        """
        view = RosterView(team_id=self.team_id, effective_through=through)
        committed = _order_by_unique_sequence(self.committed)
        _apply_through(view, through, (recorded.event for recorded in committed))
        _apply_through(view, through, self.pending)
        return view


def _order_by_unique_sequence(
    recorded_events: list[RecordedEvent[RosterEvent]],
) -> list[RecordedEvent[RosterEvent]]:
    seen: set[Sequence] = set()
    for recorded in recorded_events:
        if recorded.sequence in seen:
            raise DuplicateRecordedEventSequenceError(f"sequence {recorded.sequence}")
        seen.add(recorded.sequence)
    return sorted(recorded_events, key=lambda recorded: recorded.sequence)


def _apply_through(view: RosterView, through: datetime, events: Iterable[RosterEvent]) -> None:
    for event in events:
        if event.effective_at > through:
            continue
        view.apply(event)
