from typing import NewType, Protocol, runtime_checkable

from dugout.domain.player import TeamID
from dugout.domain.recorded_event import RecordedEvent
from dugout.domain.roster_event import RosterEvent

# Highest committed sequence for a team's stream, 0 when the stream is empty.
Version = NewType("Version", int)


@runtime_checkable
class RosterEventStore(Protocol):
    def load(self, team_id: TeamID) -> tuple[list[RecordedEvent[RosterEvent]], Version]: ...

    def append(self, team_id: TeamID, events: list[RosterEvent], expected: Version) -> Version:
        """Append events if the stream is still at ``expected``.

        Raises VersionConflictError when another writer has advanced the stream.
        """
        ...
