import logging
from datetime import datetime

from dugout.domain.player import TeamID
from dugout.domain.recorded_event import RecordedEvent
from dugout.domain.roster_event import RosterEvent
from dugout.domain.roster_view import RosterView
from dugout.league.protocols import LeagueLock
from dugout.repos.protocols import RosterEventStore
from dugout.services.roster_stream import RosterStream

logger = logging.getLogger(__name__)


class RosterQueryService:
    def __init__(self, store: RosterEventStore, lock: LeagueLock) -> None:
        self._store = store
        self._lock = lock

    def view_through(self, team_id: TeamID, through: datetime) -> RosterView:
        committed, version = self._store.load(team_id)
        logger.debug("Projecting team=%d version=%d through %s", team_id, version, through.isoformat())
        return RosterStream(team_id=team_id, committed=committed).project_through(through)

    def current_view(self, team_id: TeamID) -> RosterView:
        """The roster binding since the most recent lock."""
        return self.view_through(team_id, self._lock.last_lock())

    def upcoming_view(self, team_id: TeamID) -> RosterView:
        """The roster that will bind at the next lock, including changes already committed for it."""
        return self.view_through(team_id, self._lock.next_lock())

    def history(self, team_id: TeamID) -> list[RecordedEvent[RosterEvent]]:
        committed, _ = self._store.load(team_id)
        return sorted(committed, key=lambda recorded: recorded.sequence)
