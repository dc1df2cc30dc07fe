import logging

from dugout.domain.errors import RosterError
from dugout.domain.result import Err, Ok, Result
from dugout.domain.roster_command import RosterCommand
from dugout.domain.roster_decisions import decide
from dugout.league.protocols import LeagueLock
from dugout.repos.protocols import RosterEventStore, Version
from dugout.services.roster_stream import RosterStream

logger = logging.getLogger(__name__)


class RosterCommandHandler:
    """Runs roster commands against the event store with optimistic concurrency.

    Each command does one load, decides against the roster projected through
    the league's next lock, and makes one append conditional on the version it
    loaded. Store errors, including VersionConflictError, propagate unchanged;
    retrying is the caller's decision.
    """

    def __init__(self, store: RosterEventStore, lock: LeagueLock) -> None:
        self._store = store
        self._lock = lock

    def handle(self, command: RosterCommand) -> Result[Version, RosterError]:
        committed, version = self._store.load(command.team_id)
        logger.debug("Loaded %d events for team=%d at version=%d", len(committed), command.team_id, version)

        through = self._lock.next_lock()
        view = RosterStream(team_id=command.team_id, committed=committed).project_through(through)

        match decide(view, command, through):
            case Err(error):
                logger.info("Rejected %s for team=%d: %s", type(command).__name__, command.team_id, error.message)
                return Err(error)
            case Ok(events):
                new_version = self._store.append(command.team_id, events, version)
                logger.info(
                    "Committed %s for team=%d: version %d -> %d",
                    type(command).__name__,
                    command.team_id,
                    version,
                    new_version,
                )
                return Ok(new_version)
