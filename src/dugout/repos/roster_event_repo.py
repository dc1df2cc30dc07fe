import logging
import sqlite3
from datetime import datetime
from enum import StrEnum

from dugout.domain.player import PlayerID, PlayerRole, TeamID
from dugout.domain.recorded_event import RecordedEvent, Sequence
from dugout.domain.roster_event import (
    ActivatedPlayerOnRoster,
    AddedPlayerToRoster,
    InactivatedPlayerOnRoster,
    RemovedPlayerFromRoster,
    RosterEvent,
)
from dugout.exceptions import UnrecognizedRosterEventError
from dugout.repos.errors import VersionConflictError
from dugout.repos.protocols import Version

logger = logging.getLogger(__name__)


class _EventKind(StrEnum):
    ADDED = "player_added"
    REMOVED = "player_removed"
    ACTIVATED = "player_activated"
    INACTIVATED = "player_inactivated"


class SqliteRosterEventRepo:
    """Append-only roster event log with per-team optimistic concurrency.

    The version check and the insert run in one ``BEGIN IMMEDIATE``
    transaction, so writers racing on the same expected version cannot both
    commit.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def load(self, team_id: TeamID) -> tuple[list[RecordedEvent[RosterEvent]], Version]:
        rows = self._conn.execute(
            "SELECT * FROM roster_event WHERE team_id = ? ORDER BY sequence",
            (team_id,),
        ).fetchall()
        committed = [self._row_to_recorded(row) for row in rows]
        version = Version(max((r.sequence for r in committed), default=0))
        return committed, version

    def append(self, team_id: TeamID, events: list[RosterEvent], expected: Version) -> Version:
        old_isolation = self._conn.isolation_level
        self._conn.isolation_level = None
        try:
            self._conn.execute("BEGIN IMMEDIATE")
            current = self._current_version(team_id)
            if current != expected:
                logger.warning("Version conflict for team=%d: expected=%d current=%d", team_id, expected, current)
                raise VersionConflictError(team_id, expected, current)
            rows = [self._event_to_row(team_id, current + i, event) for i, event in enumerate(events, start=1)]
            self._conn.executemany(
                """INSERT INTO roster_event
                       (team_id, sequence, kind, player_id, player_role, effective_at)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                rows,
            )
            self._conn.execute("COMMIT")
        except sqlite3.IntegrityError as e:
            self._conn.execute("ROLLBACK")
            raise VersionConflictError(team_id, expected, self._current_version(team_id)) from e
        except Exception:
            if self._conn.in_transaction:
                self._conn.execute("ROLLBACK")
            raise
        finally:
            self._conn.isolation_level = old_isolation

        new_version = Version(current + len(events))
        logger.debug("Appended %d events for team=%d: version %d -> %d", len(events), team_id, expected, new_version)
        return new_version

    def _current_version(self, team_id: TeamID) -> int:
        row = self._conn.execute(
            "SELECT COALESCE(MAX(sequence), 0) FROM roster_event WHERE team_id = ?",
            (team_id,),
        ).fetchone()
        return row[0]

    @staticmethod
    def _event_to_row(
        team_id: TeamID, sequence: int, event: RosterEvent
    ) -> tuple[int, int, str, int, str | None, str]:
        match event:
            case AddedPlayerToRoster():
                kind, role = _EventKind.ADDED, None
            case RemovedPlayerFromRoster():
                kind, role = _EventKind.REMOVED, None
            case ActivatedPlayerOnRoster(role=player_role):
                kind, role = _EventKind.ACTIVATED, str(player_role)
            case InactivatedPlayerOnRoster():
                kind, role = _EventKind.INACTIVATED, None
            case _:
                raise UnrecognizedRosterEventError(type(event).__name__)
        return (team_id, sequence, str(kind), event.player_id, role, event.effective_at.isoformat())

    @staticmethod
    def _row_to_recorded(row: sqlite3.Row) -> RecordedEvent[RosterEvent]:
        team_id = TeamID(row["team_id"])
        player_id = PlayerID(row["player_id"])
        effective_at = datetime.fromisoformat(row["effective_at"])
        event: RosterEvent
        match row["kind"]:
            case _EventKind.ADDED:
                event = AddedPlayerToRoster(team_id=team_id, player_id=player_id, effective_at=effective_at)
            case _EventKind.REMOVED:
                event = RemovedPlayerFromRoster(team_id=team_id, player_id=player_id, effective_at=effective_at)
            case _EventKind.ACTIVATED:
                event = ActivatedPlayerOnRoster(
                    team_id=team_id,
                    player_id=player_id,
                    role=PlayerRole(row["player_role"]),
                    effective_at=effective_at,
                )
            case _EventKind.INACTIVATED:
                event = InactivatedPlayerOnRoster(team_id=team_id, player_id=player_id, effective_at=effective_at)
            case kind:
                raise UnrecognizedRosterEventError(f"stored kind {kind!r} at sequence {row['sequence']}")
        return RecordedEvent(sequence=Sequence(row["sequence"]), event=event)
