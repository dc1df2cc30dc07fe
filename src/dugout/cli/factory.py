import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from dugout.config import create_config, load_db_path, load_league_lock
from dugout.db.connection import create_connection
from dugout.domain.errors import ConfigError
from dugout.domain.result import Err, Ok, Result
from dugout.league.protocols import LeagueLock
from dugout.repos.roster_event_repo import SqliteRosterEventRepo
from dugout.services.roster_commands import RosterCommandHandler
from dugout.services.roster_query import RosterQueryService


@dataclass(frozen=True)
class RosterSettings:
    db_path: Path
    lock: LeagueLock


@dataclass(frozen=True)
class RosterContext:
    conn: sqlite3.Connection
    handler: RosterCommandHandler
    query: RosterQueryService


def load_roster_settings(config_path: str, db_path: str | None = None) -> Result[RosterSettings, ConfigError]:
    cfg = create_config(yaml_path=config_path, db_path=db_path)
    match load_league_lock(cfg):
        case Ok(lock):
            return Ok(RosterSettings(db_path=load_db_path(cfg), lock=lock))
        case Err(e):
            return Err(e)


@contextmanager
def build_roster_context(settings: RosterSettings) -> Iterator[RosterContext]:
    """Composition-root context manager: opens DB, wires store + handler + queries, yields context, closes DB."""
    conn = create_connection(settings.db_path)
    try:
        store = SqliteRosterEventRepo(conn)
        yield RosterContext(
            conn=conn,
            handler=RosterCommandHandler(store, settings.lock),
            query=RosterQueryService(store, settings.lock),
        )
    finally:
        conn.close()
