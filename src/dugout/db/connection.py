import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

_MIGRATIONS_DIR = Path(__file__).parent / "migrations"
_MEMORY = ":memory:"


def create_connection(path: str | Path) -> sqlite3.Connection:
    """Open the roster event database, creating it and applying migrations as needed.

    File databases use WAL so readers are not blocked by an appending writer.
    The busy timeout lets a second writer wait out another's ``BEGIN IMMEDIATE``.
    """
    file_backed = str(path) != _MEMORY
    if file_backed:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), timeout=5.0)
    conn.row_factory = sqlite3.Row
    if file_backed:
        conn.execute("PRAGMA journal_mode=WAL")
    _migrate(conn)
    return conn


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Return the highest applied migration number, or 0 if none have run."""
    try:
        row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    except sqlite3.OperationalError:
        return 0
    return row[0] or 0


def _migrate(conn: sqlite3.Connection) -> None:
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_version ("
        " version INTEGER PRIMARY KEY,"
        " applied_at TEXT NOT NULL DEFAULT (datetime('now')))"
    )
    conn.commit()

    applied = get_schema_version(conn)
    for script in sorted(_MIGRATIONS_DIR.glob("*.sql")):
        number = int(script.stem.split("_", 1)[0])
        if number > applied:
            _apply(conn, number, script.read_text())


def _apply(conn: sqlite3.Connection, number: int, sql: str) -> None:
    # DDL and the version bump commit together or not at all.
    old_isolation = conn.isolation_level
    conn.isolation_level = None
    try:
        conn.execute("BEGIN")
        for statement in filter(None, (s.strip() for s in sql.split(";"))):
            conn.execute(statement)
        conn.execute("INSERT INTO schema_version (version) VALUES (?)", (number,))
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    finally:
        conn.isolation_level = old_isolation
    logger.debug("Applied migration %03d", number)
