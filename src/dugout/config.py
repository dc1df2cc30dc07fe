from __future__ import annotations

from datetime import datetime, time
from pathlib import Path
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from dugout.domain.errors import ConfigError
from dugout.domain.result import Err, Ok, Result
from dugout.league.lock import DailyLeagueLock

if TYPE_CHECKING:
    from collections.abc import Callable

_DEFAULTS: dict[str, object] = {
    "db": {
        "path": "~/.config/dugout/dugout.db",
    },
    "league": {
        "lock_time": "00:00",
        "timezone": "America/New_York",
    },
}


def create_config(
    yaml_path: str = "dugout.yaml",
    env_prefix: str = "DUGOUT",
    defaults: dict[str, object] | None = None,
    *,
    db_path: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``DUGOUT__LEAGUE__TIMEZONE``.
        defaults: Default configuration values.
        db_path: Override the event store database path.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if db_path is not None:
        layers.insert(0, config_from_dict({"db": {"path": db_path}}))

    return ConfigurationSet(*layers)


def load_db_path(cfg: ConfigurationSet) -> Path:
    return Path(str(cfg["db.path"])).expanduser()


def load_league_lock(
    cfg: ConfigurationSet,
    clock: Callable[[], datetime] | None = None,
) -> Result[DailyLeagueLock, ConfigError]:
    parsed_time = _parse_lock_time(cfg["league.lock_time"])
    if isinstance(parsed_time, Err):
        return parsed_time
    lock_time = parsed_time.value

    raw_tz = str(cfg["league.timezone"])
    try:
        tz = ZoneInfo(raw_tz)
    except (ZoneInfoNotFoundError, ValueError):
        return Err(ConfigError(f"unknown time zone '{raw_tz}'", key="league.timezone"))

    if clock is None:
        return Ok(DailyLeagueLock(lock_time, tz))
    return Ok(DailyLeagueLock(lock_time, tz, clock=clock))


def _parse_lock_time(raw: object) -> Result[time, ConfigError]:
    # Unquoted YAML times such as 19:05 load as base-60 integers.
    if not isinstance(raw, str):
        return Err(
            ConfigError(f"lock time must be a quoted 'HH:MM' string, got {raw!r}", key="league.lock_time")
        )
    try:
        return Ok(datetime.strptime(raw, "%H:%M").time())
    except ValueError:
        return Err(ConfigError(f"invalid lock time '{raw}', expected HH:MM", key="league.lock_time"))
