from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DailyLeagueLock:
    """Rosters lock once a day at ``lock_time`` in the league's time zone.

    Locks are compared with the clock as UTC instants. Two datetimes sharing
    one ZoneInfo compare by wall time and ignore ``fold``, which misorders
    them during the repeated hour when daylight saving time ends.
    """

    def __init__(self, lock_time: time, tz: ZoneInfo, clock: Callable[[], datetime] = _utc_now) -> None:
        self._lock_time = lock_time
        self._tz = tz
        self._clock = clock

    def last_lock(self) -> datetime:
        """Most recent lock at or before now."""
        now = self._clock().astimezone(UTC)
        day = now.astimezone(self._tz).date()
        today = self._lock_on(day)
        if today.astimezone(UTC) <= now:
            return today
        return self._lock_on(day - timedelta(days=1))

    def next_lock(self) -> datetime:
        """First lock strictly after now."""
        now = self._clock().astimezone(UTC)
        day = now.astimezone(self._tz).date()
        today = self._lock_on(day)
        if today.astimezone(UTC) > now:
            return today
        return self._lock_on(day + timedelta(days=1))

    def _lock_on(self, day: date) -> datetime:
        return datetime.combine(day, self._lock_time, tzinfo=self._tz)
