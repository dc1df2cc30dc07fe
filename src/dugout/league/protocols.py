from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class LeagueLock(Protocol):
    def last_lock(self) -> datetime: ...

    def next_lock(self) -> datetime: ...
