from dataclasses import dataclass
from typing import NewType

Sequence = NewType("Sequence", int)


@dataclass(frozen=True)
class RecordedEvent[E]:
    """An event as committed to the log, stamped with its store-assigned sequence."""

    sequence: Sequence
    event: E
