from enum import StrEnum
from typing import NewType

TeamID = NewType("TeamID", int)
PlayerID = NewType("PlayerID", int)


class PlayerRole(StrEnum):
    HITTER = "hitter"
    PITCHER = "pitcher"
