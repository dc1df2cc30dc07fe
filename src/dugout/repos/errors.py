from dugout.domain.player import TeamID
from dugout.exceptions import DugoutException


class VersionConflictError(DugoutException):
    def __init__(self, team_id: TeamID, expected: int, current: int) -> None:
        self.team_id = team_id
        self.expected = expected
        self.current = current
        super().__init__(f"version conflict on team {team_id}: expected {expected}, current {current}")
