import pytest

from dugout.domain.player import TeamID
from dugout.exceptions import (
    DugoutException,
    DuplicateRecordedEventSequenceError,
    EventOutsideViewWindowError,
    InvariantViolation,
    PlayerAlreadyOnRosterError,
    PlayerNotOnRosterError,
    UnrecognizedPlayerRoleError,
    UnrecognizedRosterEventError,
    UnrecognizedRosterStatusError,
    WrongTeamIDError,
)
from dugout.repos.errors import VersionConflictError
from dugout.repos.protocols import Version


class TestDugoutException:
    def test_is_exception(self) -> None:
        assert issubclass(DugoutException, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(DugoutException, match="test"):
            raise DugoutException("test")


class TestExceptionInheritance:
    @pytest.mark.parametrize(
        "cls",
        [
            WrongTeamIDError,
            EventOutsideViewWindowError,
            PlayerAlreadyOnRosterError,
            PlayerNotOnRosterError,
            UnrecognizedPlayerRoleError,
            UnrecognizedRosterStatusError,
            UnrecognizedRosterEventError,
            DuplicateRecordedEventSequenceError,
        ],
    )
    def test_invariant_violations(self, cls: type[InvariantViolation]) -> None:
        assert issubclass(cls, InvariantViolation)
        assert issubclass(cls, DugoutException)

    def test_version_conflict_is_not_an_invariant_violation(self) -> None:
        assert issubclass(VersionConflictError, DugoutException)
        assert not issubclass(VersionConflictError, InvariantViolation)


class TestVersionConflictError:
    def test_carries_versions(self) -> None:
        err = VersionConflictError(TeamID(7), Version(3), Version(5))
        assert err.team_id == 7
        assert err.expected == 3
        assert err.current == 5
        assert str(err) == "version conflict on team 7: expected 3, current 5"
