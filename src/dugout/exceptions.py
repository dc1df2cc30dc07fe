class DugoutException(Exception):
    """Base class for all exceptions raised by dugout."""


class InvariantViolation(DugoutException):
    """A precondition the roster core assumes was upheld upstream did not hold.

    These indicate a bug in the caller or corrupt stored history. They are
    raised, never returned, and the core makes no attempt to recover.
    """


class WrongTeamIDError(InvariantViolation):
    pass


class EventOutsideViewWindowError(InvariantViolation):
    pass


class PlayerAlreadyOnRosterError(InvariantViolation):
    pass


class PlayerNotOnRosterError(InvariantViolation):
    pass


class UnrecognizedPlayerRoleError(InvariantViolation):
    pass


class UnrecognizedRosterStatusError(InvariantViolation):
    pass


class UnrecognizedRosterEventError(InvariantViolation):
    pass


class DuplicateRecordedEventSequenceError(InvariantViolation):
    pass
