from dataclasses import dataclass

from dugout.domain.player import PlayerID, TeamID


@dataclass(frozen=True)
class DugoutError:
    message: str


@dataclass(frozen=True)
class ConfigError(DugoutError):
    key: str


@dataclass(frozen=True)
class RosterError(DugoutError):
    """A command rejected by roster business rules. Safe to show to a user."""

    team_id: TeamID
    player_id: PlayerID


@dataclass(frozen=True)
class RosterFull(RosterError):
    pass


@dataclass(frozen=True)
class PlayerAlreadyOnRoster(RosterError):
    pass


@dataclass(frozen=True)
class PlayerNotOnRoster(RosterError):
    pass


@dataclass(frozen=True)
class PlayerAlreadyActive(RosterError):
    pass


@dataclass(frozen=True)
class PlayerAlreadyInactive(RosterError):
    pass


@dataclass(frozen=True)
class ActiveHittersFull(RosterError):
    pass


@dataclass(frozen=True)
class ActivePitchersFull(RosterError):
    pass


@dataclass(frozen=True)
class UnrecognizedPlayerRole(RosterError):
    pass


@dataclass(frozen=True)
class UnrecognizedRosterStatus(RosterError):
    pass
