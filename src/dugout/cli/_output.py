from rich.console import Console
from rich.table import Table

from dugout.domain.recorded_event import RecordedEvent
from dugout.domain.roster_command import ActivatePlayer, AddPlayer, InactivatePlayer, RemovePlayer, RosterCommand
from dugout.domain.roster_event import (
    ActivatedPlayerOnRoster,
    AddedPlayerToRoster,
    InactivatedPlayerOnRoster,
    RemovedPlayerFromRoster,
    RosterEvent,
)
from dugout.domain.roster_view import RosterView
from dugout.repos.protocols import Version

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _describe_command(command: RosterCommand) -> str:
    match command:
        case AddPlayer(player_id=player_id):
            return f"Added player {player_id}"
        case RemovePlayer(player_id=player_id):
            return f"Removed player {player_id}"
        case ActivatePlayer(player_id=player_id, role=role):
            return f"Activated player {player_id} as {role}"
        case InactivatePlayer(player_id=player_id):
            return f"Inactivated player {player_id}"
    return type(command).__name__


def _describe_event(event: RosterEvent) -> tuple[str, str]:
    match event:
        case AddedPlayerToRoster():
            return "added", ""
        case RemovedPlayerFromRoster():
            return "removed", ""
        case ActivatedPlayerOnRoster(role=role):
            return "activated", str(role)
        case InactivatedPlayerOnRoster():
            return "inactivated", ""
    return type(event).__name__, ""


def print_command_committed(command: RosterCommand, version: Version) -> None:
    console.print(f"[bold green]{_describe_command(command)}[/bold green] on team {command.team_id}")
    console.print(f"  Stream version: {version}")


def print_roster_view(view: RosterView) -> None:
    console.print(f"Roster for team [bold]{view.team_id}[/bold] through {view.effective_through.isoformat()}")
    if not view.entries:
        console.print("No players on roster.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player", justify="right")
    table.add_column("Status")
    for entry in view.entries:
        table.add_row(str(entry.player_id), str(entry.status))
    console.print(table)
    counts = view.counts()
    console.print(
        f"  Total: {counts.total}  Active hitters: {counts.active_hitters}  "
        f"Active pitchers: {counts.active_pitchers}  Inactive: {counts.inactive}"
    )


def print_roster_history(team_id: int, events: list[RecordedEvent[RosterEvent]]) -> None:
    if not events:
        console.print(f"No roster events for team {team_id}.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Seq", justify="right")
    table.add_column("Event")
    table.add_column("Player", justify="right")
    table.add_column("Role")
    table.add_column("Effective")
    for recorded in events:
        kind, role = _describe_event(recorded.event)
        table.add_row(
            str(recorded.sequence),
            kind,
            str(recorded.event.player_id),
            role,
            recorded.event.effective_at.isoformat(),
        )
    console.print(table)
