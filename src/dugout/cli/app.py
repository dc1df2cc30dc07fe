from datetime import datetime
from typing import Annotated

import typer

from dugout.cli._logging import configure_logging
from dugout.cli._output import (
    print_command_committed,
    print_error,
    print_roster_history,
    print_roster_view,
)
from dugout.cli.factory import RosterSettings, build_roster_context, load_roster_settings
from dugout.domain.player import PlayerID, PlayerRole, TeamID
from dugout.domain.result import Err, Ok
from dugout.domain.roster_command import ActivatePlayer, AddPlayer, InactivatePlayer, RemovePlayer, RosterCommand
from dugout.repos.errors import VersionConflictError

app = typer.Typer(name="dugout", help="Dugout - event-sourced team roster manager")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Dugout - event-sourced team roster manager."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


roster_app = typer.Typer(name="roster", help="Change and inspect team rosters")
app.add_typer(roster_app, name="roster")

_TeamArg = Annotated[int, typer.Argument(help="Team ID")]
_PlayerArg = Annotated[int, typer.Argument(help="Player ID")]
_DbOpt = Annotated[str | None, typer.Option("--db", help="Path to the roster event database")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to the YAML config file")]


def _load_settings(config_path: str, db_path: str | None) -> RosterSettings:
    result = load_roster_settings(config_path, db_path)
    if isinstance(result, Err):
        print_error(f"{result.error.message} ({result.error.key})")
        raise typer.Exit(code=1)
    return result.value


def _parse_instant(value: str) -> datetime:
    try:
        instant = datetime.fromisoformat(value)
    except ValueError:
        print_error(f"invalid --at value '{value}', expected 'last', 'next', or an ISO-8601 instant")
        raise typer.Exit(code=1)
    if instant.tzinfo is None:
        print_error(f"--at value '{value}' must include a UTC offset")
        raise typer.Exit(code=1)
    return instant


def _run_command(command: RosterCommand, config_path: str, db_path: str | None) -> None:
    settings = _load_settings(config_path, db_path)
    with build_roster_context(settings) as ctx:
        try:
            result = ctx.handler.handle(command)
        except VersionConflictError as e:
            print_error(f"{e}; reload and try again")
            raise typer.Exit(code=1)
    match result:
        case Ok(version):
            print_command_committed(command, version)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@roster_app.command("add")
def roster_add(
    team: _TeamArg,
    player: _PlayerArg,
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """Add a player to a team's roster at the next lock."""
    _run_command(AddPlayer(team_id=TeamID(team), player_id=PlayerID(player)), config, db)


@roster_app.command("remove")
def roster_remove(
    team: _TeamArg,
    player: _PlayerArg,
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """Remove a player from a team's roster at the next lock."""
    _run_command(RemovePlayer(team_id=TeamID(team), player_id=PlayerID(player)), config, db)


@roster_app.command("activate")
def roster_activate(
    team: _TeamArg,
    player: _PlayerArg,
    role: Annotated[PlayerRole, typer.Option("--role", help="Activate as a hitter or a pitcher")],
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """Activate an inactive player at the next lock."""
    _run_command(ActivatePlayer(team_id=TeamID(team), player_id=PlayerID(player), role=role), config, db)


@roster_app.command("inactivate")
def roster_inactivate(
    team: _TeamArg,
    player: _PlayerArg,
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """Move an active player to the inactive list at the next lock."""
    _run_command(InactivatePlayer(team_id=TeamID(team), player_id=PlayerID(player)), config, db)


@roster_app.command("show")
def roster_show(
    team: _TeamArg,
    at: Annotated[
        str, typer.Option("--at", help="'last' lock, 'next' lock, or an ISO-8601 instant with offset")
    ] = "last",
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """Show a team's roster as of a point in time."""
    through = None if at in ("last", "next") else _parse_instant(at)

    settings = _load_settings(config, db)
    with build_roster_context(settings) as ctx:
        if through is not None:
            view = ctx.query.view_through(TeamID(team), through)
        elif at == "next":
            view = ctx.query.upcoming_view(TeamID(team))
        else:
            view = ctx.query.current_view(TeamID(team))
    print_roster_view(view)


@roster_app.command("history")
def roster_history(
    team: _TeamArg,
    db: _DbOpt = None,
    config: _ConfigOpt = "dugout.yaml",
) -> None:
    """List a team's committed roster events in sequence order."""
    settings = _load_settings(config, db)
    with build_roster_context(settings) as ctx:
        events = ctx.query.history(TeamID(team))
    print_roster_history(team, events)
