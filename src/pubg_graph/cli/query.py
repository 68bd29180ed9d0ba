from __future__ import annotations

import typer

from pubg_graph.cli.common import echo_json, run_query
from pubg_graph.resolvers import accounts, matches, stats
from pubg_graph.upstream.pubg.keys import GameMode, Perspective

app = typer.Typer(help="Run a single query against the PUBG API and print JSON.")

GAME_MODE_OPTION = typer.Option(GameMode.solo, "--game-mode", help="solo, duo or squad.")
PERSPECTIVE_OPTION = typer.Option(Perspective.fpp, "--perspective", help="fpp or tpp.")


@app.command("account-id")
def account_id_cmd(username: str = typer.Argument(..., help="In-game player name.")) -> None:
    """Resolve a player name to its account id."""
    echo_json(run_query(lambda client: accounts.get_account_id(client, username)))


@app.command("seasons")
def seasons_cmd() -> None:
    """List every season known to the shard."""
    echo_json(run_query(accounts.get_seasons))


@app.command("current-season")
def current_season_cmd() -> None:
    echo_json(run_query(accounts.get_current_season))


@app.command("lifetime-stats")
def lifetime_stats_cmd(
    account_id: str = typer.Argument(...),
    game_mode: GameMode = GAME_MODE_OPTION,
    perspective: Perspective = PERSPECTIVE_OPTION,
) -> None:
    """Lifetime stats for one game mode / perspective."""
    echo_json(
        run_query(lambda client: stats.get_lifetime_stats(client, account_id, game_mode, perspective))
    )


@app.command("season-stats")
def season_stats_cmd(
    account_id: str = typer.Argument(...),
    season_id: str = typer.Argument(...),
    game_mode: GameMode = GAME_MODE_OPTION,
    perspective: Perspective = PERSPECTIVE_OPTION,
) -> None:
    echo_json(
        run_query(
            lambda client: stats.get_season_stats(
                client, account_id, season_id, game_mode, perspective
            )
        )
    )


@app.command("season-match-ids")
def season_match_ids_cmd(
    account_id: str = typer.Argument(...),
    season_id: str = typer.Argument(...),
    game_mode: GameMode = GAME_MODE_OPTION,
    perspective: Perspective = PERSPECTIVE_OPTION,
) -> None:
    echo_json(
        run_query(
            lambda client: stats.get_season_match_ids(
                client, account_id, season_id, game_mode, perspective
            )
        )
    )


@app.command("player-match-ids")
def player_match_ids_cmd(account_id: str = typer.Argument(...)) -> None:
    """Recent match ids for a player."""
    echo_json(run_query(lambda client: stats.get_player_match_ids(client, account_id)))


@app.command("match-stats")
def match_stats_cmd(match_id: str = typer.Argument(...)) -> None:
    """Teams, players and metadata of one match."""
    echo_json(run_query(lambda client: matches.get_match_stats(client, match_id)))
