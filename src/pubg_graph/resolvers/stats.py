from __future__ import annotations

from typing import Any

from pubg_graph.upstream.pubg.client import Envelope, PubgClient
from pubg_graph.upstream.pubg.jsonapi import dig, reference_ids
from pubg_graph.upstream.pubg.keys import GameMode, Perspective, matches_key, mode_key
from pubg_graph.upstream.pubg.validators import validate_args, validate_mode

GameModeStatsItem = dict[str, Any]


def _game_mode_stats(envelope: Envelope, key: str) -> GameModeStatsItem:
    return dict(dig(envelope, "data", "attributes", "gameModeStats", key, default={}))


async def get_lifetime_stats(
    client: PubgClient,
    account_id: str,
    game_mode: GameMode | str = GameMode.solo,
    perspective: Perspective | str = Perspective.fpp,
) -> GameModeStatsItem:
    validate_args(
        {"accountId": account_id, "gameMode": game_mode, "perspective": perspective},
        ("accountId", "gameMode", "perspective"),
    )
    key = mode_key(*validate_mode(game_mode, perspective))

    envelope = await client.fetch(f"/players/{account_id}/seasons/lifetime")
    return _game_mode_stats(envelope, key)


async def get_season_stats(
    client: PubgClient,
    account_id: str,
    season_id: str,
    game_mode: GameMode | str = GameMode.solo,
    perspective: Perspective | str = Perspective.fpp,
) -> GameModeStatsItem:
    validate_args(
        {
            "accountId": account_id,
            "seasonId": season_id,
            "gameMode": game_mode,
            "perspective": perspective,
        },
        ("accountId", "seasonId", "gameMode", "perspective"),
    )
    key = mode_key(*validate_mode(game_mode, perspective))

    envelope = await client.fetch(f"/players/{account_id}/seasons/{season_id}")
    return _game_mode_stats(envelope, key)


async def get_season_match_ids(
    client: PubgClient,
    account_id: str,
    season_id: str,
    game_mode: GameMode | str = GameMode.solo,
    perspective: Perspective | str = Perspective.fpp,
) -> list[str]:
    validate_args(
        {
            "accountId": account_id,
            "seasonId": season_id,
            "gameMode": game_mode,
            "perspective": perspective,
        },
        ("accountId", "seasonId", "gameMode", "perspective"),
    )
    key = matches_key(*validate_mode(game_mode, perspective))

    envelope = await client.fetch(f"/players/{account_id}/seasons/{season_id}")
    return reference_ids(dig(envelope, "data", "relationships", key, default={}))


async def get_player_match_ids(client: PubgClient, account_id: str) -> list[str]:
    validate_args({"accountId": account_id}, ("accountId",))
    envelope = await client.fetch(f"/players/{account_id}")
    return reference_ids(dig(envelope, "data", "relationships", "matches", default={}))
