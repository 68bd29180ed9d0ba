from __future__ import annotations

from typing import Any

from pubg_graph.upstream.pubg.client import PubgClient
from pubg_graph.upstream.pubg.jsonapi import dig
from pubg_graph.upstream.pubg.validators import validate_args

SeasonItem = dict[str, Any]


async def get_account_id(client: PubgClient, username: str) -> str:
    validate_args({"username": username}, ("username",))

    envelope = await client.fetch(
        "/players", is_array=True, params={"filter[playerNames]": username}
    )
    # validate_response already guarantees a truthy first element; the empty
    # string fallback only covers a player resource without an id.
    player = envelope["data"][0] or {}
    return player.get("id") or ""


def _to_season(resource: Any) -> SeasonItem:
    return {
        "id": dig(resource, "id"),
        "isCurrentSeason": bool(dig(resource, "attributes", "isCurrentSeason", default=False)),
        "isOffSeason": bool(dig(resource, "attributes", "isOffSeason", default=False)),
    }


async def get_seasons(client: PubgClient) -> list[SeasonItem]:
    envelope = await client.fetch("/seasons", is_array=True)
    # Season.id is non-null in the schema; resources without one are skipped.
    return [
        _to_season(resource)
        for resource in envelope["data"]
        if dig(resource, "id") is not None
    ]


async def get_current_season(client: PubgClient) -> SeasonItem | None:
    seasons = await get_seasons(client)
    return next((s for s in seasons if s["isCurrentSeason"]), None)
