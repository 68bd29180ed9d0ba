"""
Match breakdown: one match resource plus its side-loaded rosters and participants.

Rosters become teams and participants become players; both have their
`attributes.stats` spread flat onto the record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pubg_graph.core.errors import UpstreamDataError
from pubg_graph.upstream.pubg.client import PubgClient
from pubg_graph.upstream.pubg.jsonapi import Resource, dig, group_included, reference_ids
from pubg_graph.upstream.pubg.validators import validate_args

MatchStatsItem = dict[str, Any]

ROSTER_TYPE = "roster"
PARTICIPANT_TYPE = "participant"


def _stats(resource: Resource, *, path: str) -> Mapping[str, Any]:
    stats = dig(resource, "attributes", "stats", default={})
    if not isinstance(stats, Mapping):
        raise UpstreamDataError(
            f"{resource.get('type')} {resource.get('id')!r} has non-object stats", path=path
        )
    return stats


def _to_player(participant: Resource, *, path: str) -> dict[str, Any]:
    stats = _stats(participant, path=path)
    return {"id": participant.get("id"), **stats}


def _to_team(roster: Resource, *, path: str) -> dict[str, Any]:
    relationships = roster.get("relationships")
    if relationships is None:
        raise UpstreamDataError(f"Roster {roster.get('id')!r} has no relationships", path=path)

    stats = _stats(roster, path=path)
    return {
        "id": roster.get("id"),
        **stats,
        # Upstream sends `won` as the string "true"/"false".
        "won": dig(roster, "attributes", "won") == "true",
        "playerIds": reference_ids(dig(relationships, "participants", default={})),
    }


async def get_match_stats(client: PubgClient, match_id: str) -> MatchStatsItem:
    validate_args({"matchId": match_id}, ("matchId",))

    path = f"/matches/{match_id}"
    envelope = await client.fetch(path)
    match = envelope["data"]

    included = group_included(envelope.get("included"))
    rosters = included.get(ROSTER_TYPE, [])
    participants = included.get(PARTICIPANT_TYPE, [])

    return {
        "id": dig(match, "id"),
        "meta": dict(dig(match, "attributes", default={})),
        "teams": [_to_team(roster, path=path) for roster in rosters],
        "players": [_to_player(participant, path=path) for participant in participants],
    }
