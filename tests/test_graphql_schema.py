from __future__ import annotations

import asyncio
from typing import Any

from fastapi.testclient import TestClient

from pubg_graph.core.config import Settings
from pubg_graph.graphql.app import create_app
from pubg_graph.graphql.schema import schema

from conftest import BASE_URL, FakeUpstream


def _execute(upstream: FakeUpstream, query: str, **variables: Any):
    return asyncio.run(
        schema.execute(
            query,
            variable_values=variables or None,
            context_value={"client": upstream.client()},
        )
    )


def test_schema_exposes_all_query_fields() -> None:
    fields = set(schema._schema.query_type.fields)
    assert fields == {
        "getAccountId",
        "getLifetimeStats",
        "getSeasons",
        "getCurrentSeason",
        "getSeasonStats",
        "getSeasonMatchIds",
        "getPlayerMatchIds",
        "getMatchStats",
    }


def test_get_account_id_query(upstream: FakeUpstream) -> None:
    upstream.routes["/players"] = {"data": [{"id": "account.123", "type": "player"}]}

    result = _execute(upstream, '{ getAccountId(username: "shroud") }')

    assert result.errors is None
    assert result.data == {"getAccountId": "account.123"}


def test_lifetime_stats_defaults_to_solo_fpp(upstream: FakeUpstream) -> None:
    upstream.routes["/players/account.123/seasons/lifetime"] = {
        "data": {
            "attributes": {
                "gameModeStats": {
                    "solo-fpp": {"kills": 4, "dBNOs": 0, "rankPointsTitle": "0-0", "top10s": 2},
                    "solo": {"kills": 99},
                }
            }
        }
    }

    result = _execute(
        upstream,
        '{ getLifetimeStats(accountId: "account.123") { kills dBNOs rankPointsTitle top10s wins } }',
    )

    assert result.errors is None
    assert result.data == {
        "getLifetimeStats": {
            "kills": 4,
            "dBNOs": 0,
            "rankPointsTitle": "0-0",
            "top10s": 2,
            "wins": None,
        }
    }


def test_current_season_and_enum_arguments(upstream: FakeUpstream) -> None:
    upstream.routes["/seasons"] = {
        "data": [{"id": "s1", "attributes": {"isCurrentSeason": True, "isOffSeason": False}}]
    }
    upstream.routes["/players/account.123/seasons/s1"] = {
        "data": {"relationships": {"matchesDuo": {"data": [{"id": "m1"}]}}}
    }

    result = _execute(
        upstream,
        """
        query ($gm: GameMode!, $p: Perspective!) {
          getCurrentSeason { id isCurrentSeason isOffSeason }
          getSeasonMatchIds(accountId: "account.123", seasonId: "s1", gameMode: $gm, perspective: $p)
        }
        """,
        gm="duo",
        p="tpp",
    )

    assert result.errors is None
    assert result.data == {
        "getCurrentSeason": {"id": "s1", "isCurrentSeason": True, "isOffSeason": False},
        "getSeasonMatchIds": ["m1"],
    }


def test_match_stats_query(upstream: FakeUpstream) -> None:
    upstream.routes["/matches/match.1"] = {
        "data": {"id": "match.1", "attributes": {"mapName": "Erangel_Main", "duration": 1700}},
        "included": [
            {
                "type": "roster",
                "id": "r1",
                "attributes": {"won": "true", "stats": {"rank": 1, "teamId": 2}},
                "relationships": {"participants": {"data": [{"id": "p1"}]}},
            },
            {"type": "participant", "id": "p1", "attributes": {"stats": {"kills": 3, "DBNOs": 1}}},
        ],
    }

    result = _execute(
        upstream,
        """
        {
          getMatchStats(matchId: "match.1") {
            id
            meta { mapName duration }
            teams { id rank teamId won playerIds }
            players { id kills DBNOs }
          }
        }
        """,
    )

    assert result.errors is None
    assert result.data == {
        "getMatchStats": {
            "id": "match.1",
            "meta": {"mapName": "Erangel_Main", "duration": 1700},
            "teams": [{"id": "r1", "rank": 1, "teamId": 2, "won": True, "playerIds": ["p1"]}],
            "players": [{"id": "p1", "kills": 3, "DBNOs": 1}],
        }
    }


def test_failures_surface_as_field_errors(upstream: FakeUpstream) -> None:
    result = _execute(upstream, '{ getAccountId(username: "") }')

    assert result.data is None
    assert result.errors is not None
    assert result.errors[0].message == "Must provide username"
    assert result.errors[0].path == ["getAccountId"]
    assert upstream.requests == []


def test_http_app_serves_graphql_and_health(upstream: FakeUpstream) -> None:
    upstream.routes["/players"] = {"data": [{"id": "account.123", "type": "player"}]}
    settings = Settings(pubg_api_key="k", pubg_base_url=BASE_URL, graphql_path="/graphql")

    with TestClient(create_app(settings, transport=upstream.transport)) as http:
        assert http.get("/health").json() == {"status": "ok"}
        resp = http.post("/graphql", json={"query": '{ getAccountId(username: "shroud") }'})

    assert resp.status_code == 200
    assert resp.json() == {"data": {"getAccountId": "account.123"}}
    assert upstream.requests[0].headers["Authorization"] == "Bearer k"
