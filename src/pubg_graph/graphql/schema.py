from typing import Optional

import strawberry
from strawberry.types import Info

from pubg_graph.resolvers import accounts, matches, stats
from pubg_graph.upstream.pubg.client import PubgClient
from pubg_graph.graphql.types import (
    GameMode,
    GameModeStats,
    MatchStats,
    Perspective,
    Season,
    from_payload,
)


def _client(info: Info) -> PubgClient:
    return info.context["client"]


@strawberry.type
class Query:
    @strawberry.field
    async def get_account_id(self, info: Info, username: str) -> str:
        return await accounts.get_account_id(_client(info), username)

    @strawberry.field
    async def get_lifetime_stats(
        self,
        info: Info,
        account_id: str,
        game_mode: GameMode = GameMode.solo,
        perspective: Perspective = Perspective.fpp,
    ) -> GameModeStats:
        item = await stats.get_lifetime_stats(_client(info), account_id, game_mode, perspective)
        return from_payload(GameModeStats, item)

    @strawberry.field
    async def get_seasons(self, info: Info) -> list[Season]:
        items = await accounts.get_seasons(_client(info))
        return [from_payload(Season, item) for item in items]

    @strawberry.field
    async def get_current_season(self, info: Info) -> Optional[Season]:
        item = await accounts.get_current_season(_client(info))
        return from_payload(Season, item) if item else None

    @strawberry.field
    async def get_season_stats(
        self,
        info: Info,
        account_id: str,
        season_id: str,
        game_mode: GameMode = GameMode.solo,
        perspective: Perspective = Perspective.fpp,
    ) -> GameModeStats:
        item = await stats.get_season_stats(
            _client(info), account_id, season_id, game_mode, perspective
        )
        return from_payload(GameModeStats, item)

    @strawberry.field
    async def get_season_match_ids(
        self,
        info: Info,
        account_id: str,
        season_id: str,
        game_mode: GameMode = GameMode.solo,
        perspective: Perspective = Perspective.fpp,
    ) -> list[str]:
        return await stats.get_season_match_ids(
            _client(info), account_id, season_id, game_mode, perspective
        )

    @strawberry.field
    async def get_player_match_ids(self, info: Info, account_id: str) -> list[str]:
        return await stats.get_player_match_ids(_client(info), account_id)

    @strawberry.field
    async def get_match_stats(self, info: Info, match_id: str) -> MatchStats:
        item = await matches.get_match_stats(_client(info), match_id)
        return MatchStats.from_item(item)


schema = strawberry.Schema(query=Query)
