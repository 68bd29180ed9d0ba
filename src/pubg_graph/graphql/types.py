from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

import strawberry
from strawberry.utils.str_converters import to_camel_case

from pubg_graph.upstream.pubg.keys import GameMode as GameModeEnum
from pubg_graph.upstream.pubg.keys import Perspective as PerspectiveEnum

GameMode = strawberry.enum(GameModeEnum, name="GameMode")
Perspective = strawberry.enum(PerspectiveEnum, name="Perspective")

T = TypeVar("T")


def from_payload(cls: type[T], payload: Mapping[str, Any] | None, **overrides: Any) -> T:
    """Build a strawberry type from an upstream camelCase mapping; unknown keys are dropped."""
    payload = payload or {}
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = getattr(f, "graphql_name", None) or to_camel_case(f.name)
        if key in payload:
            kwargs[f.name] = payload[key]
    kwargs.update(overrides)
    return cls(**kwargs)


@strawberry.type
class Season:
    id: str
    is_current_season: bool = False
    is_off_season: bool = False


@strawberry.type
class GameModeStats:
    assists: Optional[int] = None
    boosts: Optional[int] = None
    d_bnos: Optional[int] = strawberry.field(name="dBNOs", default=None)
    daily_kills: Optional[int] = None
    daily_wins: Optional[int] = None
    damage_dealt: Optional[float] = None
    days: Optional[int] = None
    headshot_kills: Optional[int] = None
    heals: Optional[int] = None
    kill_points: Optional[float] = None
    kills: Optional[int] = None
    longest_kill: Optional[float] = None
    longest_time_survived: Optional[float] = None
    losses: Optional[int] = None
    max_kill_streaks: Optional[int] = None
    most_survival_time: Optional[float] = None
    rank_points: Optional[float] = None
    rank_points_title: Optional[str] = None
    revives: Optional[int] = None
    ride_distance: Optional[float] = None
    road_kills: Optional[int] = None
    round_most_kills: Optional[int] = None
    rounds_played: Optional[int] = None
    suicides: Optional[int] = None
    swim_distance: Optional[float] = None
    team_kills: Optional[int] = None
    time_survived: Optional[float] = None
    top10s: Optional[int] = None
    vehicle_destroys: Optional[int] = None
    walk_distance: Optional[float] = None
    weapons_acquired: Optional[int] = None
    weekly_kills: Optional[int] = None
    weekly_wins: Optional[int] = None
    win_points: Optional[float] = None
    wins: Optional[int] = None


@strawberry.type
class MatchMeta:
    created_at: Optional[str] = None
    duration: Optional[int] = None
    game_mode: Optional[str] = None
    map_name: Optional[str] = None
    is_custom_match: Optional[bool] = None
    match_type: Optional[str] = None
    season_state: Optional[str] = None
    shard_id: Optional[str] = None
    title_id: Optional[str] = None


@strawberry.type
class Team:
    id: Optional[str] = None
    rank: Optional[int] = None
    team_id: Optional[int] = None
    won: bool = False
    player_ids: list[str] = strawberry.field(default_factory=list)


@strawberry.type
class Player:
    id: Optional[str] = None
    dbnos: Optional[int] = strawberry.field(name="DBNOs", default=None)
    assists: Optional[int] = None
    boosts: Optional[int] = None
    damage_dealt: Optional[float] = None
    death_type: Optional[str] = None
    headshot_kills: Optional[int] = None
    heals: Optional[int] = None
    kill_place: Optional[int] = None
    kill_streaks: Optional[int] = None
    kills: Optional[int] = None
    longest_kill: Optional[float] = None
    name: Optional[str] = None
    player_id: Optional[str] = None
    revives: Optional[int] = None
    ride_distance: Optional[float] = None
    road_kills: Optional[int] = None
    swim_distance: Optional[float] = None
    team_kills: Optional[int] = None
    time_survived: Optional[float] = None
    vehicle_destroys: Optional[int] = None
    walk_distance: Optional[float] = None
    weapons_acquired: Optional[int] = None
    win_place: Optional[int] = None


@strawberry.type
class MatchStats:
    id: Optional[str]
    meta: MatchMeta
    teams: list[Team]
    players: list[Player]

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> MatchStats:
        return cls(
            id=item.get("id"),
            meta=from_payload(MatchMeta, item.get("meta")),
            teams=[from_payload(Team, team) for team in item.get("teams", [])],
            players=[from_payload(Player, player) for player in item.get("players", [])],
        )
