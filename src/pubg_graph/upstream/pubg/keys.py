from __future__ import annotations

from enum import Enum


class GameMode(str, Enum):
    solo = "solo"
    duo = "duo"
    squad = "squad"


class Perspective(str, Enum):
    fpp = "fpp"
    tpp = "tpp"


def _capitalize(value: str) -> str:
    # str.capitalize() would lowercase the tail.
    return value[:1].upper() + value[1:]


def mode_key(game_mode: GameMode | str, perspective: Perspective | str) -> str:
    """Key of a per-mode block under `attributes.gameModeStats`, e.g. `squad-fpp`."""
    mode = GameMode(game_mode).value
    if Perspective(perspective) is Perspective.fpp:
        return f"{mode}-fpp"
    return mode


def matches_key(game_mode: GameMode | str, perspective: Perspective | str) -> str:
    """Key of a season's match list under `relationships`, e.g. `matchesSquadFPP`."""
    mode = GameMode(game_mode).value
    suffix = "FPP" if Perspective(perspective) is Perspective.fpp else ""
    return f"matches{_capitalize(mode)}{suffix}"
