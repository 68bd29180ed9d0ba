from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pubg_graph.core.config import UpstreamConfig
from pubg_graph.core.errors import (
    InvalidArgument,
    MissingArgument,
    MissingCredential,
    UpstreamDataError,
)
from pubg_graph.upstream.pubg.keys import GameMode, Perspective


def validate_args(args: Mapping[str, Any], required: Iterable[str]) -> None:
    # Falsy values ("", 0, None) count as missing.
    for name in required:
        if not args.get(name):
            raise MissingArgument(name)


def validate_mode(
    game_mode: GameMode | str, perspective: Perspective | str
) -> tuple[GameMode, Perspective]:
    try:
        mode = GameMode(game_mode)
    except ValueError as e:
        raise InvalidArgument("gameMode", game_mode) from e
    try:
        view = Perspective(perspective)
    except ValueError as e:
        raise InvalidArgument("perspective", perspective) from e
    return mode, view


def validate_api_key(config: UpstreamConfig) -> None:
    if not config.api_key:
        raise MissingCredential()


def validate_response(envelope: Any, is_array: bool = False, *, path: str | None = None) -> None:
    """Reject envelopes that carry no usable `data`.

    Array responses need a non-empty list whose first element is truthy;
    object responses need a non-empty `data` value.
    """
    if not envelope or not isinstance(envelope, Mapping):
        raise UpstreamDataError(path=path)

    data = envelope.get("data")
    if not data:
        raise UpstreamDataError(path=path)

    if is_array and (not isinstance(data, list) or not data[0]):
        raise UpstreamDataError(path=path)
