from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import typer

from pubg_graph.core.config import settings
from pubg_graph.core.errors import PubgGraphError
from pubg_graph.upstream.pubg.client import PubgClient

T = TypeVar("T")


@asynccontextmanager
async def client_scope() -> AsyncIterator[PubgClient]:
    """
    Context-managed PUBG client for CLI commands.
    Ensures the underlying HTTP connection pool is closed.
    """
    client = PubgClient.from_config(settings.upstream_config())
    try:
        yield client
    finally:
        await client.aclose()


def run_query(fn: Callable[[PubgClient], Awaitable[T]]) -> T:
    """Run one resolver; known failures print their message and exit with status 1."""

    async def _run() -> T:
        async with client_scope() as client:
            return await fn(client)

    try:
        return asyncio.run(_run())
    except PubgGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def echo_json(value: Any) -> None:
    typer.echo(json.dumps(value, indent=2, sort_keys=True))
