from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

from pubg_graph.core.config import Settings, settings as default_settings
from pubg_graph.graphql.schema import schema
from pubg_graph.upstream.pubg.client import PubgClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    ASGI app serving the GraphQL schema.

    One PubgClient is shared by all requests for the lifetime of the app.
    """
    settings = settings or default_settings
    config = settings.upstream_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not config.api_key:
            logger.warning("PUBG_API_KEY is not set; every query will fail until it is configured.")
        client = PubgClient.from_config(config, transport=transport)
        app.state.pubg_client = client
        try:
            yield
        finally:
            await client.aclose()

    async def get_context(request: Request) -> dict[str, Any]:
        return {"client": request.app.state.pubg_client}

    graphql_app = GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )

    app = FastAPI(title="pubg-graph", lifespan=lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(graphql_app)
    return app
