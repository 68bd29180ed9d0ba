from __future__ import annotations

import typer
import uvicorn

from pubg_graph.core.config import settings
from pubg_graph.core.logging import configure_logging


def serve_cmd(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to HOST)."),
    port: int | None = typer.Option(None, "--port", help="Bind port (defaults to PORT)."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Serve the GraphQL API with uvicorn."""

    configure_logging(settings.log_level)
    uvicorn.run(
        "pubg_graph.graphql.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
