from __future__ import annotations

import typer

from pubg_graph.cli.query import app as query_app
from pubg_graph.cli.serve import serve_cmd
from pubg_graph.core.config import settings
from pubg_graph.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(query_app, name="query")
app.command("serve")(serve_cmd)


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)
