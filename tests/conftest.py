from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from pubg_graph.core.config import UpstreamConfig
from pubg_graph.upstream.pubg.client import PubgClient

BASE_URL = "https://api.pubg.com/shards/steam"
BASE_PATH = "/shards/steam"


@dataclass
class FakeUpstream:
    """Serves canned JSON per path and records every request it sees."""

    routes: dict[str, Any] = field(default_factory=dict)
    status: int = 200
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(BASE_PATH)
        if path not in self.routes:
            return httpx.Response(404, json={"errors": [{"title": "Not Found"}]})
        return httpx.Response(self.status, json=self.routes[path])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, api_key: str | None = "test-key") -> PubgClient:
        config = UpstreamConfig(base_url=BASE_URL, api_key=api_key)
        return PubgClient.from_config(config, transport=self.transport)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
