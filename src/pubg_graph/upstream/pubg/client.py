from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pubg_graph.core.config import UpstreamConfig
from pubg_graph.upstream.base.client import BaseHttpClient
from pubg_graph.upstream.pubg.validators import validate_api_key, validate_response

logger = logging.getLogger(__name__)

JSON_API_MEDIA_TYPE = "application/vnd.api+json"

Envelope = dict[str, Any]


class PubgClient:
    """One GET per logical request against the PUBG JSON:API."""

    def __init__(self, *, http: BaseHttpClient, config: UpstreamConfig) -> None:
        self.http = http
        self.config = config

    @classmethod
    def from_config(
        cls, config: UpstreamConfig, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> PubgClient:
        http = BaseHttpClient(
            base_url=config.base_url,
            timeout_s=config.timeout_s,
            headers={"accept": JSON_API_MEDIA_TYPE},
            transport=transport,
        )
        return cls(http=http, config=config)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> PubgClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "accept": JSON_API_MEDIA_TYPE,
            "Authorization": f"Bearer {self.config.api_key}",
        }

    async def fetch(
        self,
        path: str,
        is_array: bool = False,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Envelope:
        """GET `path`, validate the envelope and return it un-normalized."""
        # Credential check happens before any I/O.
        validate_api_key(self.config)

        envelope = await self.http.get_json(path, params=params, headers=self._headers())
        validate_response(envelope, is_array, path=path)
        return envelope
