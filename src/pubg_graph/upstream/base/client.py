from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from pubg_graph.core.errors import UpstreamTransportError

logger = logging.getLogger(__name__)


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling.
    - Any transport/parse failure is raised as UpstreamTransportError.
    - Status codes are not interpreted here; callers validate the parsed body.
    """

    base_url: str
    timeout_s: float | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform an HTTP request and return the parsed JSON value.
        Raises UpstreamTransportError on transport issues or a non-JSON body.
        """
        url = path.lstrip("/")
        try:
            resp = await self._client.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise UpstreamTransportError(f"{method} {url} failed: {e}") from e

        logger.debug("%s %s -> %s", method, resp.request.url, resp.status_code)
        if resp.is_error:
            logger.warning("%s %s returned HTTP %s", method, resp.request.url, resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamTransportError(
                f"Response was not valid JSON (HTTP {resp.status_code} for {method} {url})."
            ) from e

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request_json("GET", path, params=params, headers=headers)
