from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

import httpx


class TransportResponse(Protocol):
    status: int
    status_text: str
    headers: Sequence[tuple[str, str]]

    async def json(self) -> Any: ...

    async def text(self) -> str: ...


class SendFn(Protocol):
    async def __call__(
            self,
            url: str,
            *,
            method: str,
            headers: Mapping[str, str],
            body: str | None = None,
    ) -> TransportResponse: ...


class HttpxResponse:
    """Adapts a fully read httpx.Response to the TransportResponse contract."""

    def __init__(self, response: httpx.Response):
        self._r = response
        self.status = response.status_code
        self.status_text = response.reason_phrase
        self.headers = response.headers.multi_items()

    async def json(self) -> Any:
        return self._r.json()

    async def text(self) -> str:
        return self._r.text


class HttpxTransport:
    def __init__(self, client: httpx.AsyncClient | None = None):
        # timeout=None: the caller's cancellation scope is the only deadline
        self._client = client or httpx.AsyncClient(timeout=None, follow_redirects=True)

    async def __call__(
            self,
            url: str,
            *,
            method: str,
            headers: Mapping[str, str],
            body: str | None = None,
    ) -> HttpxResponse:
        content = body.encode("utf-8") if body is not None else None
        r = await self._client.request(method, url, headers=dict(headers), content=content)
        return HttpxResponse(r)

    async def aclose(self) -> None:
        await self._client.aclose()
