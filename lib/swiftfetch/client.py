from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, TypeVar
from urllib.parse import urlencode

from .config_types import ClientConfig, Method, Params, RequestSpec
from .errors import RequestTimeoutError, normalize_error
from .transport import HttpxTransport, SendFn, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Response(Generic[T]):
    data: T
    status: int
    status_text: str
    headers: dict[str, str]

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def build_url(base_url: str | None, url: str, params: Params | None = None) -> str:
    """Concatenate base and url, then append params as a query string.

    Values go through str() as-is, so 1.0 is sent as "1.0" rather than "1".
    """
    full_url = f"{base_url}{url}" if base_url else url
    if not params:
        return full_url
    items = params.items() if isinstance(params, Mapping) else params
    query = urlencode([(str(k), str(v)) for k, v in items])
    sep = "&" if "?" in full_url else "?"
    return f"{full_url}{sep}{query}"


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged


def flatten_headers(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in pairs:
        result[key] = value
    return result


def _find_header(pairs: Iterable[tuple[str, str]], name: str) -> str | None:
    found = None
    for key, value in pairs:
        if key.lower() == name:
            found = value
    return found


class HttpClient:
    """Thin async HTTP client: verb shorthands, base URL, JSON in/out, timeouts.

    Non-2xx responses are returned as ordinary `Response` objects. Only
    transport failures, timeouts and unparsable bodies raise.
    """

    def __init__(self, cfg: ClientConfig | None = None, *, transport: SendFn | None = None):
        self._cfg = cfg or ClientConfig()
        self._owns_transport = transport is None
        self._send: SendFn = transport or HttpxTransport()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._send.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def request(self, spec: RequestSpec) -> Response[Any]:
        url = build_url(self._cfg.base_url, spec.url, spec.params)
        headers = merge_headers(self._cfg.headers, spec.headers)

        # only the call's own timeout arms a timer, never ClientConfig.timeout_ms
        timeout_ms = spec.timeout_ms
        scope = asyncio.timeout(timeout_ms / 1000) if timeout_ms and timeout_ms > 0 else None

        logger.debug("%s %s", spec.method, url)
        try:
            body = None
            if spec.data is not None:
                body = json.dumps(spec.data)
                if not any(k.lower() == "content-type" for k in headers):
                    headers["Content-Type"] = JSON_CONTENT_TYPE

            if scope is None:
                r = await self._send(url, method=spec.method, headers=headers, body=body)
            else:
                async with scope:
                    r = await self._send(url, method=spec.method, headers=headers, body=body)
            data = await self._parse_body(r)
        except Exception as exc:
            err = normalize_error(exc, timed_out=scope is not None and scope.expired())
            if isinstance(err, RequestTimeoutError):
                logger.warning("%s %s timed out after %sms", spec.method, url, timeout_ms)
            else:
                logger.debug("%s %s failed: %r", spec.method, url, exc)
            raise err from exc

        logger.debug("%s %s -> %s", spec.method, url, r.status)
        return Response(
            data=data,
            status=r.status,
            status_text=r.status_text,
            headers=flatten_headers(r.headers),
        )

    @staticmethod
    async def _parse_body(r: TransportResponse) -> Any:
        content_type = _find_header(r.headers, "content-type")
        if content_type and JSON_CONTENT_TYPE in content_type:
            return await r.json()
        return await r.text()

    async def _call(
            self,
            method: Method,
            url: str,
            *,
            data: Any = None,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        spec = RequestSpec(
            url=url,
            method=method,
            data=data,
            params=params,
            headers=headers,
            timeout_ms=timeout_ms,
        )
        return await self.request(spec)

    async def get(
            self,
            url: str,
            *,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        return await self._call("GET", url, params=params, headers=headers, timeout_ms=timeout_ms)

    async def delete(
            self,
            url: str,
            *,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        return await self._call("DELETE", url, params=params, headers=headers, timeout_ms=timeout_ms)

    async def post(
            self,
            url: str,
            data: Any = None,
            *,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        return await self._call("POST", url, data=data, params=params, headers=headers, timeout_ms=timeout_ms)

    async def put(
            self,
            url: str,
            data: Any = None,
            *,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        return await self._call("PUT", url, data=data, params=params, headers=headers, timeout_ms=timeout_ms)

    async def patch(
            self,
            url: str,
            data: Any = None,
            *,
            params: Params | None = None,
            headers: Mapping[str, str] | None = None,
            timeout_ms: float | None = None,
    ) -> Response[Any]:
        return await self._call("PATCH", url, data=data, params=params, headers=headers, timeout_ms=timeout_ms)
