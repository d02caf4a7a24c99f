from __future__ import annotations

import json
from typing import Any

import pytest


class FakeResponse:
    def __init__(
            self,
            *,
            status: int = 200,
            status_text: str = "OK",
            headers: list[tuple[str, str]] | None = None,
            body: str = "",
    ):
        self.status = status
        self.status_text = status_text
        self.headers = headers or []
        self._body = body

    async def json(self) -> Any:
        return json.loads(self._body)

    async def text(self) -> str:
        return self._body


class FakeTransport:
    """Records every call and replies with a canned response or exception."""

    def __init__(self, reply: FakeResponse | BaseException | None = None):
        self.reply = reply if reply is not None else FakeResponse()
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, url, *, method, headers, body=None):
        self.calls.append({"url": url, "method": method, "headers": dict(headers), "body": body})
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply


def json_response(payload: Any, *, status: int = 200, status_text: str = "OK") -> FakeResponse:
    return FakeResponse(
        status=status,
        status_text=status_text,
        headers=[("content-type", "application/json")],
        body=json.dumps(payload),
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
