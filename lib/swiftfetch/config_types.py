from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Sequence, Union

Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
ParamValue = Union[str, int, float]
Params = Union[Mapping[str, ParamValue], Sequence[tuple[str, ParamValue]]]


@dataclass(frozen=True)
class ClientConfig:
    base_url: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout_ms: float | None = None

    def __post_init__(self) -> None:
        # detach from the caller's dict so later mutation can't leak in
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))


@dataclass(frozen=True)
class RequestSpec:
    url: str
    method: Method
    data: Any = None
    params: Params | None = None
    headers: Mapping[str, str] | None = None
    timeout_ms: float | None = None
