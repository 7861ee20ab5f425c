"""Response descriptor and request outcome models."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from multidict import CIMultiDict

from ..exceptions import ApiError, TransportError


@dataclass(frozen=True)
class ApiResponse:
    """Terminal HTTP response as seen by the client."""

    method: str
    url: str
    status: int
    body: str  # Decoded response text
    headers: Mapping[str, str] = field(default_factory=CIMultiDict)  # Repeated headers kept

    @property
    def ok(self) -> bool:
        """Any 2xx or 3xx status counts as success."""
        return 200 <= self.status < 400

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


@dataclass(frozen=True)
class Success:
    """Request answered with a 2xx/3xx status."""

    value: Any  # Decoded JSON body
    response: ApiResponse

    ok: ClassVar[bool] = True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ApiFailure:
    """Request answered with a status outside 200-399."""

    response: ApiResponse

    ok: ClassVar[bool] = False

    @property
    def status(self) -> int:
        return self.response.status

    def unwrap(self) -> Any:
        raise ApiError(self.response)


@dataclass(frozen=True)
class TransportFailure:
    """No HTTP response was obtained (DNS, refused connection, timeout)."""

    method: str
    url: str
    error: BaseException

    ok: ClassVar[bool] = False

    def unwrap(self) -> Any:
        raise TransportError(f"{self.method} {self.url} failed: {self.error!r}") from self.error


Result = Success | ApiFailure | TransportFailure
