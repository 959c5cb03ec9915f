from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from httpx import Headers

T = TypeVar("T")


@dataclass(frozen=True)
class ResponseEnvelope(Generic[T]):
    """The outcome of sending a :class:`~restspec.RestRequest`.

    ``body`` holds the response decoded to the request's declared type, or
    ``None`` for typeless exchanges and empty responses. ``content`` always
    keeps the raw bytes.
    """

    status_code: int
    headers: Headers
    body: Optional[T] = None
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
