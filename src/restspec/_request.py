from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from httpx import URL, Headers

from ._utils._headers import is_multipart_media_type
from ._utils.constants import HEADER_CONTENT_TYPE, HEADER_ENCODING
from .models.errors import InvalidArgumentError

T = TypeVar("T")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RestRequest(Generic[T]):
    """A fully assembled HTTP request, ready to be handed to an adapter.

    Instances are produced by the builder returned from
    :func:`~restspec.with_expected_body` and its siblings, and are never
    modified afterwards. The same request can be sent any number of times,
    from any number of threads.

    Attributes:
        uri: The target URI, query string included.
        method: The HTTP method.
        header_items: The request headers as ``(name, value)`` pairs.
        payload: ``None``, the scalar body, or a read-only
            :class:`~restspec.MultiValueMap` of form fields and attachments.
        response_type: The plain class the response body is decoded to.
        generic_response_type: A generic type expression (``list[Item]``)
            the response body is decoded to. Never set together with
            ``response_type``.
    """

    uri: URL
    method: HttpMethod
    header_items: Tuple[Tuple[str, str], ...] = ()
    payload: Any = None
    response_type: Optional[Type[T]] = None
    generic_response_type: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.response_type is not None and self.generic_response_type is not None:
            raise InvalidArgumentError(
                "Only one of response_type or generic_response_type can be provided"
            )

    def __hash__(self) -> int:
        # payloads and type expressions may be unhashable
        return hash((self.uri, self.method, self.header_items))

    @property
    def headers(self) -> Headers:
        """A copy of the request headers; changing it does not affect the request."""
        return Headers(list(self.header_items), encoding=HEADER_ENCODING)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get(HEADER_CONTENT_TYPE)

    @property
    def is_multipart(self) -> bool:
        return is_multipart_media_type(self.content_type)

    @property
    def expects_body(self) -> bool:
        return self.response_type is not None or self.generic_response_type is not None
