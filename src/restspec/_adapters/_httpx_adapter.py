import asyncio
import os
from functools import lru_cache
from logging import getLogger
from typing import Any, Dict, List, Optional, Tuple, TypeVar

from httpx import AsyncClient, Client, Response
from opentelemetry import trace
from pydantic import TypeAdapter

from .._config import ClientConfig
from .._request import RestRequest
from .._utils._attachments import Attachment
from .._utils._client_kwargs import get_httpx_client_kwargs
from .._utils._multivalue import MultiValueMap
from .._utils._serialization import to_json_text
from .._utils.constants import (
    APPLICATION_FORM_URLENCODED,
    APPLICATION_JSON,
    HEADER_CONTENT_TYPE,
)
from ..models.response import ResponseEnvelope
from ._base import RestClientAdapter

T = TypeVar("T")

_tracer = trace.get_tracer("restspec")

_TEXT_PLAIN = "text/plain; charset=utf-8"
_OCTET_STREAM = "application/octet-stream"


@lru_cache(maxsize=128)
def _cached_type_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _type_adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_type_adapter(target)
    except TypeError:
        # unhashable type expressions, e.g. Annotated with list metadata
        return TypeAdapter(target)


def _field_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return to_json_text(value)


class HttpxClientAdapter(RestClientAdapter):
    """Adapter sending requests with ``httpx``.

    Args:
        client: The client used by :meth:`send`. Created from ``config`` when
            omitted.
        async_client: The client used by :meth:`asend`. Created on first use
            when omitted.
        config: Client settings; read from the environment when omitted.

    Examples:
        ```python
        from restspec import HttpxClientAdapter, with_expected_body

        request = with_expected_body(User).uri("https://api.example.com/me").get().build()

        with HttpxClientAdapter() as adapter:
            user = adapter.send_for_body(request)
        ```
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        *,
        async_client: Optional[AsyncClient] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._logger = getLogger("restspec")
        self._config = config or ClientConfig.from_env()
        self.max_workers = self._config.max_workers
        self._owns_client = client is None
        self._client = client or Client(**get_httpx_client_kwargs(self._config))
        self._owns_async_client = async_client is None
        self._client_async = async_client

    def __enter__(self) -> "HttpxClientAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpxClientAdapter":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def close(self) -> None:
        """Close the clients this adapter created.

        An async client created by :meth:`asend` can only be closed from a
        coroutine, use :meth:`aclose` or ``async with`` for that.
        """
        if self._owns_client:
            self._client.close()
        if (
            self._owns_async_client
            and self._client_async is not None
            and not self._client_async.is_closed
        ):
            self._logger.warning(
                "Async client left open, close the adapter with aclose()"
            )

    async def aclose(self) -> None:
        """Close the clients this adapter created, sync and async."""
        if self._owns_async_client and self._client_async is not None:
            await self._client_async.aclose()
        if self._owns_client:
            self._client.close()

    @property
    def async_client(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**get_httpx_client_kwargs(self._config))
        return self._client_async

    def _multipart_files(
        self, payload: MultiValueMap
    ) -> List[Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]]:
        files: List[Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]] = []
        for key, value in payload.multi_items():
            if isinstance(value, Attachment):
                files.append((key, value.to_file_tuple()))
            else:
                # parts without a filename are plain form fields
                files.append((key, (None, _field_text(value).encode("utf-8"), None)))
        return files

    def _request_kwargs(self, request: RestRequest[Any]) -> Dict[str, Any]:
        headers = request.headers
        payload = request.payload
        kwargs: Dict[str, Any] = {"headers": headers}

        if payload is None:
            return kwargs

        if isinstance(payload, MultiValueMap):
            if request.is_multipart:
                content_type = headers[HEADER_CONTENT_TYPE]
                if "boundary=" not in content_type.lower():
                    boundary = os.urandom(16).hex()
                    headers[HEADER_CONTENT_TYPE] = f"{content_type}; boundary={boundary}"
                kwargs["files"] = self._multipart_files(payload)
            else:
                headers.setdefault(HEADER_CONTENT_TYPE, APPLICATION_FORM_URLENCODED)
                kwargs["data"] = {
                    key: [_field_text(value) for value in values]
                    for key, values in payload.items()
                }
            return kwargs

        if isinstance(payload, (bytes, bytearray)):
            headers.setdefault(HEADER_CONTENT_TYPE, _OCTET_STREAM)
            kwargs["content"] = bytes(payload)
        elif isinstance(payload, str):
            headers.setdefault(HEADER_CONTENT_TYPE, _TEXT_PLAIN)
            kwargs["content"] = payload
        else:
            headers.setdefault(HEADER_CONTENT_TYPE, APPLICATION_JSON)
            kwargs["content"] = to_json_text(payload)
        return kwargs

    def _decode_body(self, request: RestRequest[T], response: Response) -> Optional[T]:
        target = (
            request.generic_response_type
            if request.generic_response_type is not None
            else request.response_type
        )
        if target is None or not response.content:
            return None
        if target is str:
            return response.text  # type: ignore[return-value]
        if target is bytes:
            return response.content  # type: ignore[return-value]
        return _type_adapter(target).validate_json(response.content)

    def _envelope(
        self, request: RestRequest[T], response: Response
    ) -> ResponseEnvelope[T]:
        return ResponseEnvelope(
            status_code=response.status_code,
            headers=response.headers,
            body=self._decode_body(request, response),
            content=response.content,
        )

    def send(self, request: RestRequest[T]) -> ResponseEnvelope[T]:
        """Send ``request`` with the synchronous client.

        Raises:
            httpx.HTTPError: Any transport failure or non-2xx status, as
                raised by httpx.
        """
        method = request.method.value
        url = str(request.uri)
        kwargs = self._request_kwargs(request)

        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {kwargs['headers']}")

        with _tracer.start_as_current_span(f"HTTP {method}") as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("url.full", url)
            response = self._client.request(method, url, **kwargs)
            span.set_attribute("http.response.status_code", response.status_code)
            response.raise_for_status()

        return self._envelope(request, response)

    async def asend(self, request: RestRequest[T]) -> ResponseEnvelope[T]:
        """Coroutine counterpart of :meth:`send`, using the async client."""
        method = request.method.value
        url = str(request.uri)
        if request.is_multipart:
            # attachments on disk are read here
            kwargs = await asyncio.to_thread(self._request_kwargs, request)
        else:
            kwargs = self._request_kwargs(request)

        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {kwargs['headers']}")

        with _tracer.start_as_current_span(f"HTTP {method}") as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("url.full", url)
            response = await self.async_client.request(method, url, **kwargs)
            span.set_attribute("http.response.status_code", response.status_code)
            response.raise_for_status()

        return self._envelope(request, response)

    async def asend_for_body(self, request: RestRequest[T]) -> Optional[T]:
        return (await self.asend(request)).body
