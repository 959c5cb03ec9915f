from dataclasses import dataclass
from typing import Any, Optional

from httpx import URL

from ._attachments import is_attachment
from ._headers import HeaderStore, is_multipart_media_type
from ._logs import logger
from ._multivalue import MultiValueMap
from ._serialization import to_json_text
from ._uri import append_query_params
from .constants import (
    HEADER_CONTENT_TYPE,
    MULTIPART_BODY_KEY,
    MULTIPART_FORM_DATA,
    MULTIPART_MIXED,
)


@dataclass(frozen=True)
class ResolvedPayload:
    uri: URL
    headers: HeaderStore
    payload: Any
    multipart: bool


class MultipartResolver:
    """Decides how the parameters and body of a request are sent.

    The resolver never touches the builder state it is given: headers and
    parameters are copied before anything is added to them.

    * No attachments: the body (when set) is the payload and the parameters
      move to the query string; without a body the parameters are the
      payload.
    * Attachments only: ``multipart/form-data`` with every parameter as a
      form field.
    * Attachments and a body: ``multipart/mixed`` with the body serialized to
      JSON under the ``"body"`` field.
    """

    def __init__(
        self,
        uri: URL,
        headers: HeaderStore,
        parameters: Optional[MultiValueMap],
        body: Any = None,
        multipart: bool = False,
    ) -> None:
        self._uri = uri
        self._headers = headers
        self._parameters = parameters
        self._body = body
        self._multipart = multipart

    def _has_attachment(self) -> bool:
        return self._parameters is not None and self._parameters.any_value(
            is_attachment
        )

    @staticmethod
    def _change_multipart_content_type(headers: HeaderStore, content_type: str) -> None:
        # an explicit multipart/* choice of the caller wins
        if not is_multipart_media_type(headers.content_type):
            headers.set(HEADER_CONTENT_TYPE, content_type)

    def resolve(self) -> ResolvedPayload:
        multipart = self._multipart or self._has_attachment()

        if not multipart:
            return self._resolve_plain()

        headers = self._headers.copy()
        parameters = (
            self._parameters.copy() if self._parameters is not None else MultiValueMap()
        )

        if self._body is None:
            self._change_multipart_content_type(headers, MULTIPART_FORM_DATA)
        else:
            self._change_multipart_content_type(headers, MULTIPART_MIXED)
            parameters.add(MULTIPART_BODY_KEY, to_json_text(self._body))

        logger.debug(
            f"Resolved multipart payload ({headers.content_type}) "
            f"with fields {list(parameters)}"
        )
        return ResolvedPayload(
            uri=self._uri,
            headers=headers,
            payload=parameters.read_only_copy(),
            multipart=True,
        )

    def _resolve_plain(self) -> ResolvedPayload:
        uri = self._uri
        if self._body is not None:
            payload = self._body
            if self._parameters is not None:
                uri = append_query_params(uri, self._parameters.items())
        elif self._parameters is not None:
            payload = self._parameters.read_only_copy()
        else:
            payload = None

        logger.debug(f"Resolved plain payload of type {type(payload).__name__}")
        return ResolvedPayload(
            uri=uri, headers=self._headers.copy(), payload=payload, multipart=False
        )
