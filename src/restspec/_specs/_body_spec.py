from typing import Any

from .._request import RestRequest
from .._utils._attachments import Attachment, FileSource
from .._utils._multipart import MultipartResolver
from .._utils._multivalue import MultiValueMap
from ..models.errors import InvalidArgumentError
from ._form_spec import FormSpec
from ._header_spec import T


class BodySpec(FormSpec[T]):
    """Stage for methods with a body (POST, PUT, PATCH).

    Adds a request body and file attachments on top of the header and
    parameter operations. How body, parameters and attachments are combined
    is decided at :meth:`build` time by :class:`MultipartResolver`.
    """

    _body: Any = None
    _multipart: bool = False

    def body(self, value: Any) -> "BodySpec[T]":
        """Set the request body.

        A :class:`MultiValueMap` is treated as form data and merged into the
        parameters instead.
        """
        if isinstance(value, MultiValueMap):
            return self.set_params(value)
        self._body = value
        return self

    def add_file(self, key: str, file: FileSource) -> "BodySpec[T]":
        """Attach a file under ``key``; the request becomes multipart.

        ``file`` may be a path, an :class:`Attachment` or an open binary file.
        """
        if file is None:
            raise InvalidArgumentError("File must not be None.")
        self.add_param(key, Attachment.of(file))
        self._multipart = True
        return self

    def build(self) -> RestRequest[T]:
        """Assemble the request.

        Raises:
            SerializationError: If the body has to be written as a multipart
                field and cannot be serialized.
        """
        resolved = MultipartResolver(
            uri=self._uri,
            headers=self._headers,
            parameters=self._parameters,
            body=self._body,
            multipart=self._multipart,
        ).resolve()
        return self._new_request(resolved.uri, resolved.headers, resolved.payload)
