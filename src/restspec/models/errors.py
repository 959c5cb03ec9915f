from httpx import HTTPError

TransportError = HTTPError
"""Failures raised by the transport while sending a request.

Adapters let ``httpx`` errors propagate unmodified, so this is an alias rather
than a wrapper type.
"""


class RestSpecError(Exception):
    """Base class for errors raised while building a request."""


class InvalidArgumentError(RestSpecError, ValueError):
    """Raised when a builder operation receives an unusable argument."""


class EncodingError(InvalidArgumentError):
    def __init__(self, charset: str = "ISO-8859-1") -> None:
        self.charset = charset
        super().__init__(
            f"Username or password contains characters that cannot be encoded to {charset}"
        )


class SerializationError(RestSpecError):
    """Raised when a request body cannot be converted to text.

    The underlying serializer error is chained as ``__cause__``.
    """

    def __init__(self, body_type: type, reason: str) -> None:
        self.body_type = body_type
        self.message = f"Unable to serialize body of type '{body_type.__name__}': {reason}"
        super().__init__(self.message)
