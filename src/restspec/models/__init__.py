from .errors import (
    EncodingError,
    InvalidArgumentError,
    RestSpecError,
    SerializationError,
    TransportError,
)
from .response import ResponseEnvelope

__all__ = [
    "EncodingError",
    "InvalidArgumentError",
    "ResponseEnvelope",
    "RestSpecError",
    "SerializationError",
    "TransportError",
]
