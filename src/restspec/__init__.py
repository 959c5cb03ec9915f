"""Fluent builder for immutable HTTP request descriptors.

Examples:
    ```python
    from restspec import HttpxClientAdapter, with_expected_body

    request = (
        with_expected_body(Item)
        .uri("https://api.example.com/items")
        .post()
        .bearer_token(token)
        .body(item)
        .add_file("image", "photo.png")
        .build()
    )

    with HttpxClientAdapter() as adapter:
        created = adapter.send_for_body(request)
    ```
"""

from ._adapters import HttpxClientAdapter, RestClientAdapter, get_default_executor
from ._builders import (
    with_expected_body,
    with_expected_generic_body,
    with_expected_map_body,
    with_no_body,
)
from ._config import ClientConfig
from ._request import HttpMethod, RestRequest
from ._specs import BodySpec, FormSpec, HeaderSpec, MethodSpec, UriSpec
from ._utils import (
    Attachment,
    MultiValueMap,
    register_param_fields,
    setup_logging,
    unregister_param_fields,
)
from .models import (
    EncodingError,
    InvalidArgumentError,
    ResponseEnvelope,
    RestSpecError,
    SerializationError,
    TransportError,
)

__all__ = [
    "Attachment",
    "BodySpec",
    "ClientConfig",
    "EncodingError",
    "FormSpec",
    "HeaderSpec",
    "HttpMethod",
    "HttpxClientAdapter",
    "InvalidArgumentError",
    "MethodSpec",
    "MultiValueMap",
    "ResponseEnvelope",
    "RestClientAdapter",
    "RestRequest",
    "RestSpecError",
    "SerializationError",
    "TransportError",
    "UriSpec",
    "get_default_executor",
    "register_param_fields",
    "setup_logging",
    "unregister_param_fields",
    "with_expected_body",
    "with_expected_generic_body",
    "with_expected_map_body",
    "with_no_body",
]
