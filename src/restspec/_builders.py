from typing import Any, Type, TypeVar

from ._specs import UriSpec
from .models.errors import InvalidArgumentError

T = TypeVar("T")


def with_expected_body(response_type: Type[T]) -> UriSpec[T]:
    """Start a request whose response body is decoded to ``response_type``.

    Args:
        response_type: A plain class such as ``str``, ``bytes``, a pydantic
            model or a dataclass.

    Examples:
        ```python
        from restspec import with_expected_body

        request = (
            with_expected_body(User)
            .uri("https://api.example.com/users/{id}", 42)
            .get()
            .accept("application/json")
            .build()
        )
        ```
    """
    if response_type is None:
        raise InvalidArgumentError("Response type must not be None.")
    if not isinstance(response_type, type):
        raise InvalidArgumentError(
            f"'{response_type!r}' is not a class, use with_expected_generic_body()."
        )
    return UriSpec(response_type=response_type)


def with_expected_generic_body(type_token: Any) -> UriSpec[Any]:
    """Start a request whose response body is decoded to a generic type.

    Args:
        type_token: Any type expression pydantic can validate against, for
            example ``list[User]`` or ``dict[str, int]``.
    """
    if type_token is None:
        raise InvalidArgumentError("Response type must not be None.")
    return UriSpec(generic_response_type=type_token)


def with_expected_map_body() -> UriSpec[dict[str, Any]]:
    """Start a request whose response body is a JSON object."""
    return with_expected_generic_body(dict[str, Any])


def with_no_body() -> UriSpec[None]:
    """Start a request whose response body is ignored."""
    return UriSpec()
