from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from ..models.errors import SerializationError
from ._fields import field_dict


def _fallback(value: Any) -> Any:
    # plain objects are written as their instance fields
    return field_dict(value)


def to_json_text(body: Any) -> str:
    """Serialize ``body`` to JSON text.

    Pydantic models use their aliases; objects pydantic-core does not know are
    written as a mapping of their fields.

    Raises:
        SerializationError: If the body cannot be represented as JSON.
    """
    try:
        return to_json(body, by_alias=True, fallback=_fallback).decode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise SerializationError(type(body), str(e)) from e
