"""Field enumeration for bulk parameter assignment.

``FormSpec.set_params`` turns an arbitrary object into query or form
parameters. The fields of an object are found, in order, through:

1. an enumerator registered for its type (or a base type) with
   :func:`register_param_fields`;
2. the declared fields of a pydantic model;
3. the fields of a dataclass;
4. its instance attributes (``__dict__`` and ``__slots__``).

Class-level attributes are never included.
"""

import dataclasses
from collections.abc import Collection, Mapping
from typing import Any, Callable, Iterable, Iterator, Tuple

from pydantic import BaseModel

from ..models.errors import InvalidArgumentError

FieldEnumerator = Callable[[Any], Iterable[Tuple[str, Any]]]

_registry: dict[type, FieldEnumerator] = {}


def register_param_fields(
    cls: type, enumerator: FieldEnumerator | None = None
) -> Any:
    """Register how instances of ``cls`` are flattened into parameters.

    Can be called directly or used as a decorator on the enumerator::

        @register_param_fields(Point)
        def _point_fields(point):
            yield "x", point.x
            yield "y", point.y
    """
    if enumerator is not None:
        _registry[cls] = enumerator
        return enumerator

    def decorator(func: FieldEnumerator) -> FieldEnumerator:
        _registry[cls] = func
        return func

    return decorator


def unregister_param_fields(cls: type) -> None:
    _registry.pop(cls, None)


def is_value_sequence(value: Any) -> bool:
    """Whether ``value`` is a collection that expands into repeated parameters."""
    return isinstance(value, Collection) and not isinstance(
        value, (str, bytes, bytearray, Mapping)
    )


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield name


def iter_fields(obj: Any) -> Iterator[Tuple[str, Any]]:
    for klass in type(obj).__mro__:
        if klass in _registry:
            yield from _registry[klass](obj)
            return

    if isinstance(obj, BaseModel):
        for name in type(obj).model_fields:
            yield name, getattr(obj, name)
        return

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for field in dataclasses.fields(obj):
            yield field.name, getattr(obj, field.name)
        return

    found = False
    for name in _slot_names(type(obj)):
        if hasattr(obj, name):
            found = True
            yield name, getattr(obj, name)
    instance_dict = getattr(obj, "__dict__", None)
    if instance_dict is not None:
        found = True
        yield from list(instance_dict.items())
    if not found:
        raise InvalidArgumentError(
            f"Cannot enumerate fields of '{type(obj).__name__}'. "
            "Register an enumerator with register_param_fields()."
        )


def field_dict(obj: Any) -> dict[str, Any]:
    return dict(iter_fields(obj))
