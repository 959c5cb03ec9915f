from typing import Optional, Tuple

from httpx import Headers

from ..models.errors import InvalidArgumentError
from .constants import HEADER_CONTENT_TYPE, HEADER_ENCODING, MULTIPART_FAMILY


def is_multipart_media_type(media_type: Optional[str]) -> bool:
    """Check whether the primary type of ``media_type`` starts with "multipart"."""
    if not media_type:
        return False
    primary_type = media_type.split("/", 1)[0].strip()
    return primary_type.lower().startswith(MULTIPART_FAMILY)


class HeaderStore:
    """Ordered header collection.

    Pairs are kept as given, so names keep their case and values are never
    re-encoded. Lookups go through :class:`httpx.Headers` and are
    case-insensitive; values under one name keep their insertion order.
    """

    def __init__(self) -> None:
        self._items: list[Tuple[str, str]] = []

    @staticmethod
    def _check(name: Optional[str], value: Optional[str]) -> None:
        if not name:
            raise InvalidArgumentError("Header name must not be empty.")
        if value is None:
            raise InvalidArgumentError(f"Value of header '{name}' must not be None.")

    def add(self, name: str, value: str) -> None:
        self._check(name, value)
        self._items.append((name, value))

    def set(self, name: str, value: str) -> None:
        """Replace every value under ``name``, keeping the position of the first."""
        self._check(name, value)
        key = name.lower()
        items: list[Tuple[str, str]] = []
        replaced = False
        for existing, existing_value in self._items:
            if existing.lower() != key:
                items.append((existing, existing_value))
            elif not replaced:
                items.append((name, value))
                replaced = True
        if not replaced:
            items.append((name, value))
        self._items = items

    def remove(self, name: str) -> None:
        key = name.lower()
        self._items = [item for item in self._items if item[0].lower() != key]

    def get(self, name: str) -> Optional[str]:
        return self.snapshot().get(name)

    def get_list(self, name: str) -> list[str]:
        return self.snapshot().get_list(name)

    @property
    def content_type(self) -> Optional[str]:
        return self.get(HEADER_CONTENT_TYPE)

    def items(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._items)

    def snapshot(self) -> Headers:
        return Headers(self._items, encoding=HEADER_ENCODING)

    def copy(self) -> "HeaderStore":
        clone = HeaderStore()
        clone._items = list(self._items)
        return clone

    def __len__(self) -> int:
        return len(self._items)
