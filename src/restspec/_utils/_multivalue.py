from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from ..models.errors import InvalidArgumentError


class MultiValueMap(MutableMapping[str, List[Any]]):
    """Ordered multi-map from string keys to lists of values.

    Keys keep their first-insertion order and each key keeps the order in
    which its values were added. Values are never de-duplicated.

    A map returned by :meth:`read_only_copy` rejects every mutation with
    ``TypeError``; reading a key from it returns a fresh list.
    """

    def __init__(
        self,
        initial: Optional[
            Union[Mapping[str, Iterable[Any]], Iterable[Tuple[str, Any]]]
        ] = None,
    ) -> None:
        self._data: dict[str, List[Any]] = {}
        self._read_only = False
        if initial is None:
            return
        if isinstance(initial, Mapping):
            self.merge(initial)
        else:
            for key, value in initial:
                self.add(key, value)

    def _check_writable(self) -> None:
        if self._read_only:
            raise TypeError("MultiValueMap is read-only")

    @staticmethod
    def _check_key(key: Any) -> str:
        if key is None:
            raise InvalidArgumentError("Key must not be None.")
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"Key must be a string, got '{type(key).__name__}'."
            )
        return key

    def __getitem__(self, key: str) -> List[Any]:
        values = self._data[key]
        return list(values) if self._read_only else values

    def __setitem__(self, key: str, values: Iterable[Any]) -> None:
        self._check_writable()
        self._data[self._check_key(key)] = list(values)

    def __delitem__(self, key: str) -> None:
        self._check_writable()
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    @property
    def read_only(self) -> bool:
        return self._read_only

    def add(self, key: str, value: Any) -> None:
        self._check_writable()
        self._data.setdefault(self._check_key(key), []).append(value)

    def add_all(self, key: str, values: Iterable[Any]) -> None:
        self._check_writable()
        self._data.setdefault(self._check_key(key), []).extend(values)

    def merge(self, other: Mapping[str, Iterable[Any]]) -> None:
        """Append every value list of ``other`` to the list under the same key.

        Keys missing from this map are created, including keys whose list is
        empty.
        """
        for key, values in other.items():
            self.add_all(key, [] if values is None else values)

    def get_first(self, key: str, default: Any = None) -> Any:
        values = self._data.get(key)
        return values[0] if values else default

    def multi_items(self) -> List[Tuple[str, Any]]:
        return [(key, value) for key, values in self._data.items() for value in values]

    def any_value(self, predicate) -> bool:
        return any(predicate(value) for values in self._data.values() for value in values)

    def copy(self) -> "MultiValueMap":
        clone = MultiValueMap()
        clone._data = {key: list(values) for key, values in self._data.items()}
        return clone

    def read_only_copy(self) -> "MultiValueMap":
        clone = self.copy()
        clone._read_only = True
        return clone
