import re
from typing import Any, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from httpx import URL, InvalidURL, QueryParams

from ..models.errors import InvalidArgumentError

_TEMPLATE_VARIABLE = re.compile(r"\{([^/{}]*)\}")


def _encode_variable(value: Any) -> str:
    return quote(_to_text(value), safe="")


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def expand_template(
    template: str,
    variables: Tuple[Any, ...] = (),
    named_variables: Optional[Mapping[str, Any]] = None,
) -> str:
    """Replace ``{name}`` placeholders with percent-encoded values.

    Positional values are consumed left to right, one per placeholder. When
    ``named_variables`` is given, placeholders are looked up by name instead
    (anything after a ``:`` in the placeholder is ignored).
    """
    remaining = iter(variables)

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1).split(":", 1)[0].strip()
        if named_variables is not None:
            if name not in named_variables:
                raise InvalidArgumentError(
                    f"Map has no value for URI template variable '{name}'."
                )
            return _encode_variable(named_variables[name])
        try:
            return _encode_variable(next(remaining))
        except StopIteration:
            raise InvalidArgumentError(
                f"Not enough variable values available to expand '{name}'."
            ) from None

    return _TEMPLATE_VARIABLE.sub(substitute, template)


def parse_uri(uri: Union[str, URL]) -> URL:
    if uri is None:
        raise InvalidArgumentError("URI must not be None.")
    if isinstance(uri, URL):
        return uri
    if not str(uri).strip():
        raise InvalidArgumentError("URI must not be empty.")
    try:
        return URL(uri)
    except InvalidURL as e:
        raise InvalidArgumentError(f"Invalid URI '{uri}': {e}") from e


def append_query_params(uri: URL, params: Iterable[Tuple[str, Iterable[Any]]]) -> URL:
    """Append repeated query parameters after any query already in ``uri``.

    A key whose value list is empty contributes nothing.
    """
    pairs = [(key, _to_text(value)) for key, values in params for value in values]
    if not pairs:
        return uri
    extra = str(QueryParams(pairs))
    existing = uri.query.decode("ascii")
    query = f"{existing}&{extra}" if existing else extra
    return uri.copy_with(query=query.encode("ascii"))
